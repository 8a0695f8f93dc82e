"""Tests for Config"""
import pytest

from git_recent.config import Config


class TestConfig:
    """Test configuration validation."""

    def test_defaults(self):
        config = Config()
        assert config.repo_path == "."
        assert config.limit is None
        assert config.interactive is True

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError, match="limit must be positive"):
            Config(limit=0)

    def test_empty_repo_path_rejected(self):
        with pytest.raises(ValueError, match="repo_path cannot be empty"):
            Config(repo_path="  ")

    def test_repo_path_stripped(self):
        assert Config(repo_path=" /tmp/repo ").repo_path == "/tmp/repo"

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"limit": 3, "colour": "always"})
        assert config.limit == 3
        assert not hasattr(config, "colour")

    def test_round_trip_through_dict(self):
        config = Config(repo_path="/tmp/repo", limit=5, verbose=True)
        assert Config.from_dict(config.to_dict()) == config
