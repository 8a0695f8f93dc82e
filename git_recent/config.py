"""Configuration handling for git-recent"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration for git-recent with validation."""

    repo_path: str = "."
    limit: Optional[int] = None  # None = show every local branch

    interactive: bool = True
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_limit()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not str(self.repo_path).strip():
            raise ValueError("repo_path cannot be empty")
        self.repo_path = str(self.repo_path).strip()

    def _validate_limit(self):
        """Validate limit is positive when set."""
        if self.limit is not None and self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "limit": self.limit,
            "interactive": self.interactive,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {"repo_path", "limit", "interactive", "verbose", "debug"}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
