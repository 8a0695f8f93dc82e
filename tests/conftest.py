"""Pytest fixtures for git-recent tests"""
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import git
import pytest

from git_recent.models.branch import BranchRecord

BASE_TIMESTAMP = 1700000000  # 2023-11-14 22:13:20 UTC
DAY = 86400


def git_date(timestamp: int, offset: str = "+0000") -> str:
    """Date string in git's raw "<epoch> <offset>" format."""
    return f"{timestamp} {offset}"


def commit_file(repo, filename, content, message, timestamp, author=None, offset="+0000"):
    """Write a file and commit it with fixed author and committer dates."""
    path = Path(repo.working_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.index.add([filename])
    date = git_date(timestamp, offset)
    return repo.index.commit(
        message,
        author=author,
        committer=author,
        author_date=date,
        commit_date=date,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config(temp_dir):
    """Create a configuration dictionary."""
    return {
        'repo_path': str(temp_dir),
        'limit': None,
        'interactive': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a single commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit", BASE_TIMESTAMP)

    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a repository whose branches are not in alphabetical recency order.

    Newest first: feature/alpha, bugfix/zeta, then feature/old and main which
    share the initial commit.
    """
    repo = git_repo
    jane = git.Actor("Jane Doe", "jane@example.com")

    repo.git.checkout('-b', 'bugfix/zeta')
    commit_file(repo, "zeta.txt", "zeta\n", "Fix zeta", BASE_TIMESTAMP + DAY, author=jane)

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/alpha')
    commit_file(
        repo, "README.md", "# Test Repository\n\nAlpha\n", "Describe alpha\n\nLonger body",
        BASE_TIMESTAMP + 3 * DAY, author=jane, offset="+0200",
    )

    repo.git.checkout('main')
    repo.git.branch('feature/old')

    yield repo


@pytest.fixture
def now():
    """A fixed "now" four days after the base commit."""
    return datetime.fromtimestamp(BASE_TIMESTAMP + 4 * DAY, tz=timezone.utc)


def make_record(name, committed_at, is_current=False, summary=None, author="Jane Doe", sha=None):
    """Build a BranchRecord without touching git."""
    return BranchRecord(
        name=name,
        ref_name=f"refs/heads/{name}",
        commit_sha=sha or ("%040x" % abs(hash(name)))[:40],
        committed_at=committed_at,
        summary=summary if summary is not None else f"Work on {name}",
        author_name=author,
        is_current=is_current,
    )


@pytest.fixture
def sample_records():
    """Three records, newest first."""
    base = datetime.fromtimestamp(BASE_TIMESTAMP, tz=timezone.utc)
    return [
        make_record("feature/newest", base + timedelta(days=2), sha="a" * 40),
        make_record("main", base + timedelta(days=1), is_current=True, sha="b" * 40),
        make_record("feature/oldest", base, sha="c" * 40),
    ]
