"""Branch name and commit formatting utilities."""

from datetime import datetime
from typing import Optional

from git_recent.constants import SYMBOL_CURRENT_BRANCH
from git_recent.models.branch import BranchRecord
from .date import format_relative_time


def format_branch_name(name: str, is_current: bool = False) -> str:
    """
    Format branch name with the current branch marker.

    Args:
        name: Branch name
        is_current: Whether this is the checked out branch

    Returns:
        "* name" for the current branch, the bare name otherwise
    """
    return f"{SYMBOL_CURRENT_BRANCH}{name}" if is_current else name


def format_commit_info(record: BranchRecord, now: Optional[datetime] = None) -> str:
    """Short sha, relative commit time and author, e.g. "1a2b3c4d (2 days ago) Jane"."""
    return f"{record.short_sha} ({format_relative_time(record.committed_at, now)}) {record.author_name}"
