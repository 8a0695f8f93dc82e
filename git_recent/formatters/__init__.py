"""Formatting utilities for git-recent.

- date: relative commit times
- branch: branch names and commit summaries
"""

from .date import format_relative_time
from .branch import format_branch_name, format_commit_info

__all__ = [
    "format_relative_time",
    "format_branch_name",
    "format_commit_info",
]
