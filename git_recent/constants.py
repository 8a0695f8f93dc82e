"""Shared constants for git-recent."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Interactive picker: name on the left, commit details on the right
PICKER_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Name"),
    ColumnDefinition("last_commit", "Last Commit"),
]

# Non-interactive --list output
LIST_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Branch"),
    ColumnDefinition("sha", "Commit", 8),
    ColumnDefinition("date", "Last Commit"),
    ColumnDefinition("author", "Author"),
    ColumnDefinition("summary", "Summary"),
]

PICKER_TITLE = "Recent branches"

SYMBOL_CURRENT_BRANCH = "* "

SHORT_SHA_LENGTH = 8

CHECKOUT_HINT = "Please commit your changes or stash them before you switch branches."
