"""Display service for the non-interactive branch listing"""
from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from git_recent.constants import LIST_COLUMNS, PICKER_TITLE
from git_recent.formatters import format_branch_name, format_relative_time
from git_recent.logging_config import get_logger
from git_recent.models.branch import BranchRecord

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def build_branch_table(self, records: List[BranchRecord], now: Optional[datetime] = None) -> Table:
        """Build a table of branches in the order given."""
        now = now or datetime.now(timezone.utc)
        table = Table(title=PICKER_TITLE, title_style="bold", header_style="bold")
        for col in LIST_COLUMNS:
            table.add_column(col.label, no_wrap=col.key in ("name", "sha"))

        for record in records:
            table.add_row(
                format_branch_name(record.name, record.is_current),
                record.short_sha,
                format_relative_time(record.committed_at, now),
                record.author_name,
                record.summary,
                style="bold cyan" if record.is_current else None,
            )
        return table

    def display_branch_table(self, records: List[BranchRecord]) -> None:
        """Print the branch table to the console."""
        logger.debug(f"Displaying {len(records)} branches")
        console.print(self.build_branch_table(records))
