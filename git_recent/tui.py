"""Interactive branch picker for git-recent using Textual."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Click
from textual.widgets import DataTable, Footer, Header, Static

from .__version__ import __version__
from .constants import PICKER_COLUMNS, PICKER_TITLE
from .formatters import format_branch_name, format_commit_info
from .logging_config import get_logger
from .models.branch import BranchRecord

logger = get_logger(__name__)

# Each branch takes two lines: name / commit info, then the commit summary
ROW_HEIGHT = 2


class NonExpandingHeader(Header):
    """Header widget that doesn't expand/contract on click."""

    def on_click(self, event: Click) -> None:
        event.stop()


class BranchPickerApp(App[Optional[BranchRecord]]):
    """Pick a branch from the recency-ordered list.

    The app exits with the highlighted BranchRecord on Enter and with None
    when cancelled.
    """

    TITLE = PICKER_TITLE
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    #branch-table {
        height: 1fr;
        margin: 1 2;
        border: round $accent;
    }

    #branch-table > .datatable--cursor {
        color: yellow;
        text-style: bold;
    }

    #status-bar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("q", "cancel", "Cancel", show=False),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, records: List[BranchRecord], now: Optional[datetime] = None):
        super().__init__()
        self.records = records
        self.now = now
        self._records_by_key: Dict[str, BranchRecord] = {}

    def compose(self) -> ComposeResult:
        yield NonExpandingHeader(show_clock=False, icon="")
        yield DataTable(id="branch-table", cursor_type="row", zebra_stripes=False)
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        for col in PICKER_COLUMNS:
            table.add_column(col.label, width=col.width or None, key=col.key)
        self._populate_table()
        table.focus()
        self._update_status()

    def _populate_table(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        self._records_by_key.clear()

        now = self.now or datetime.now(timezone.utc)
        for record in self.records:
            name = Text(format_branch_name(record.name, record.is_current))
            if record.is_current:
                name.stylize("bold cyan")
            details = Text(f"{format_commit_info(record, now)}\n{record.summary}")

            self._records_by_key[record.ref_name] = record
            table.add_row(name, details, height=ROW_HEIGHT, key=record.ref_name)

        if self.records:
            table.move_cursor(row=0)
        logger.debug(f"Populated picker with {len(self.records)} branches")

    def _update_status(self) -> None:
        status = self.query_one("#status-bar", Static)
        count = len(self.records)
        status.update(
            f"{count} branch{'es' if count != 1 else ''} | "
            "↑/↓ move | Enter checkout | Esc cancel"
        )

    @property
    def highlighted_record(self) -> Optional[BranchRecord]:
        """The record under the cursor, if any."""
        table = self.query_one(DataTable)
        if not self.records or table.cursor_row is None:
            return None
        if 0 <= table.cursor_row < len(self.records):
            return self.records[table.cursor_row]
        return None

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a row picks that branch."""
        record = self._records_by_key.get(event.row_key.value)
        logger.info(f"Selected {record.name if record else None}")
        self.exit(record)

    def action_cursor_down(self) -> None:
        self.query_one(DataTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one(DataTable).action_cursor_up()

    def action_cancel(self) -> None:
        logger.info("Selection cancelled")
        self.exit(None)
