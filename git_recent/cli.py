"""Command-line interface for git-recent"""

import sys
from typing import List, Optional

from rich.console import Console

from .args import parse_args
from .config import Config
from .constants import CHECKOUT_HINT
from .core import RecentBranches
from .exceptions import CheckoutError, GitRecentError
from .logging_config import get_logger, setup_logging
from .services.display_service import DisplayService

console = Console()
logger = get_logger(__name__)


def _has_terminal() -> bool:
    """The picker reads keys from stdin and draws on stdout; both must be a TTY."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def _pick_branch(records):
    """Run the interactive picker and return the chosen record or None."""
    from git_recent.tui import BranchPickerApp

    return BranchPickerApp(records).run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    config = Config(
        repo_path=parsed_args.path,
        limit=parsed_args.limit,
        interactive=not parsed_args.list,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )
    setup_logging(verbose=config.verbose, debug=config.debug, tui_mode=config.interactive)

    if config.debug:
        console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {value}")

    recent = None
    try:
        recent = RecentBranches(config)
        recent.ensure_clean_state()
        records = recent.get_recent_branches()

        if not records:
            console.print("No local branches found")
            return 0

        if not config.interactive:
            DisplayService(verbose=config.verbose).display_branch_table(records)
            return 0

        if not _has_terminal():
            console.print(
                "[red]Error: Interactive mode requires a terminal. "
                "Use --list to print the branches instead.[/red]"
            )
            return 1

        selected = _pick_branch(records)
        if selected is None:
            console.print("Nothing to do")
            return 0

        result = recent.switch_to(selected)
        console.print(result.message)
        return 0
    except CheckoutError as e:
        logger.error(f"Checkout failed: {e}")
        console.print(f"[red]Failed to checkout branch: {e.message}[/red]")
        console.print(CHECKOUT_HINT)
        return 1
    except GitRecentError as e:
        logger.error(str(e))
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    finally:
        if recent:
            recent.close()


if __name__ == "__main__":
    sys.exit(main())
