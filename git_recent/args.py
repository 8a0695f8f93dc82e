"""Command-line argument parsing for git-recent."""

import argparse
from typing import List, Optional

from git_recent.__version__ import __version__


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-recent",
        description="Pick a recently used local branch and check it out",
        epilog="Keys: Up/Down or j/k to move, Enter to check out, Esc or q to cancel.",
    )
    parser.add_argument(
        "-C", "--path", default=".", metavar="PATH",
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "-n", "--limit", type=positive_int, metavar="N",
        help="Only show the N most recently committed branches",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="Print the branches and exit without prompting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-recent {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
