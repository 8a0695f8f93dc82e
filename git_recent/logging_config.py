"""Logging configuration for git-recent.

Console output goes to stderr so it never mixes with the branch listing on
stdout. While the picker owns the terminal, records go to a log file under
the user's home directory instead.
"""
import logging
import sys
from pathlib import Path

PACKAGE_PREFIX = 'git_recent.'

LOG_FILE = Path('.git-recent') / 'git-recent.log'

CONSOLE_FORMAT = 'git-recent: %(levelname)s: %(message)s'
DETAILED_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',     # Cyan
    logging.INFO: '\033[32m',      # Green
    logging.WARNING: '\033[33m',   # Yellow
    logging.ERROR: '\033[31m',     # Red
    logging.CRITICAL: '\033[35m',  # Magenta
}
RESET = '\033[0m'


class LevelColorFormatter(logging.Formatter):
    """Colours the level name when stderr is a terminal.

    The colour is applied to a copy of the record; other handlers see the
    original level name.
    """

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None or not sys.stderr.isatty():
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    """Return the path of the log file used in TUI and debug mode."""
    return Path.home() / LOG_FILE


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def _file_handler() -> logging.Handler:
    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')  # one run per file
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    fmt = DETAILED_FORMAT if debug else CONSOLE_FORMAT
    handler.setFormatter(LevelColorFormatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> None:
    """
    Configure the root logger for one run.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages with timestamps and also write them to the log file
        tui_mode: Log to the file only; the picker owns the terminal
    """
    level = _level_for(verbose, debug)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers = []
    if tui_mode or debug:
        handlers.append(_file_handler())
    if not tui_mode:
        handlers.append(_console_handler(level, debug))

    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(min(h.level for h in handlers))


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, named without the package prefix (e.g. "tui")."""
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
