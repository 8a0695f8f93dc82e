"""Version information for git-recent."""

__version__ = "0.1.0"
