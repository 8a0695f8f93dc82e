"""
git-recent - pick a recently used local branch and check it out
"""

from .__version__ import __version__
from .core import RecentBranches
from .cli import main

__all__ = ["RecentBranches", "main", "__version__"]
