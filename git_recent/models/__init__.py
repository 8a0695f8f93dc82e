"""Data models for git-recent."""

from .branch import BranchRecord, SwitchOutcome, SwitchResult

__all__ = ["BranchRecord", "SwitchOutcome", "SwitchResult"]
