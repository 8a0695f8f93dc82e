"""Branch model and related enums"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from git_recent.constants import SHORT_SHA_LENGTH


@dataclass(frozen=True)
class BranchRecord:
    """A local branch and the tip commit it points at."""
    name: str
    ref_name: str
    commit_sha: str
    committed_at: datetime  # tz-aware, in the committer's offset
    summary: str
    author_name: str
    is_current: bool = False

    @property
    def short_sha(self) -> str:
        return self.commit_sha[:SHORT_SHA_LENGTH]

    @property
    def timestamp(self) -> int:
        return int(self.committed_at.timestamp())


class SwitchOutcome(Enum):
    """What happened when a branch was picked."""
    SWITCHED = "switched"
    ALREADY_CURRENT = "already-current"


@dataclass
class SwitchResult:
    """Result of switching to a picked branch."""
    outcome: SwitchOutcome
    branch: str

    @property
    def message(self) -> str:
        if self.outcome is SwitchOutcome.ALREADY_CURRENT:
            return f"Already on '{self.branch}'"
        return f"Switched to branch '{self.branch}'"
