"""Core functionality for git-recent"""

from typing import Iterable, List, Optional, Union

from git_recent.config import Config
from git_recent.exceptions import RepositoryStateError
from git_recent.logging_config import get_logger
from git_recent.models.branch import BranchRecord, SwitchOutcome, SwitchResult
from git_recent.services.git_service import GitService

logger = get_logger(__name__)


def sort_by_recency(records: Iterable[BranchRecord]) -> List[BranchRecord]:
    """Order branches newest commit first, then by name for equal timestamps."""
    return sorted(records, key=lambda r: (-r.timestamp, r.name))


class RecentBranches:
    """Lists recently used branches and switches between them."""

    def __init__(self, config: Union[Config, dict], git_service: Optional[GitService] = None):
        """Initialize RecentBranches.

        Args:
            config: Configuration dict or Config object
            git_service: Pre-built service, opened from config.repo_path when omitted
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.git_service = git_service or GitService(self.config.repo_path)

    def ensure_clean_state(self) -> None:
        """Raise RepositoryStateError if a merge, rebase or similar is in progress."""
        operation = self.git_service.get_in_progress_operation()
        if operation:
            logger.warning(f"Repository has a {operation} in progress")
            raise RepositoryStateError(operation)

    def get_recent_branches(self) -> List[BranchRecord]:
        """Local branches, most recently committed first, trimmed to config.limit."""
        records = sort_by_recency(self.git_service.list_local_branches())
        if self.config.limit is not None:
            records = records[:self.config.limit]
        return records

    def switch_to(self, record: BranchRecord) -> SwitchResult:
        """Check out the picked branch unless it is already the current one.

        Raises:
            CheckoutError: If git refuses the checkout
        """
        if record.is_current:
            logger.info(f"{record.name} is already checked out")
            return SwitchResult(SwitchOutcome.ALREADY_CURRENT, record.name)

        self.git_service.checkout_branch(record)
        return SwitchResult(SwitchOutcome.SWITCHED, record.name)

    def close(self) -> None:
        self.git_service.close()
