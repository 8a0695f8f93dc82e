"""Git operations service"""
from pathlib import Path
from typing import List, Optional

import git

from git_recent.exceptions import CheckoutError, RepositoryNotFoundError
from git_recent.logging_config import get_logger
from git_recent.models.branch import BranchRecord

logger = get_logger(__name__)

# Files or directories in the git dir that mark an operation in progress
IN_PROGRESS_MARKERS = {
    "MERGE_HEAD": "merge",
    "CHERRY_PICK_HEAD": "cherry-pick",
    "REVERT_HEAD": "revert",
    "BISECT_LOG": "bisect",
    "rebase-merge": "rebase",
    "rebase-apply": "rebase",
}


class GitService:
    """Service for Git operations."""

    def __init__(self, repo_path: str):
        """Open the repository.

        Args:
            repo_path: Path to the git repository or any directory inside it

        Raises:
            RepositoryNotFoundError: If the path is missing, not a repository, or bare
        """
        self.repo_path = repo_path
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.NoSuchPathError, git.exc.InvalidGitRepositoryError) as e:
            raise RepositoryNotFoundError(repo_path) from e
        if self.repo.bare:
            raise RepositoryNotFoundError(repo_path, "Cannot operate on bare repository")
        logger.info(f"Opened repository at {self.repo.working_dir}")

    def close(self) -> None:
        self.repo.close()

    def get_in_progress_operation(self) -> Optional[str]:
        """Return the name of the operation in progress, or None if the repository is clean."""
        git_dir = Path(self.repo.git_dir)
        for marker, operation in IN_PROGRESS_MARKERS.items():
            if (git_dir / marker).exists():
                logger.debug(f"Found {marker} in {git_dir}")
                return operation
        return None

    def is_clean_state(self) -> bool:
        """Check that no merge, rebase, cherry-pick, revert or bisect is in progress."""
        return self.get_in_progress_operation() is None

    def get_current_branch_ref(self) -> Optional[str]:
        """Get the full ref name HEAD points at, or None when detached or unborn."""
        head = self.repo.head
        if head.is_detached or not head.is_valid():
            return None
        try:
            return head.ref.path
        except (TypeError, ValueError) as e:
            logger.debug(f"Could not resolve HEAD: {e}")
            return None

    def _build_record(self, head: git.Head, current_ref: Optional[str]) -> BranchRecord:
        commit = head.commit
        return BranchRecord(
            name=head.name,
            ref_name=head.path,
            commit_sha=commit.hexsha,
            committed_at=commit.committed_datetime,
            summary=str(commit.summary),
            author_name=commit.author.name or "",
            is_current=head.path == current_ref,
        )

    def list_local_branches(self) -> List[BranchRecord]:
        """Read every local branch together with its tip commit.

        Branches whose tip cannot be resolved are logged and skipped.
        """
        current_ref = self.get_current_branch_ref()
        records = []
        for head in self.repo.heads:
            try:
                records.append(self._build_record(head, current_ref))
            except (ValueError, git.exc.GitCommandError) as e:
                logger.warning(f"Skipping branch {head.name}: {e}")
        logger.debug(f"Found {len(records)} local branches")
        return records

    def checkout_branch(self, record: BranchRecord) -> None:
        """Check out a local branch by name.

        Raises:
            CheckoutError: If git refuses the checkout (e.g. local changes would be overwritten)
        """
        logger.info(f"Checking out {record.name} ({record.short_sha})")
        try:
            self.repo.git.checkout(record.name)
        except git.exc.GitCommandError as e:
            message = (e.stderr or str(e)).strip()
            # GitPython prefixes stderr with "stderr: '"
            if message.startswith("stderr: '") and message.endswith("'"):
                message = message[len("stderr: '"):-1].strip()
            raise CheckoutError(record.name, message) from e
