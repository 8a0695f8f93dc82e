"""Custom exceptions for git-recent"""

from typing import Optional


class GitRecentError(Exception):
    """Base exception for all git-recent errors."""
    pass


class GitOperationError(GitRecentError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RepositoryNotFoundError(GitOperationError):
    """Exception raised when the path is not a usable git repository."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__("open_repository", message=message or f"No git repository at '{path}'")


class RepositoryStateError(GitRecentError):
    """Exception raised when the repository is in the middle of an operation."""

    def __init__(self, state: str):
        self.state = state
        super().__init__("Repository is not in a clean state (in the middle of a merge?), aborting")


class CheckoutError(GitOperationError):
    """Exception raised when git refuses to switch branches."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("checkout", branch, message)
