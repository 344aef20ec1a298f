"""Exceptions raised while assigning a reviewer.

Everything raised on purpose by ``review_assigner`` extends
:class:`ReviewerAssignerError`, so the entry point can catch one type and
turn it into a non-zero exit status.
"""


class ReviewerAssignerError(Exception):
    """Base exception for all reviewer assigner errors."""


class ConfigError(ReviewerAssignerError):
    """Raised when a required input is missing or malformed."""

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message)


class GitHubOperationError(ReviewerAssignerError):
    """Raised when a required GitHub API call fails."""

    def __init__(self, message: str, pr_number: int = None, username: str = None):
        self.pr_number = pr_number
        self.username = username
        super().__init__(message)
