"""
Exception hierarchy for user operations.

Raised by the repository and use cases; mapped to HTTP responses by the
user controller.
"""


class UserError(Exception):
    """Base exception for all user errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFoundError(UserError):
    """Raised when no user matches the requested ID."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class UserRepositoryError(UserError):
    """Raised when the storage layer fails or rejects an operation."""
    pass
