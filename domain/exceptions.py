"""
Domain exceptions for the transactions service.

The HTTP layer maps each of these to a distinct status code, so they must
stay distinguishable all the way up from the use cases.
"""
from typing import Any, Optional


class TransactionsError(Exception):
    """Base class for every error raised by the transactions service."""


class InvalidIdentifierError(TransactionsError):
    """The caller-supplied user reference is not well-formed."""

    def __init__(self, raw_id: Any):
        self.raw_id = raw_id
        super().__init__(f"Invalid user ID format: {raw_id!r}")


class UserNotFoundError(TransactionsError):
    """The user reference is well-formed but no user matches it."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class MalformedRecordError(TransactionsError):
    """
    A transaction's date could not be resolved to a point in time.

    Attributes:
        transaction: The offending transaction
        index: Position of the transaction in the user's sequence (if known)
        raw_date: The raw date value that failed to parse
        user_id: Owner of the transaction (if known)
    """

    def __init__(
        self,
        transaction: Any,
        raw_date: Any,
        index: Optional[int] = None,
        user_id: Optional[str] = None,
        reason: str = "unparseable date",
    ):
        self.transaction = transaction
        self.raw_date = raw_date
        self.index = index
        self.user_id = user_id
        self.reason = reason
        where = f"transaction #{index}" if index is not None else "transaction"
        owner = f" of user {user_id}" if user_id else ""
        super().__init__(f"Malformed {where}{owner}: {reason} ({raw_date!r})")


class ProcessingError(TransactionsError):
    """Unexpected failure while normalizing or grouping transactions."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class StorageError(TransactionsError):
    """The storage collaborator failed to read user data."""
