"""Error taxonomy shared by the repositories, persistence adapters and services."""

from __future__ import annotations

from typing import Any, Optional


class RecordKeeperError(Exception):
    """Base class for every error raised by recordkeeper."""


class DuplicateKeyError(RecordKeeperError):
    """Raised when a record with the same identifier is already stored."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Item with ID {key} already exists.")
        self.key = key


class NotFoundError(RecordKeeperError):
    """Raised when a key or a file does not exist."""

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.key = key

    @classmethod
    def for_key(cls, key: Any) -> "NotFoundError":
        return cls(f"Item with ID {key} not found.", key=key)


class InvalidValueError(RecordKeeperError):
    """Raised when a mutation is rejected before it is applied."""


class InsufficientFundsError(InvalidValueError):
    """Raised when a withdrawal exceeds the available balance."""


class FormatError(RecordKeeperError):
    """Raised when persisted content cannot be parsed.

    ``line_number`` is 1-based and set for line oriented formats.
    """

    def __init__(
        self, message: str, line_number: Optional[int] = None, field: Optional[str] = None
    ) -> None:
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.field = field


class MissingFieldError(FormatError):
    """A delimited line has fewer fields than required."""


class InvalidFieldError(FormatError):
    """A single field of a delimited line failed type conversion."""


class PersistenceError(RecordKeeperError):
    """Raised on I/O failures other than a missing source file."""
