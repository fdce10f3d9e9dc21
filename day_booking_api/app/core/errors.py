"""
Error taxonomy for the booking core.

Every failure raised by the services is a ``BookingError`` carrying an
``ErrorKind`` tag.  Endpoints translate the tag into an HTTP status so
that callers can tell input problems, capacity refusals, missing rows
and store failures apart.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_FORMAT = "InvalidFormat"
    INVALID_DATE = "InvalidDate"
    WEEKEND = "Weekend"
    REQUIRED = "Required"
    WRONG_TYPE = "WrongType"
    INVALID_ID = "InvalidId"
    MISSING_PARAMETER = "MissingParameter"
    NO_CHANGES = "NoChanges"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    NOT_FOUND = "NotFound"
    STORE_ERROR = "StoreError"


class BookingError(ValueError):
    """Base class for all tagged booking failures."""

    kind: ErrorKind = ErrorKind.STORE_ERROR

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": self.message}


class InputError(BookingError):
    """Malformed, missing or mistyped input.  Never retried."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message, kind)


class CapacityExceededError(BookingError):
    kind = ErrorKind.CAPACITY_EXCEEDED


class NotFoundError(BookingError):
    kind = ErrorKind.NOT_FOUND


class StoreError(BookingError):
    """The underlying store failed; ``message`` is its diagnostic."""

    kind = ErrorKind.STORE_ERROR
