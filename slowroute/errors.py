"""Error taxonomy for the request pipeline.

Errors are tagged with an :class:`ErrorKind` so the translator can tell a
deadline expiry apart from everything else without looking at messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    TIMEOUT = "timeout"
    OTHER = "other"


class ServiceError(Exception):
    kind: ErrorKind = ErrorKind.OTHER


class Elapsed(ServiceError):
    """The inner handler did not finish before the deadline."""

    kind = ErrorKind.TIMEOUT

    def __init__(self) -> None:
        super().__init__("request timed out")


class HandlerError(ServiceError):
    """Any failure raised by a route handler."""

    kind = ErrorKind.OTHER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(HandlerError):
    """A request parameter could not be parsed."""


def classify_error(exc: BaseException) -> ErrorKind:
    """Return the kind of ``exc``, looking through wrapped causes.

    An exception raised ``from`` (or while handling) an :class:`Elapsed` is
    still a timeout.
    """
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ServiceError) and current.kind is ErrorKind.TIMEOUT:
            return ErrorKind.TIMEOUT
        current = current.__cause__ or current.__context__
    return ErrorKind.OTHER


def error_message(exc: BaseException) -> str:
    if isinstance(exc, HandlerError):
        return exc.message
    return str(exc) or type(exc).__name__
