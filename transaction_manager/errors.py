"""
Error taxonomy surfaced by the transaction services.

Each error carries a human-readable message plus the status code and title a
transport adapter should use when translating it into a response.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict

INTERNAL_ERROR_MESSAGE = "Internal server error"


class TransactionError(Exception):
    """Base class for every error the services raise on purpose."""

    status_code: ClassVar[int] = 500
    title: ClassVar[str] = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(TransactionError, ValueError):
    """Caller-supplied input failed a validation rule."""

    status_code = 400
    title = "Bad Request"


class NotFoundError(TransactionError, LookupError):
    """The referenced transaction does not exist."""

    status_code = 404
    title = "Not Found"


class InternalError(TransactionError):
    """Unexpected failure; the message never carries internal detail."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


def to_problem_detail(exc: BaseException) -> Dict[str, Any]:
    """
    Render an exception as a problem-detail payload.

    Anything that is not a TransactionError is reported as a generic internal
    error.
    """
    if not isinstance(exc, TransactionError):
        exc = InternalError()
    return {"status": exc.status_code, "title": exc.title, "detail": exc.message}


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "InternalError",
    "InvalidArgumentError",
    "NotFoundError",
    "TransactionError",
    "to_problem_detail",
]
