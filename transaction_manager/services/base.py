"""
Shared plumbing for the command and query services.
"""
from __future__ import annotations

import functools
from typing import Any, Callable, Optional, TypeVar, cast

from transaction_manager.errors import InternalError, InvalidArgumentError, TransactionError
from transaction_manager.utils.logging import get_logger

log = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def validate_id(transaction_id: Optional[str]) -> str:
    if transaction_id is None or not isinstance(transaction_id, str) or not transaction_id.strip():
        raise InvalidArgumentError("Transaction ID cannot be null or empty")
    return transaction_id


def use_case(func: F) -> F:
    """
    Let TransactionError through untouched and turn anything else into InternalError.

    The original exception is logged and chained, but never exposed in the
    message.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except TransactionError:
            raise
        except Exception as exc:  # noqa: BLE001
            log.exception(f"[USE CASE FAILED] {func.__qualname__}", extra={"use_case": func.__name__})
            raise InternalError() from exc

    return cast(F, wrapper)


__all__ = ["use_case", "validate_id"]
