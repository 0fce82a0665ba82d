"""
Query side: single lookups and pagination.
"""
from __future__ import annotations

from typing import Optional

from transaction_manager.config import get_settings
from transaction_manager.domain.page import Page
from transaction_manager.errors import InvalidArgumentError, NotFoundError
from transaction_manager.repositories.abstract import TransactionRepository
from transaction_manager.services.base import use_case, validate_id
from transaction_manager.services.dto import TransactionView
from transaction_manager.utils.logging import get_logger

log = get_logger(__name__)


def validate_pagination(page: int, size: int, max_page_size: int) -> None:
    """Check page first, then size against both bounds."""
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidArgumentError("page number must be an integer")
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError("page size must be an integer")
    if page < 1:
        raise InvalidArgumentError("page number must be greater than 0")
    if size < 1:
        raise InvalidArgumentError("page size must be greater than 0")
    if size > max_page_size:
        raise InvalidArgumentError(f"page size must be less than max ({max_page_size})")


class TransactionQueryService:
    """Read-only use cases returning `TransactionView` projections."""

    def __init__(self, repository: TransactionRepository, max_page_size: Optional[int] = None) -> None:
        self._repository = repository
        if max_page_size is None:
            max_page_size = get_settings().max_page_size
        if max_page_size < 1:
            raise InvalidArgumentError("max page size must be greater than 0")
        self.max_page_size = max_page_size

    @use_case
    def get_transaction_by_id(self, transaction_id: Optional[str]) -> TransactionView:
        transaction_id = validate_id(transaction_id)
        transaction = self._repository.find_by_id(transaction_id)
        if transaction is None:
            log.debug("Lookup of unknown transaction", extra={"transaction_id": transaction_id})
            raise NotFoundError(f"Transaction not found with id: {transaction_id}")
        return TransactionView.from_entity(transaction)

    @use_case
    def get_page_transactions(self, page: int, size: int) -> Page[TransactionView]:
        validate_pagination(page, size, self.max_page_size)
        result = self._repository.find_page(page, size)
        return Page[TransactionView](
            total=result.total,
            data=[TransactionView.from_entity(transaction) for transaction in result.data],
        )


__all__ = ["TransactionQueryService", "validate_pagination"]
