"""
In-memory transaction repository.

A plain dict guarded by a reader/writer lock. Records are copied on the way in
and on the way out, so no caller ever holds a reference to the stored object
and an in-progress update on a caller's copy cannot be observed by readers.
"""

from __future__ import annotations

from itertools import islice
from typing import Dict, List, Optional

from transaction_manager.domain.models import Transaction
from transaction_manager.domain.page import Page
from transaction_manager.errors import InvalidArgumentError
from transaction_manager.repositories.abstract import AbstractTransactionRepository
from transaction_manager.utils.locks import ReadWriteLock
from transaction_manager.utils.logging import get_logger

log = get_logger(__name__)


class InMemoryTransactionRepository(AbstractTransactionRepository):
    """
    Process-local store keyed by transaction id.

    Iteration order is first-insertion order; overwriting an id keeps its
    original position.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Transaction] = {}
        self._lock = ReadWriteLock()

    def save(self, transaction: Transaction) -> Transaction:
        if transaction is None:
            raise InvalidArgumentError("Transaction cannot be null")
        if not transaction.id:
            raise InvalidArgumentError("Transaction ID cannot be null")

        snapshot = transaction.model_copy()
        with self._lock.write_locked():
            self._records[snapshot.id] = snapshot
        log.debug("Transaction stored", extra={"transaction_id": snapshot.id})
        return transaction

    def find_by_id(self, transaction_id: Optional[str]) -> Optional[Transaction]:
        if transaction_id is None:
            return None
        with self._lock.read_locked():
            stored = self._records.get(transaction_id)
        return stored.model_copy() if stored is not None else None

    def find_page(self, page: int, size: int) -> Page[Transaction]:
        if page < 1:
            raise InvalidArgumentError("page number must be greater than 0")
        if size < 1:
            raise InvalidArgumentError("page size must be greater than 0")

        offset = (page - 1) * size
        # total and slice must come from the same critical section
        with self._lock.read_locked():
            total = len(self._records)
            window: List[Transaction] = list(islice(self._records.values(), offset, offset + size))
        return Page[Transaction](total=total, data=[record.model_copy() for record in window])

    def delete_by_id(self, transaction_id: Optional[str]) -> bool:
        if transaction_id is None:
            return False
        with self._lock.write_locked():
            removed = self._records.pop(transaction_id, None)
        if removed is not None:
            log.debug("Transaction removed", extra={"transaction_id": transaction_id})
        return removed is not None

    def exists_by_id(self, transaction_id: Optional[str]) -> bool:
        if transaction_id is None:
            return False
        with self._lock.read_locked():
            return transaction_id in self._records

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._records)


__all__ = ["InMemoryTransactionRepository"]
