"""
Repository contract for transaction storage.

Backends implement the TransactionRepository protocol (or subclass the
AbstractTransactionRepository helper). Services depend only on this contract,
so a different backend can be swapped in without touching them.
"""

from __future__ import annotations

import abc
from typing import Optional, Protocol, runtime_checkable

from transaction_manager.domain.models import Transaction
from transaction_manager.domain.page import Page


@runtime_checkable
class TransactionRepository(Protocol):
    """
    Storage contract for transactions.

    Implementations must be safe to call from many threads at once: a reader
    sees either the state before or after any write, never a mix of both.
    Repositories do not validate record content.
    """

    def save(self, transaction: Transaction) -> Transaction:
        """
        Insert or overwrite a transaction by id (last writer wins).

        Raises
        ------
        InvalidArgumentError
            If the transaction or its id is missing.
        """
        ...

    def find_by_id(self, transaction_id: Optional[str]) -> Optional[Transaction]:
        """Return the transaction for `transaction_id`, or None when unknown."""
        ...

    def find_page(self, page: int, size: int) -> Page[Transaction]:
        """
        Return one 1-based page plus the total count, taken from one snapshot.

        Pages past the end have empty `data` and the correct `total`.
        """
        ...

    def delete_by_id(self, transaction_id: Optional[str]) -> bool:
        """Remove a transaction; return whether anything was removed."""
        ...

    def exists_by_id(self, transaction_id: Optional[str]) -> bool:
        ...


class AbstractTransactionRepository(abc.ABC):
    """
    Optional ABC helper for class-based backends.
    """

    @abc.abstractmethod
    def save(self, transaction: Transaction) -> Transaction:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def find_by_id(self, transaction_id: Optional[str]) -> Optional[Transaction]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def find_page(self, page: int, size: int) -> Page[Transaction]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def delete_by_id(self, transaction_id: Optional[str]) -> bool:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def exists_by_id(self, transaction_id: Optional[str]) -> bool:  # pragma: no cover
        raise NotImplementedError


__all__ = [
    "AbstractTransactionRepository",
    "TransactionRepository",
]
