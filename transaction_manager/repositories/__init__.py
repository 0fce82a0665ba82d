"""
Repositories package for the transaction manager.

Re-exports the storage contract and the in-memory backend so callers can
import from `transaction_manager.repositories` directly.
"""

from transaction_manager.repositories.abstract import (
    AbstractTransactionRepository,
    TransactionRepository,
)
from transaction_manager.repositories.memory import InMemoryTransactionRepository

__all__ = [
    # Abstracts
    "AbstractTransactionRepository",
    "TransactionRepository",
    # Backends
    "InMemoryTransactionRepository",
]
