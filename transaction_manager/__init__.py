"""
Transaction manager - concurrency-safe in-memory transaction records.

This package provides:

- A validated `Transaction` entity with create/partial-update rules
- A thread-safe in-memory repository with snapshot-consistent pagination
- Command and query services forming the public use-case surface
- A CLI with a lifecycle demo and a concurrent stress workload

Transport adapters (HTTP routing, status mapping) are expected to wrap the
services; errors carry the status hints they need.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from transaction_manager.config import Settings, get_settings
from transaction_manager.domain import (
    CreateTransactionCommand,
    Page,
    Transaction,
    TransactionType,
    UpdateTransactionCommand,
)
from transaction_manager.errors import (
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    TransactionError,
    to_problem_detail,
)
from transaction_manager.repositories import (
    AbstractTransactionRepository,
    InMemoryTransactionRepository,
    TransactionRepository,
)
from transaction_manager.services import (
    TransactionCommandService,
    TransactionQueryService,
    TransactionRequest,
    TransactionView,
)
from transaction_manager.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "CreateTransactionCommand",
    "Page",
    "Transaction",
    "TransactionType",
    "UpdateTransactionCommand",
    # Errors
    "InternalError",
    "InvalidArgumentError",
    "NotFoundError",
    "TransactionError",
    "to_problem_detail",
    # Storage
    "AbstractTransactionRepository",
    "InMemoryTransactionRepository",
    "TransactionRepository",
    # Use cases
    "TransactionCommandService",
    "TransactionQueryService",
    "TransactionRequest",
    "TransactionView",
    # Logging
    "configure_logging",
    "get_logger",
]
