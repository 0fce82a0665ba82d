"""
Utilities package for the transaction manager.

Exports shared helpers for logging, locking and profiling. Keep this package
free of transaction-specific logic.
"""

from transaction_manager.utils.locks import ReadWriteLock
from transaction_manager.utils.logging import configure_logging, get_logger
from transaction_manager.utils.profiler import ProfileStats, profile_block

__all__ = [
    "ReadWriteLock",
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
