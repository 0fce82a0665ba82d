"""
Use-case services: the public surface handed to transport adapters.
"""

from transaction_manager.services.command import TransactionCommandService
from transaction_manager.services.dto import TransactionRequest, TransactionView
from transaction_manager.services.query import TransactionQueryService

__all__ = [
    "TransactionCommandService",
    "TransactionQueryService",
    "TransactionRequest",
    "TransactionView",
]
