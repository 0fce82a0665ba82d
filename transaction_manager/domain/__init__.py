"""
Domain package for the transaction manager.

Exports the entity, its commands and the page envelope. Keep this package
focused on data definitions and validation rules.
"""

from transaction_manager.domain.commands import (
    CreateTransactionCommand,
    TransactionType,
    UpdateTransactionCommand,
)
from transaction_manager.domain.models import Transaction
from transaction_manager.domain.page import Page

__all__ = [
    "CreateTransactionCommand",
    "Page",
    "Transaction",
    "TransactionType",
    "UpdateTransactionCommand",
]
