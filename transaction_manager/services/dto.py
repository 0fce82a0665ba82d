"""
Request and response shapes exchanged with the transport layer.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from transaction_manager.domain.commands import ExactDecimal, TransactionType
from transaction_manager.domain.models import Transaction


class TransactionRequest(BaseModel):
    """
    Create/update payload as handed over by the transport adapter.

    All fields are optional at this level; which ones are required depends on
    the use case and is enforced by the entity.
    """

    name: Optional[str] = Field(None, examples=["Purchase goods"])
    amount: Optional[ExactDecimal] = Field(None, examples=["100.50"])
    category: Optional[str] = Field(None, examples=["Food"])
    type: Optional[TransactionType] = Field(None, examples=["DEPOSIT"])


class TransactionView(BaseModel):
    """Read-only projection of a transaction returned by queries."""

    id: str
    name: str
    amount: Decimal
    category: Optional[str] = None
    type: Optional[TransactionType] = None
    create_time: datetime
    update_time: datetime

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionView":
        return cls(
            id=transaction.id,
            name=transaction.name,
            amount=transaction.amount,
            category=transaction.category,
            type=transaction.type,
            create_time=transaction.create_time,
            update_time=transaction.update_time,
        )


__all__ = ["TransactionRequest", "TransactionView"]
