"""
Domain model for the transaction manager.

`Transaction` owns every content rule for a record: the repository stores
whatever it is given, so nothing reaches it without passing through
`Transaction.create` or `Transaction.update` first.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from transaction_manager.domain.commands import (
    CreateTransactionCommand,
    TransactionType,
    UpdateTransactionCommand,
)
from transaction_manager.errors import InvalidArgumentError

NAME_MAX_LENGTH = 100
AMOUNT_MAX_DECIMALS = 2


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_transaction_id() -> str:
    return str(uuid.uuid4())


def validate_name(name: Optional[str]) -> str:
    """Check a raw name and return it trimmed."""
    if name is None or not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Transaction name cannot be empty")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Transaction name cannot exceed {NAME_MAX_LENGTH} characters"
        )
    return name.strip()


def validate_amount(amount: Any) -> Decimal:
    """Check a raw amount and return it as a Decimal with its scale untouched."""
    if amount is None:
        raise InvalidArgumentError("Transaction amount cannot be null")
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
        raise InvalidArgumentError("Transaction amount must be a decimal value")
    amount = Decimal(amount)
    if not amount.is_finite():
        raise InvalidArgumentError("Transaction amount must be a finite number")
    if amount < 0:
        raise InvalidArgumentError("Transaction amount cannot be negative")
    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -AMOUNT_MAX_DECIMALS:
        raise InvalidArgumentError(
            f"Transaction amount cannot have more than {AMOUNT_MAX_DECIMALS} decimal places"
        )
    return amount


class Transaction(BaseModel):
    """
    A persisted transaction record.

    `create_time` is fixed at construction; `update_time` starts equal to it
    and moves forward on every successful update.
    """

    id: str = Field(..., description="System-generated identifier, immutable.")
    name: str = Field(..., description="Trimmed display name, 1-100 characters.")
    amount: Decimal = Field(..., description="Non-negative amount, at most 2 decimals.")
    category: Optional[str] = Field(None, description="Optional category label.")
    type: Optional[TransactionType] = Field(None, description="Optional transaction type.")
    create_time: datetime = Field(..., description="Creation timestamp (UTC).")
    update_time: datetime = Field(..., description="Last modification timestamp (UTC).")

    @classmethod
    def create(cls, command: CreateTransactionCommand) -> "Transaction":
        name = validate_name(command.name)
        amount = validate_amount(command.amount)

        now = utcnow()
        return cls(
            id=new_transaction_id(),
            name=name,
            amount=amount,
            category=command.category,
            type=command.type,
            create_time=now,
            update_time=now,
        )

    def update(self, command: UpdateTransactionCommand) -> "Transaction":
        """
        Apply the supplied fields of `command` in place.

        Every supplied field is validated before any of them is applied, so a
        rejected update leaves the record exactly as it was.
        """
        changes: dict[str, Any] = {}
        if command.supplied("name"):
            changes["name"] = validate_name(command.name)
        if command.supplied("amount"):
            changes["amount"] = validate_amount(command.amount)
        if command.supplied("category"):
            changes["category"] = command.category
        if command.supplied("type"):
            changes["type"] = command.type

        for field_name, value in changes.items():
            setattr(self, field_name, value)
        # never move backwards, even if the wall clock does
        self.update_time = max(utcnow(), self.update_time)
        return self


__all__ = [
    "AMOUNT_MAX_DECIMALS",
    "NAME_MAX_LENGTH",
    "Transaction",
    "TransactionType",
    "new_transaction_id",
    "utcnow",
    "validate_amount",
    "validate_name",
]
