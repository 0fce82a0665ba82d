"""
Command objects carrying the input of create/update use cases into the entity.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from transaction_manager.errors import InvalidArgumentError


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"


def _reject_float(value: Any) -> Any:
    # binary floats cannot represent most cent values exactly
    if isinstance(value, float):
        raise ValueError("amount must be given as a string, int or Decimal, not float")
    return value


ExactDecimal = Annotated[Decimal, BeforeValidator(_reject_float)]


def _as_invalid_argument(exc: ValidationError) -> InvalidArgumentError:
    error = exc.errors()[0]
    field_name = ".".join(str(part) for part in error["loc"]) or "input"
    return InvalidArgumentError(f"Invalid {field_name}: {error['msg'].removeprefix('Value error, ')}")


class CreateTransactionCommand(BaseModel):
    """
    Input for creating a transaction.

    Only the shape is checked here; content rules (emptiness, sign, scale) are
    enforced by `Transaction.create`.
    """

    name: Optional[str] = Field(None, description="Transaction name.")
    amount: Optional[ExactDecimal] = Field(None, description="Non-negative amount, 2 decimals max.")
    category: Optional[str] = Field(None, description="Free-form category label.")
    type: Optional[TransactionType] = Field(None, description="DEPOSIT or WITHDRAW.")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, name: Optional[str], amount: Any, **optional: Any) -> "CreateTransactionCommand":
        """Build a command, reporting malformed input as InvalidArgumentError."""
        try:
            return cls(name=name, amount=amount, **optional)
        except ValidationError as exc:
            raise _as_invalid_argument(exc) from exc


class UpdateTransactionCommand(BaseModel):
    """
    Partial update of a transaction.

    `name` and `amount` left as None are not touched. `category` and `type` are
    applied whenever they were passed explicitly, so passing None clears them.
    """

    name: Optional[str] = None
    amount: Optional[ExactDecimal] = None
    category: Optional[str] = None
    type: Optional[TransactionType] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, **fields: Any) -> "UpdateTransactionCommand":
        """Build from the fields the caller set; malformed input is an InvalidArgumentError."""
        try:
            return cls(**fields)
        except ValidationError as exc:
            raise _as_invalid_argument(exc) from exc

    def supplied(self, field_name: str) -> bool:
        """Whether `field_name` should be applied to the entity."""
        if field_name in ("name", "amount"):
            return getattr(self, field_name) is not None
        return field_name in self.model_fields_set


__all__ = [
    "CreateTransactionCommand",
    "ExactDecimal",
    "TransactionType",
    "UpdateTransactionCommand",
]
