"""
Command side: create, update and delete transactions.

The update path is find -> mutate -> save across two separate repository
calls. Two concurrent updates of the same id can therefore overwrite each
other (the last save wins); this window is accepted and not locked away.
"""
from __future__ import annotations

from typing import Optional

from transaction_manager.domain.commands import CreateTransactionCommand, UpdateTransactionCommand
from transaction_manager.domain.models import Transaction
from transaction_manager.errors import NotFoundError
from transaction_manager.repositories.abstract import TransactionRepository
from transaction_manager.services.base import use_case, validate_id
from transaction_manager.services.dto import TransactionRequest
from transaction_manager.utils.logging import get_logger

log = get_logger(__name__)


class TransactionCommandService:
    """Mutating use cases. Validation always happens before the repository is touched."""

    def __init__(self, repository: TransactionRepository) -> None:
        self._repository = repository

    @use_case
    def create_transaction(self, request: TransactionRequest) -> Transaction:
        command = CreateTransactionCommand.of(
            request.name,
            request.amount,
            category=request.category,
            type=request.type,
        )
        transaction = Transaction.create(command)
        saved = self._repository.save(transaction)
        log.info("Transaction created", extra={"transaction_id": saved.id})
        return saved

    @use_case
    def update_transaction(self, transaction_id: Optional[str], request: TransactionRequest) -> Transaction:
        transaction_id = validate_id(transaction_id)
        # only fields the caller actually set take part in the update
        command = UpdateTransactionCommand.of(
            **{field_name: getattr(request, field_name) for field_name in request.model_fields_set}
        )

        transaction = self._repository.find_by_id(transaction_id)
        if transaction is None:
            log.debug("Update of unknown transaction", extra={"transaction_id": transaction_id})
            raise NotFoundError(f"Transaction not found with id: {transaction_id}")

        transaction.update(command)
        saved = self._repository.save(transaction)
        log.info(
            "Transaction updated",
            extra={"transaction_id": saved.id, "fields": sorted(command.model_fields_set)},
        )
        return saved

    @use_case
    def delete_transaction(self, transaction_id: Optional[str]) -> None:
        transaction_id = validate_id(transaction_id)
        removed = self._repository.delete_by_id(transaction_id)
        if removed:
            log.info("Transaction deleted", extra={"transaction_id": transaction_id})
        else:
            log.debug("Delete of unknown transaction ignored", extra={"transaction_id": transaction_id})


__all__ = ["TransactionCommandService"]
