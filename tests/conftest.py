"""
Pytest configuration for the transaction manager.

Provides fixtures for:
- A fresh in-memory repository and the services wired to it
- A controllable clock patched into the domain model
- Settings cache isolation for tests that touch the environment
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Generator

import pytest

from transaction_manager.config import get_settings
from transaction_manager.repositories.memory import InMemoryTransactionRepository
from transaction_manager.services.command import TransactionCommandService
from transaction_manager.services.dto import TransactionRequest
from transaction_manager.services.query import TransactionQueryService

MAX_PAGE_SIZE = 1000


class FakeClock:
    """Callable stand-in for `utcnow` that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
    monkeypatch.setattr("transaction_manager.domain.models.utcnow", fake)
    return fake


@pytest.fixture
def repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def command_service(repository: InMemoryTransactionRepository) -> TransactionCommandService:
    return TransactionCommandService(repository)


@pytest.fixture
def query_service(repository: InMemoryTransactionRepository) -> TransactionQueryService:
    return TransactionQueryService(repository, max_page_size=MAX_PAGE_SIZE)


@pytest.fixture
def seed_transactions(command_service: TransactionCommandService):
    """
    Factory creating `count` valid transactions through the command service.

    Returns the created transactions in creation order.
    """

    def _seed(count: int):
        return [
            command_service.create_transaction(
                TransactionRequest(name=f"Transaction {index}", amount=Decimal(index).scaleb(-2))
            )
            for index in range(1, count + 1)
        ]

    return _seed


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings before and after a test that changes the environment.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """
    Put the root logger back the way it was after a test that reconfigures logging.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
