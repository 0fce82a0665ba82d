"""
Concurrent workload runner for exercising the store under contention.

Usage (example from CLI):
    from transaction_manager.workload import run_workload

    result = run_workload(workers=8, operations=2_000)
    print(result["throughput_ops_per_sec"], result["violations"])

Every operation goes through the public services, so the run covers the same
lock discipline a transport adapter would hit. Page snapshots observed during
the run are checked for internal consistency.
"""

from __future__ import annotations

import random
import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Any, Dict, List, Optional, TypedDict

from transaction_manager.config import get_settings
from transaction_manager.errors import NotFoundError, TransactionError
from transaction_manager.repositories.memory import InMemoryTransactionRepository
from transaction_manager.services.command import TransactionCommandService
from transaction_manager.services.dto import TransactionRequest
from transaction_manager.services.query import TransactionQueryService
from transaction_manager.utils.logging import get_logger
from transaction_manager.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

OPERATION_KINDS = ("create", "update", "get", "page", "delete")
# create-heavy so the store keeps growing while it is being paged
OPERATION_WEIGHTS = (40, 20, 15, 20, 5)


class WorkloadResult(TypedDict, total=False):
    """
    Metrics returned by `run_workload`.
    """

    workers: int
    operations: int
    counts: Dict[str, int]
    not_found: int
    errors: List[str]
    duration_seconds: float
    throughput_ops_per_sec: float
    final_count: int
    pages_checked: int
    violations: List[str]
    profile: Dict[str, Any]


def _round_float(value: float, decimals: int = 2) -> float:
    return round(value, decimals)


class _Worker:
    """Shared state for one workload run; methods are called from pool threads."""

    def __init__(
        self,
        commands: TransactionCommandService,
        queries: TransactionQueryService,
        page_size: int,
        seed: int,
    ) -> None:
        self.commands = commands
        self.queries = queries
        self.page_size = page_size
        self._seed = seed
        self._ids: List[str] = []
        self._ids_lock = threading.Lock()
        self._local = threading.local()
        self.counts: Counter[str] = Counter()
        self.not_found = 0
        self.errors: List[str] = []
        self.violations: List[str] = []
        self.pages_checked = 0
        self._stats_lock = threading.Lock()

    def _rng(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = random.Random(f"{self._seed}-{threading.get_ident()}")
            self._local.rng = rng
        return rng

    def _pick_id(self, rng: random.Random) -> Optional[str]:
        with self._ids_lock:
            return rng.choice(self._ids) if self._ids else None

    def _forget(self, transaction_id: str) -> None:
        with self._ids_lock:
            if transaction_id in self._ids:
                self._ids.remove(transaction_id)

    def run_one(self, index: int) -> None:
        rng = self._rng()
        kind = rng.choices(OPERATION_KINDS, weights=OPERATION_WEIGHTS, k=1)[0]
        try:
            self._dispatch(kind, index, rng)
        except NotFoundError:
            with self._stats_lock:
                self.not_found += 1
        except TransactionError as exc:
            with self._stats_lock:
                self.errors.append(f"{kind}: {exc.message}")
        with self._stats_lock:
            self.counts[kind] += 1

    def _dispatch(self, kind: str, index: int, rng: random.Random) -> None:
        if kind == "create":
            amount = Decimal(rng.randint(0, 1_000_000)).scaleb(-2)
            created = self.commands.create_transaction(
                TransactionRequest(name=f"Workload transaction {index}", amount=amount)
            )
            with self._ids_lock:
                self._ids.append(created.id)
            return

        if kind == "page":
            page = rng.randint(1, 5)
            result = self.queries.get_page_transactions(page, self.page_size)
            self._check_page(page, result.total, len(result.data))
            return

        transaction_id = self._pick_id(rng)
        if transaction_id is None:
            return
        if kind == "update":
            amount = Decimal(rng.randint(0, 1_000_000)).scaleb(-2)
            self.commands.update_transaction(transaction_id, TransactionRequest(amount=amount))
        elif kind == "get":
            self.queries.get_transaction_by_id(transaction_id)
        elif kind == "delete":
            self.commands.delete_transaction(transaction_id)
            self._forget(transaction_id)

    def _check_page(self, page: int, total: int, returned: int) -> None:
        expected = max(0, min(self.page_size, total - (page - 1) * self.page_size))
        with self._stats_lock:
            self.pages_checked += 1
            if returned != expected:
                self.violations.append(
                    f"page={page} size={self.page_size} total={total} returned={returned} expected={expected}"
                )


def run_workload(
    workers: Optional[int] = None,
    operations: Optional[int] = None,
    page_size: int = 10,
    seed: int = 42,
) -> WorkloadResult:
    """
    Run a mixed create/update/get/page/delete workload from many threads.

    Parameters
    ----------
    workers : int | None
        Thread pool size. Defaults to settings.stress_workers.
    operations : int | None
        Total number of operations. Defaults to settings.stress_operations.
    page_size : int
        Size used for every page query.
    seed : int
        Base seed for the per-thread random generators.

    Returns
    -------
    WorkloadResult
        Operation counts, errors, consistency violations and profiler stats.
    """
    settings = get_settings()
    effective_workers = settings.stress_workers if workers is None else workers
    effective_operations = settings.stress_operations if operations is None else operations
    if effective_workers < 1:
        raise ValueError("workers must be at least 1")
    if effective_operations < 0:
        raise ValueError("operations cannot be negative")

    repository = InMemoryTransactionRepository()
    worker = _Worker(
        TransactionCommandService(repository),
        TransactionQueryService(repository, max_page_size=settings.max_page_size),
        page_size=page_size,
        seed=seed,
    )

    log.info(
        "[WORKLOAD START]",
        extra={"workers": effective_workers, "operations": effective_operations},
    )
    with profile_block("workload") as stats:
        with ThreadPoolExecutor(max_workers=effective_workers, thread_name_prefix="workload") as pool:
            # list() drains the iterator so worker exceptions propagate here
            list(pool.map(worker.run_one, range(effective_operations)))

    result = _build_result(worker, stats, effective_workers, effective_operations, repository.count())
    log.info(
        "[WORKLOAD COMPLETE]",
        extra={
            "duration": result["duration_seconds"],
            "throughput_ops": result["throughput_ops_per_sec"],
            "violations": len(result["violations"]),
        },
    )
    return result


def _build_result(
    worker: _Worker, stats: ProfileStats, workers: int, operations: int, final_count: int
) -> WorkloadResult:
    duration = stats.duration_seconds
    return WorkloadResult(
        workers=workers,
        operations=operations,
        counts=dict(worker.counts),
        not_found=worker.not_found,
        errors=list(worker.errors),
        duration_seconds=_round_float(duration, 4),
        throughput_ops_per_sec=_round_float(operations / duration) if duration else 0.0,
        final_count=final_count,
        pages_checked=worker.pages_checked,
        violations=list(worker.violations),
        profile={
            "label": stats.label,
            "duration_seconds": _round_float(stats.duration_seconds, 4),
            "peak_rss_bytes": stats.peak_rss_bytes,
            "peak_traced_bytes": stats.peak_traced_bytes,
            "cpu_percent": _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None,
        },
    )


__all__ = ["OPERATION_KINDS", "WorkloadResult", "run_workload"]
