from __future__ import annotations

import json
import sys
from decimal import Decimal
from typing import Optional

import typer

from transaction_manager.config import get_settings
from transaction_manager.errors import NotFoundError, to_problem_detail
from transaction_manager.reporter import print_page, print_workload
from transaction_manager.repositories.memory import InMemoryTransactionRepository
from transaction_manager.services.command import TransactionCommandService
from transaction_manager.services.dto import TransactionRequest, TransactionView
from transaction_manager.services.query import TransactionQueryService
from transaction_manager.utils.logging import configure_logging
from transaction_manager.workload import run_workload

app = typer.Typer(help="In-memory transaction manager CLI.")


def _echo_view(label: str, view: TransactionView) -> None:
    typer.echo(f"{label}: {view.model_dump_json()}")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"max_page_size={settings.max_page_size} | "
        f"stress workers={settings.stress_workers} operations={settings.stress_operations}"
    )


@app.command()
def demo(
    records: int = typer.Option(25, "--records", "-n", min=1, help="Records to insert for the paging part."),
    size: int = typer.Option(10, "--size", min=1, help="Page size used when listing."),
) -> None:
    """
    Walk one transaction through its lifecycle, then page through a filled store.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    repository = InMemoryTransactionRepository()
    commands = TransactionCommandService(repository)
    queries = TransactionQueryService(repository, max_page_size=settings.max_page_size)

    created = commands.create_transaction(
        TransactionRequest(name="Purchase goods", amount=Decimal("100.50"))
    )
    _echo_view("created", TransactionView.from_entity(created))

    updated = commands.update_transaction(created.id, TransactionRequest(amount=Decimal("200.00")))
    _echo_view("updated", TransactionView.from_entity(updated))

    commands.delete_transaction(created.id)
    try:
        queries.get_transaction_by_id(created.id)
    except NotFoundError as exc:
        typer.echo(f"after delete: {json.dumps(to_problem_detail(exc))}")
    commands.delete_transaction(created.id)
    typer.echo("second delete: ok")

    for index in range(1, records + 1):
        commands.create_transaction(
            TransactionRequest(name=f"Transaction {index}", amount=Decimal(index).scaleb(-2))
        )

    last_page = (records + size - 1) // size
    for page_number in sorted({1, last_page, last_page + 1}):
        print_page(queries.get_page_transactions(page_number, size), page_number, size)


@app.command()
def stress(
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Thread count (default from settings)."
    ),
    operations: Optional[int] = typer.Option(
        None, "--operations", "-o", help="Total operations (default from settings)."
    ),
    size: int = typer.Option(10, "--size", min=1, help="Page size used by page queries."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
) -> None:
    """
    Hammer one store from many threads and check every page snapshot.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    result = run_workload(workers=workers, operations=operations, page_size=size)
    if as_json:
        typer.echo(json.dumps(result, indent=2, sort_keys=True))
    else:
        print_workload(result)

    if result["violations"] or result["errors"]:
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
