from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from transaction_manager.domain.page import Page
from transaction_manager.services.dto import TransactionView
from transaction_manager.workload import OPERATION_KINDS, WorkloadResult


def _fmt_time(view: TransactionView) -> str:
    return view.update_time.strftime("%Y-%m-%d %H:%M:%S.%f")


def print_page(
    page: Page[TransactionView], page_number: int, size: int, console: Optional[Console] = None
) -> None:
    """
    Render one page of transactions as a rich table.
    """
    console = console or Console()

    if not page.data:
        console.print(f"[yellow]Page {page_number} is empty (total={page.total}).[/yellow]")
        return

    table = Table(
        title=f"Transactions (page {page_number}, size {size})",
        box=box.ROUNDED,
        caption=f"{len(page.data)} of {page.total} transaction(s)",
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Amount", justify="right", style="bold green")
    table.add_column("Category", style="magenta")
    table.add_column("Type", style="blue")
    table.add_column("Updated", style="dim")

    for view in page.data:
        table.add_row(
            view.id,
            view.name,
            f"{view.amount:,.2f}",
            view.category or "-",
            view.type.value if view.type else "-",
            _fmt_time(view),
        )

    console.print(table)


def print_workload(result: WorkloadResult, console: Optional[Console] = None) -> None:
    """
    Render workload metrics as a rich table, followed by any consistency violations.
    """
    console = console or Console()

    table = Table(title="Concurrent Workload", box=box.ROUNDED)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")

    table.add_row("Workers", str(result.get("workers", 0)))
    table.add_row("Operations", f"{result.get('operations', 0):,}")
    counts = result.get("counts", {})
    for kind in OPERATION_KINDS:
        table.add_row(f"  {kind}", f"{counts.get(kind, 0):,}")
    table.add_row("Not found (races)", str(result.get("not_found", 0)))
    table.add_row("Duration (s)", f"{result.get('duration_seconds', 0.0):.3f}")
    table.add_row("Throughput (ops/s)", f"{result.get('throughput_ops_per_sec', 0.0):,.2f}")
    table.add_row("Final record count", f"{result.get('final_count', 0):,}")
    table.add_row("Pages checked", f"{result.get('pages_checked', 0):,}")

    profile = result.get("profile", {})
    mem_bytes = profile.get("peak_rss_bytes") or 0
    table.add_row("Peak Memory (MB)", f"{mem_bytes / (1024 * 1024):.2f}")
    cpu = profile.get("cpu_percent")
    table.add_row("CPU %", f"{cpu:.1f}" if cpu is not None else "N/A")

    console.print(table)

    violations = result.get("violations", [])
    errors = result.get("errors", [])
    if violations:
        console.print(f"[bold red]{len(violations)} inconsistent page snapshot(s):[/bold red]")
        for line in violations[:10]:
            console.print(f"  [red]{line}[/red]")
    if errors:
        console.print(f"[bold red]{len(errors)} unexpected error(s):[/bold red]")
        for line in errors[:10]:
            console.print(f"  [red]{line}[/red]")
    if not violations and not errors:
        console.print("[green]All page snapshots consistent.[/green]")
