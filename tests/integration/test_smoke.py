"""
End-to-end tests for the transaction manager.

These exercise the full stack (services -> entity -> repository) the way a
transport adapter would, plus the CLI entry points.
"""

from __future__ import annotations

import json
import time
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from transaction_manager.errors import NotFoundError, to_problem_detail
from transaction_manager.main import app
from transaction_manager.services.dto import TransactionRequest

runner = CliRunner()

STRESS_OPERATIONS = 120


class TestLifecycle:
    """Create, update, delete and read back one transaction."""

    def test_full_lifecycle(self, command_service, query_service):
        created = command_service.create_transaction(
            TransactionRequest(name="Purchase goods", amount=Decimal("100.50"))
        )
        assert created.id
        assert created.name == "Purchase goods"
        assert created.amount == Decimal("100.50")
        assert created.create_time == created.update_time

        time.sleep(0.001)
        updated = command_service.update_transaction(
            created.id, TransactionRequest(amount=Decimal("200.00"))
        )
        assert updated.id == created.id
        assert updated.name == "Purchase goods"
        assert updated.amount == Decimal("200.00")
        assert updated.update_time > created.update_time

        command_service.delete_transaction(created.id)
        with pytest.raises(NotFoundError) as excinfo:
            query_service.get_transaction_by_id(created.id)
        assert to_problem_detail(excinfo.value)["status"] == 404

        command_service.delete_transaction(created.id)

    def test_created_record_reads_back_equal(self, command_service, query_service):
        cases = [("Rent", "1200.00"), ("  Coffee  ", "3.5"), ("Zero", "0"), ("x" * 100, "99999999.99")]
        for name, amount in cases:
            created = command_service.create_transaction(TransactionRequest(name=name, amount=amount))
            view = query_service.get_transaction_by_id(created.id)
            assert view.name == name.strip()
            assert view.amount == Decimal(amount)
            assert view.model_dump() == view.from_entity(created).model_dump()


@pytest.fixture
def quiet_cli(monkeypatch, fresh_settings, restore_logging):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("JSON_LOGS", "false")


class TestCli:
    def test_info_prints_settings(self, quiet_cli):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "max_page_size=1000" in result.stdout

    def test_demo_runs_the_lifecycle(self, quiet_cli):
        result = runner.invoke(app, ["demo", "--records", "25", "--size", "10"])

        assert result.exit_code == 0, result.stdout
        assert "created:" in result.stdout
        assert "updated:" in result.stdout
        assert '"status": 404' in result.stdout
        assert "second delete: ok" in result.stdout
        assert "Page 4 is empty (total=25)" in result.stdout

    def test_stress_json_reports_no_violations(self, quiet_cli):
        result = runner.invoke(
            app, ["stress", "--workers", "3", "--operations", str(STRESS_OPERATIONS), "--json"]
        )

        assert result.exit_code == 0, result.stdout
        payload = json.loads(result.stdout)
        assert payload["operations"] == STRESS_OPERATIONS
        assert payload["violations"] == []

    def test_stress_table_output(self, quiet_cli):
        result = runner.invoke(app, ["stress", "-w", "2", "-o", "50"])
        assert result.exit_code == 0, result.stdout
        assert "Concurrent Workload" in result.stdout
        assert "All page snapshots consistent." in result.stdout
