from time import sleep

import pytest

import transaction_manager
from transaction_manager import config
from transaction_manager.errors import (
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    to_problem_detail,
)
from transaction_manager.utils import profiler

ENV_KEYS = (
    "APP_ENV",
    "LOG_LEVEL",
    "JSON_LOGS",
    "MAX_PAGE_SIZE",
    "STRESS_WORKERS",
    "STRESS_OPERATIONS",
)


def test_get_settings_defaults(fresh_settings, monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    settings = config.Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.max_page_size == 1000
    assert settings.stress_workers > 0
    assert settings.stress_operations > 0


def test_get_settings_reads_environment_and_caches(fresh_settings, monkeypatch):
    monkeypatch.setenv("MAX_PAGE_SIZE", "250")
    monkeypatch.setenv("JSON_LOGS", "true")

    settings = config.get_settings()

    assert settings.max_page_size == 250
    assert settings.json_logs is True
    assert config.get_settings() is settings


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is None or stats.peak_rss_bytes > 0
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)
    assert stats.as_dict()["label"] == "sleep"


@pytest.mark.parametrize(
    ("error", "status", "title"),
    [
        (InvalidArgumentError("bad page"), 400, "Bad Request"),
        (NotFoundError("no such transaction"), 404, "Not Found"),
        (InternalError(), 500, "Internal Server Error"),
    ],
)
def test_problem_detail_for_known_errors(error, status, title):
    detail = to_problem_detail(error)
    assert detail == {"status": status, "title": title, "detail": error.message}


def test_problem_detail_hides_unexpected_errors():
    detail = to_problem_detail(RuntimeError("connection string: postgres://user:pw@host"))
    assert detail == {"status": 500, "title": "Internal Server Error", "detail": "Internal server error"}


def test_errors_keep_builtin_ancestry():
    assert isinstance(InvalidArgumentError("x"), ValueError)
    assert isinstance(NotFoundError("x"), LookupError)


def test_package_exports_public_surface():
    for name in (
        "TransactionCommandService",
        "TransactionQueryService",
        "InMemoryTransactionRepository",
        "Page",
        "TransactionRequest",
    ):
        assert name in transaction_manager.__all__
        assert hasattr(transaction_manager, name)
