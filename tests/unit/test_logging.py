from __future__ import annotations

import json
import logging
import sys
from decimal import Decimal

from transaction_manager.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_PAGE_SIZE = 10


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.transaction_id = "abc-123"
    record.page_size = EXPECTED_PAGE_SIZE

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["transaction_id"] == "abc-123"
    assert payload["page_size"] == EXPECTED_PAGE_SIZE
    assert "pathname" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"page_size": EXPECTED_PAGE_SIZE}

    payload = json.loads(_json_formatter(record))

    assert payload["page_size"] == EXPECTED_PAGE_SIZE


def test_json_formatter_stringifies_non_json_values() -> None:
    record = _record()
    record.amount = Decimal("100.50")

    payload = json.loads(_json_formatter(record))

    assert payload["amount"] == "100.50"


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("broken")
    except ValueError:
        record = logging.LogRecord(
            name="test.logger",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "ValueError: broken" in payload["exc_info"]


def test_configure_logging_installs_json_handler(restore_logging) -> None:
    configure_logging(level="DEBUG", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_without_force_keeps_existing_setup(restore_logging) -> None:
    configure_logging(level="WARNING")
    handler = logging.getLogger().handlers[0]

    configure_logging(level="DEBUG", json_logs=True, force=False)

    assert logging.getLogger().handlers == [handler]
    assert logging.getLogger().level == logging.WARNING
