from __future__ import annotations

import json
import logging

from marina_billing.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_RECORDS = 4
EXPECTED_IGNORED = 2


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
    record.records = EXPECTED_RECORDS
    record.path = "BoatData.csv"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["records"] == EXPECTED_RECORDS
    assert payload["path"] == "BoatData.csv"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"ignored": EXPECTED_IGNORED}

    payload = json.loads(_json_formatter(record))

    assert payload["ignored"] == EXPECTED_IGNORED
    assert "extra" not in payload


def test_configure_logging_json_installs_json_formatter() -> None:
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level
    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
