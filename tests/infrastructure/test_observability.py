"""Structured logging: JSON formatter fields and handler setup."""

import json
import logging

from products_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "products_api.test", logging.INFO, __file__, 1, "hola %s", ("mundo",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "products_api.test"
    assert payload["message"] == "hola mundo"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(product_id=3, status_code=404, unrelated="x"),
    ))

    assert payload["product_id"] == 3
    assert payload["status_code"] == 404
    assert "unrelated" not in payload


def test_setup_logging_replaces_previous_handler():
    previous_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(previous_level)
