"""Structured logging — JSON formatter surfaces report extras."""

import json
import logging
from decimal import Decimal

from reporting.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "reporting.services.report_service", logging.INFO, __file__, 1,
        "Report top_customers computed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "reporting.services.report_service"
    assert log["message"] == "Report top_customers computed"
    assert "timestamp" in log


def test_report_extras_surfaced():
    log = json.loads(JSONFormatter().format(
        _record(report="top_customers", rows=2, duration_ms=1.5),
    ))
    assert log["report"] == "top_customers"
    assert log["rows"] == 2
    assert log["duration_ms"] == 1.5


def test_absent_extras_omitted():
    log = json.loads(JSONFormatter().format(_record()))
    assert "error_code" not in log
    assert "entity_id" not in log


def test_non_json_values_stringified():
    log = json.loads(JSONFormatter().format(_record(entity_id=Decimal("10248"))))
    assert log["entity_id"] == "10248"


def test_request_id_filter_stamps_current_id():
    from reporting.infrastructure.observability import RequestIdFilter, request_id_var

    token = request_id_var.set("req-42")
    try:
        record = _record()
        assert RequestIdFilter().filter(record) is True
    finally:
        request_id_var.reset(token)
    assert json.loads(JSONFormatter().format(record))["request_id"] == "req-42"


def test_request_id_filter_outside_request():
    from reporting.infrastructure.observability import RequestIdFilter

    record = _record()
    RequestIdFilter().filter(record)
    assert record.request_id is None
    assert "request_id" not in json.loads(JSONFormatter().format(record))
