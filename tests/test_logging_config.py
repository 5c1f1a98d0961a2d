import json
import logging

from payment_reports.logging_config import ReportJsonFormatter, configure_logging


def test_formatter_emits_extra_fields():
    record = logging.makeLogRecord(
        {"name": "payment_reports.reports", "msg": "Report request resolved", "levelname": "INFO",
         "levelno": logging.INFO, "correlation_id": "18cT1700", "documents": 3}
    )
    payload = json.loads(ReportJsonFormatter("%(message)s").format(record))

    assert payload["message"] == "Report request resolved"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "payment_reports.reports"
    assert payload["correlation_id"] == "18cT1700"
    assert payload["documents"] == 3
    assert "timestamp" in payload


def test_configure_logging_is_idempotent():
    configure_logging("info")
    configure_logging("info")
    root = logging.getLogger()
    assert sum(isinstance(h.formatter, ReportJsonFormatter) for h in root.handlers) == 1


def test_formatter_built_on_current_json_module():
    from pythonjsonlogger.json import JsonFormatter

    assert issubclass(ReportJsonFormatter, JsonFormatter)
