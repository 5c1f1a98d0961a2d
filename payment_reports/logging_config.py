import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


class ReportJsonFormatter(JsonFormatter):
    """JSON formatter with stable timestamp, level and logger keys."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", self.formatTime(record, self.datefmt))
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single JSON handler on the root logger."""
    root = logging.getLogger()
    root.setLevel((level or "INFO").upper())
    if any(isinstance(h.formatter, ReportJsonFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ReportJsonFormatter("%(message)s"))
    root.addHandler(handler)
