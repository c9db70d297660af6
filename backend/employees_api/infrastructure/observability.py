"""Request Logging - one JSON line per event, keyed by the request's method/path/operation.

Invariants:
    - REQUEST_FIELDS are lifted from `extra=` onto the line when not None
    - setup_logging owns exactly one root handler; calling it again replaces it
"""

import logging
import json
from datetime import datetime, timezone

REQUEST_FIELDS = (
    "method", "path", "operation", "employee_id", "rows",
    "error_code", "error_category", "backend_code",
)

_HANDLER_NAME = "employees_api"


def request_fields(record: logging.LogRecord) -> dict:
    """The REQUEST_FIELDS present on a record, None values dropped."""
    return {
        key: record.__dict__[key]
        for key in REQUEST_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **request_fields(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Local development: plain line with request fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        fields = request_fields(record)
        if fields:
            text += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        return text


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the employees_api root handler (json or text) at `level`."""
    root = logging.getLogger()
    for existing in root.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
