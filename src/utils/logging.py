"""Structured JSON logging configuration.

Every record is one JSON object. Request context passed by the pipeline
and handlers through ``extra={...}`` (method, path, status_code, user_id)
is gathered under stable keys so log queries don't depend on which
module emitted the line:

    {"timestamp": ..., "level": "INFO", "logger": "api.middleware.request_logging",
     "message": "Outgoing response: 200 ...", "http": {"path": "/users", "status_code": 200}}
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Any

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# extra={...} keys grouped under "http"
HTTP_FIELDS = ("method", "path", "status_code")

# Attributes every LogRecord carries; anything else came from extra={...}
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime', 'taskName'}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        http: Dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _RECORD_ATTRS or callable(value):
                continue
            if key in HTTP_FIELDS:
                http[key] = value
            else:
                entry[key] = value
        if http:
            entry["http"] = http

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_structured_logging(level: str = LOG_LEVEL):
    """Send all application logs to stderr as JSON.

    uvicorn's access log only passes warnings; the request logging
    middleware already writes one line per request and response.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)
