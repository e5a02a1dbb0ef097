"""
Logging configuration for Notaire.

JSON lines in production, a compact text format elsewhere. Both carry
the id of the request being served, taken from a context variable set
by RequestIDMiddleware.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Optional
from uuid import uuid4

SERVICE_NAME = "notaire"

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attributes passed through `extra=` that end up in JSON output
EXTRA_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "user_id",
    "is_valid",
)

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"


class RequestIDFilter(logging.Filter):
    """Attach the current request id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys: timestamp (UTC, ms), level, service, logger, message, plus
    request_id, exception and whitelisted extras when present.
    """

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_ctx.get()
        if request_id:
            payload["request_id"] = request_id

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure the root logger.

    Replaces existing root handlers, so calling it again (one call per
    created app) reconfigures rather than duplicates output.

    Args:
        level: Logging level name
        json_logs: JSON lines (True) or text (False)
        stream: Output stream (default: stdout)
    """
    numeric_level = getattr(logging, level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.addFilter(RequestIDFilter())
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for noisy in ("asyncio", "httpx", "httpcore", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request id to the current context.

    Args:
        request_id: Incoming id, a new UUID4 is generated when None

    Returns:
        The bound id
    """
    if not request_id:
        request_id = str(uuid4())
    request_id_ctx.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
