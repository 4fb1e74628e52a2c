"""
Logging configuration for the application.

Every record carries the id of the request it was emitted for, so one
request's lines can be followed through the access log, the use cases and
the error handlers. Records emitted outside a request show ``-``.

Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys
from contextvars import ContextVar, Token

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NO_REQUEST_ID = "-"

_current_request_id: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


def bind_request_id(request_id: str) -> Token:
    """Make request_id the id stamped on records from the current task."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


class RequestIdFilter(logging.Filter):
    """Stamps ``record.request_id`` with the id of the active request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _current_request_id.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIdFilter())

    # Access lines come from RequestContextMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
