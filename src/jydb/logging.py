"""
structlog setup shared by the API server and the command line tools

Application events and stdlib records (uvicorn, sqlalchemy, alembic) go through
one ProcessorFormatter, so both carry the bound request id. Output is a
console renderer in debug mode and JSON lines otherwise.
"""

from __future__ import annotations

import base64
import logging
import secrets
import sys
import time

import structlog

REQUEST_ID_KEY = "request_id"

_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "alembic")


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog and stdlib logging to stdout.

    Args:
        debug: Human-readable console output at DEBUG level.
        level: Explicit level name, overriding the one implied by ``debug``.
    """
    root_level = logging.getLevelName((level or ("DEBUG" if debug else "INFO")).upper())

    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: structlog.types.Processor
    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(root_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a 14 character url-safe id: 8 bytes of microsecond clock, 2 random."""
    raw = int(time.time() * 1_000_000).to_bytes(8, "big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id to every log event emitted in the current context."""
    request_id = request_id or generate_request_id()
    structlog.contextvars.bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.unbind_contextvars(REQUEST_ID_KEY)


def get_request_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(REQUEST_ID_KEY)
