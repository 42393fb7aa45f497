"""Logging for the check-in service, built on structlog.

`setup_logging()` runs once from `create_app()`. Every request gets a
`request_id`, `method` and `path` bound through `structlog.contextvars`, so
service events (check-ins, roster edits) carry the request that caused them.
"""

from __future__ import annotations

import logging
import sys
import uuid

import structlog


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # werkzeug access log goes to the same stream
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def bind_request_context(*, method: str, path: str, request_id: str | None = None) -> str:
    """Attach request fields to every event logged until the request ends."""
    request_id = request_id or uuid.uuid4().hex[:12]
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=method, path=path)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
