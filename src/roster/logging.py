"""
Structured logging for the Roster API

Log lines are produced by structlog on top of stdlib logging. Each line
emitted while a request is being served carries that request's id and, for
GraphQL requests, the operation name.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextFilter:
    """structlog processor copying the request context into each event."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        for key, var in (("request_id", request_id_ctx), ("graphql_operation", operation_ctx)):
            value = var.get()
            if value:
                event_dict[key] = value

        return event_dict


def resolve_log_level(debug: bool, level: str | None) -> int:
    """Map a level name such as ``"warning"`` to its stdlib value.

    Without a name, debug mode logs everything and other modes log INFO and up.
    """
    if level is None:
        return logging.DEBUG if debug else logging.INFO

    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _shared_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Render for a console instead of as JSON lines.
        level: Level name to log at; defaults follow ``debug``.
    """
    logging.basicConfig(
        level=resolve_log_level(debug, level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Any
    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*_shared_processors(), renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Build a 14 character request id.

    Eight bytes of microsecond timestamp and two random bytes, URL-safe
    base64 encoded with the padding stripped.
    """
    stamp = int(time.time() * 1_000_000).to_bytes(8, byteorder="big")
    raw = stamp + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, operation: str | None = None) -> str:
    """Bind the request id (generated when omitted) and operation name.

    Returns:
        The request id now bound
    """
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    if operation is not None:
        operation_ctx.set(operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
