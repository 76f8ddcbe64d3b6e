"""
Structured logging for the job board.

Every event carries the request id of the HTTP request it belongs to and,
once the caller is known, the ``user_id`` and ``company_id`` the request
acts for. The values live in structlog's context variables, so resolvers
never pass them around.
"""

from __future__ import annotations

import logging
import secrets
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.typing import Processor

from .config import settings

if TYPE_CHECKING:
    from .auth.context import AuthContext


def _log_level(debug: bool) -> int | str:
    return logging.DEBUG if debug else settings.log_level.upper()


def configure_logging(debug: bool | None = None) -> None:
    """Route structlog through the stdlib root logger.

    Args:
        debug: Console rendering at DEBUG level. Defaults to ``settings.debug``;
            otherwise events are rendered as JSON at ``settings.log_level``.
    """
    if debug is None:
        debug = settings.debug

    logging.basicConfig(
        level=_log_level(debug),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Processor = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14 url-safe characters, unique enough to grep one request out of the logs."""
    return secrets.token_urlsafe(10)


def bind_request_context(request_id: str | None = None) -> str:
    """Start a fresh logging context for one request and return its id."""
    request_id = request_id or generate_request_id()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id


def bind_auth_context(auth_context: AuthContext) -> None:
    """Tag the rest of the request's events with the acting user and company."""
    if auth_context.user is None:
        return
    structlog.contextvars.bind_contextvars(
        user_id=auth_context.user.id,
        company_id=auth_context.user.company_id,
    )


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
