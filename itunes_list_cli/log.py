"""Structured logging configuration using structlog."""

from __future__ import annotations

import sys
from typing import Any, Optional

import structlog

from .config import Settings

_LEVELS = {"debug": 10, "info": 20, "warning": 30, "warn": 30, "error": 40, "critical": 50}


class AppLogger:
    """把渲染好的日志行转发给 Textual 的 ``App.log``，不直接写终端。"""

    def __init__(self, app: Any):
        self._app = app

    def msg(self, message: str) -> None:
        self._app.log(message)

    log = debug = info = warn = warning = error = critical = exception = fatal = msg


class AppLoggerFactory:
    def __init__(self, app: Any):
        self._app = app

    def __call__(self, *args: Any) -> AppLogger:
        return AppLogger(self._app)


def setup_logging(settings: Settings, app: Optional[Any] = None) -> None:
    """Configure structlog.

    Uses the console renderer by default and JSON when ``log_format`` is ``json``.
    Lines go to stderr, or to ``app.log`` when a Textual app owns the terminal.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=app is None)

    if app is None:
        logger_factory: Any = structlog.PrintLoggerFactory(file=sys.stderr)
    else:
        logger_factory = AppLoggerFactory(app)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS.get(settings.log_level.lower(), 20)),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger, optionally bound to a component name."""
    log = structlog.get_logger()
    if name:
        log = log.bind(component=name)
    return log


__all__ = ["setup_logging", "get_logger", "AppLogger", "AppLoggerFactory"]
