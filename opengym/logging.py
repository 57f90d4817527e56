"""Structured logging helpers."""

from __future__ import annotations

import logging

import structlog

SERVICE_NAME = "opengym"


def _add_service(_, __, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: int | str = logging.INFO, *, json_output: bool = True) -> None:
    """Route structlog events to stdout, as JSON lines or for a terminal."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    processors = [
        structlog.contextvars.merge_contextvars,
        _add_service,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["SERVICE_NAME", "configure_logging", "logger"]
