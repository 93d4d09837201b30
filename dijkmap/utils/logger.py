# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
DijkMap — Structured Logging
JSON-formatted logs via structlog. Every log entry carries the library
name so map events can be told apart from the host game's own logs.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from dijkmap.config import Settings, get_settings


def _add_app_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Inject library name into every log entry."""
    event_dict["app"] = "dijkmap"
    return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog for JSON output by default and human-readable
    console output at DEBUG level.
    Call once from the host application; the library never configures
    logging on import.
    """
    settings = settings if settings is not None else get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_app_info,
    ]

    if settings.log_level == "DEBUG":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str = "dijkmap") -> structlog.BoundLogger:
    """
    Return a structlog bound logger.

    Usage:
        log = get_logger(__name__)
        log.info("field_mapped", rows=5, cols=7, iterations=9)
    """
    return structlog.get_logger(name)
