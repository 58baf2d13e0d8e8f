"""Structlog-based logging for the entity matching engine.

Library code never prints; it logs through ``get_logger`` and only at debug
level (batch sizes, vetoes). Nothing is configured on import and unconfigured
events go to stdlib loggers, so nothing is printed. Applications call
``configure_logging`` once at startup, usually with
``MatcherSettings.from_env().log_level``.
"""
from __future__ import annotations

import logging
from typing import Literal

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


def configure_logging(level: LogLevel = "INFO", fmt: LogFormat = "json") -> None:
    """Route structlog events through a level filter to a renderer.

    Args:
        level: Lowest level that is emitted
        fmt: ``json`` for machine-readable lines, ``console`` for local runs
    """
    numeric_level = getattr(logging, level)
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )

    logging.basicConfig(format="%(message)s", level=numeric_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "entity_matching"):
    """Structlog logger backed by the stdlib logger ``name``.

    Until an application configures logging, events end at the stdlib
    logger, whose default WARNING level keeps debug events silent.
    """
    return structlog.wrap_logger(logging.getLogger(name))
