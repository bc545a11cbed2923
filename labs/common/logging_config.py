"""
structlog setup shared by every lab.

Events print to stdout as readable key=value lines, next to the rich output
of the walkthroughs. Library code asks for a logger with get_logger(__name__)
and never configures anything itself; run_all calls setup_logging once.
"""

import logging
import os
import sys

import structlog


def _resolve_level(level: str | None) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")
    return numeric


def setup_logging(level: str | None = None) -> None:
    """
    Route structlog and stdlib logging to stdout at one level.

    Args:
        level: Level name such as "DEBUG" or "warning". Falls back to
            $LOG_LEVEL, then INFO.

    Raises:
        ValueError: level is not a logging level name
    """
    numeric_level = _resolve_level(level)

    # duckdb and prefect log through the stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # loggers are created at import time, before setup_logging runs
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger for a lab module; events carry module=<name>."""
    if name:
        return structlog.get_logger(module=name)
    return structlog.get_logger()
