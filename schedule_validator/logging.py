"""Structured logging for the validator.

The CLI writes tables, reports and JSON to stdout, so log events go to stderr
and never mix with output a caller may pipe or parse. `setup_logging` is
called once per CLI invocation from the Typer callback; library modules only
call `get_logger(__name__)` and emit snake_case events such as
``validation_complete`` or ``config_converted`` with key/value context.
"""

import logging
import sys

import structlog


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for the CLI.

    Args:
        json_output: Render one JSON object per event instead of console lines.
        log_level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # Not cached: tests and repeated CLI runs reconfigure the output stream.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger whose events carry ``module=name``."""
    return structlog.get_logger(module=name)
