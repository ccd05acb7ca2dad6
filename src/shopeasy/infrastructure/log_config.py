"""Structured logging (structlog on top of stdlib logging).

Application modules only ever call ``structlog.get_logger(__name__)``;
this module decides where the events go and how they are rendered.
Output goes to stderr so it never mixes with command output.
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "shopeasy"

# Shared processors used by both structlog and stdlib logging
_shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Route structlog through stdlib logging with a single stderr handler.

    Safe to call more than once: the previously installed handler is
    replaced rather than duplicated.
    """
    structlog.configure(
        processors=[
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    remove_handler()
    root.addHandler(handler)
    root.setLevel(level)


def remove_handler() -> None:
    """Detach the handler installed by ``configure_logging``, if any."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
