"""Structured logging for resulttype.

Library events are emitted by structlog loggers wrapped around stdlib loggers
under the `resulttype` namespace and filtered by the stdlib level, so nothing
is emitted until `configure_logging` (or the application) enables it.
`configure_logging` only touches the `resulttype` logger, never the root one.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'resulttype'

_handler: logging.Handler | None = None


def _get_processors() -> list[Any]:
    """Processor chain run for every resulttype event before the stdlib hand-off."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a structlog-rendering handler to the `resulttype` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
        stream: Destination stream, stderr by default.

    Returns:
        The configured `resulttype` stdlib logger.
    """
    import structlog

    global _handler  # noqa: PLW0603

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return logger


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog BoundLogger on top of the stdlib logger `name`."""
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
