"""Library configuration: Config, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resulttype._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'RESULTTYPE_LOG_LEVEL'
LOG_FORMAT_ENV = 'RESULTTYPE_LOG_FORMAT'


@dataclass(frozen=True)
class Config:
    """Configuration for resulttype.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON when True, console text otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from RESULTTYPE_LOG_LEVEL, None when unset."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from RESULTTYPE_LOG_FORMAT ("json" or "console").

    Unknown values fall back to JSON.
    """
    log_format = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if log_format == 'console':
        return False
    if log_format and log_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, log_format)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> Config:
    """Initialize resulttype with the given configuration.

    Args:
        log_level: Logging level. Read from RESULTTYPE_LOG_LEVEL if None.
            If still None, logging is left unconfigured.
        json_output: JSON vs console rendering. Read from
            RESULTTYPE_LOG_FORMAT if None.

    Returns:
        The Config that was set.

    Example:
        ```python
        import resulttype

        resulttype.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = Config(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'resulttype not initialized. Call resulttype.init() first.'
        raise RuntimeError(msg)
    return _config
