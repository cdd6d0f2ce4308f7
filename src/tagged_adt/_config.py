"""Library configuration: AdtConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from tagged_adt._logging import configure_logging, get_logger

__all__ = [
    'AdtConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'TAGGED_ADT_LOG_LEVEL'
LOG_FORMAT_ENV = 'TAGGED_ADT_LOG_FORMAT'


@dataclass(frozen=True)
class AdtConfig:
    """Configuration for tagged_adt.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON log lines if True, colored console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: AdtConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from TAGGED_ADT_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from TAGGED_ADT_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> AdtConfig:
    """Initialize tagged_adt with the given configuration.

    Unset arguments are read from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = read
            TAGGED_ADT_LOG_LEVEL, silent if that is unset too.
        json_logs: JSON or console log output. None = read TAGGED_ADT_LOG_FORMAT.

    Returns:
        The AdtConfig that was set.

    Example:
        ```python
        import tagged_adt

        tagged_adt.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = AdtConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
        get_logger(__name__).debug('tagged_adt_initialized', log_level=_config.log_level)

    return _config


def get_config() -> AdtConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'tagged_adt not initialized. Call tagged_adt.init() first.'
        raise RuntimeError(msg)
    return _config
