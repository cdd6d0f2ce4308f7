"""Structured logging for tagged_adt.

Events are rendered by structlog's ProcessorFormatter on a handler attached to
the ``tagged_adt`` stdlib logger. The root logger and its handlers belong to
the host application and are left alone. The library stays silent until
:func:`configure_logging` (or ``init``) is called.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_configured',
    'remove_log_hook',
    'reset_logging',
]

LOGGER_NAME = 'tagged_adt'

_handler: logging.Handler | None = None
_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing a copy of each event to the registered hooks."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            continue
    return event_dict


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Configure structlog and the ``tagged_adt`` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    shared = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _get_renderer(json_output),
            ],
        )
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Detach the handler installed by :func:`configure_logging` and restore defaults."""
    global _handler  # noqa: PLW0603

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
        _handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
    structlog.reset_defaults()


def is_configured() -> bool:
    """Return True once structlog has been configured, here or by the host application."""
    return structlog.is_configured()


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger, a child of ``tagged_adt`` by convention."""
    return structlog.get_logger(name)


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called with a copy of each log entry."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
