"""Structured logging for downdash.

Uses structlog's ProcessorFormatter so structlog events and stdlib records
from the host application render through the same pipeline. Nothing is
emitted until `configure_logging` (or `downdash.init` with a level) runs.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOG_LEVELS',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_debug_enabled',
    'remove_log_hook',
]

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

_configured = False


def _get_shared_processors() -> list[Any]:
    """Processors shared between structlog and stdlib foreign records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: One of LOG_LEVELS, case-insensitive.
        json_output: Emit JSON lines if True, colored console output otherwise.

    Raises:
        ValueError: If level is not a known logging level.
    """
    import structlog

    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        msg = f'Unknown log level {level!r}; expected one of {", ".join(LOG_LEVELS)}'
        raise ValueError(msg)

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, normalized))

    global _configured  # noqa: PLW0603
    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name, usually the calling module's `__name__`.

    Returns:
        A lazily-bound structlog logger.
    """
    import structlog

    return structlog.get_logger(name)


def is_debug_enabled(name: str = 'downdash') -> bool:
    """Return True once logging is configured and `name` accepts DEBUG records."""
    return _configured and logging.getLogger(name).isEnabledFor(logging.DEBUG)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook that receives a copy of every log event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: S112
                continue
        return event_dict

    return hook_processor
