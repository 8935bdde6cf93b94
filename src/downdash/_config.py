"""Package configuration: DowndashConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from downdash._logging import LOG_LEVELS, configure_logging

__all__ = [
    'DowndashConfig',
    'get_config',
    'init',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class DowndashConfig:
    """Configuration for downdash.

    Attributes:
        log_level: Logging level (e.g. "DEBUG"). None = silent, no handlers installed.
        json_logs: Render log events as JSON lines instead of console output.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: DowndashConfig | None = None


def _detect_log_level() -> str | None:
    """Read DOWNDASH_LOG_LEVEL; empty or unset means silent."""
    value = os.environ.get('DOWNDASH_LOG_LEVEL', '').strip()
    return value.upper() or None


def _detect_json_logs() -> bool:
    """Read DOWNDASH_JSON_LOGS, defaulting to True."""
    value = os.environ.get('DOWNDASH_JSON_LOGS', '').strip().lower()
    if not value or value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logging.warning("Unknown DOWNDASH_JSON_LOGS value '%s', defaulting to JSON output", value)
    return True


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
) -> DowndashConfig:
    """Initialize downdash configuration.

    Unset arguments are filled from the environment. Calling init() again
    replaces the active configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", ...). Falls back to
            DOWNDASH_LOG_LEVEL; None = silent.
        json_logs: JSON output if True. Falls back to DOWNDASH_JSON_LOGS.

    Returns:
        The DowndashConfig that was set.

    Raises:
        ValueError: If the resolved log level is unknown.

    Example:
        ```python
        import downdash

        downdash.init(log_level='DEBUG', json_logs=False)
        downdash.reduce([], lambda a, b: a + b)  # logs reduce.empty_without_seed
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    if resolved_level is not None and resolved_level not in LOG_LEVELS:
        msg = f'Unknown log level {resolved_level!r}; expected one of {", ".join(LOG_LEVELS)}'
        raise ValueError(msg)

    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = DowndashConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> DowndashConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'downdash not initialized. Call downdash.init() first.'
        raise RuntimeError(msg)
    return _config
