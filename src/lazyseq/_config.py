"""Library configuration: SeqConfig, environment detection and init()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from lazyseq._logging import configure_logging, get_logger

__all__ = [
    'SeqConfig',
    'get_config',
    'init',
    'reset_config',
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeqConfig:
    """Configuration for lazyseq.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or for the console (False).
        max_depth: Default depth limit for ``flatten_recursive`` when no depth
            is passed. ``-1`` means unbounded.
    """

    log_level: str | None = None
    json_output: bool = True
    max_depth: int = -1


# Installed configuration (set by init() or detected on first get_config())
_config: SeqConfig | None = None


def _detect_log_level() -> str | None:
    """Read LAZYSEQ_LOG_LEVEL; unknown level names fall back to None."""
    env_level = os.environ.get('LAZYSEQ_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in logging.getLevelNamesMapping():
        logger.warning('env_value_ignored', variable='LAZYSEQ_LOG_LEVEL', value=env_level)
        return None
    return env_level


def _detect_max_depth() -> int:
    """Read LAZYSEQ_MAX_DEPTH; anything unparsable means unbounded."""
    env_depth = os.environ.get('LAZYSEQ_MAX_DEPTH', '')
    if not env_depth:
        return -1
    try:
        depth = int(env_depth)
    except ValueError:
        logger.warning('env_value_ignored', variable='LAZYSEQ_MAX_DEPTH', value=env_depth)
        return -1
    return max(-1, depth)


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    max_depth: int | None = None,
) -> SeqConfig:
    """Install the lazyseq configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Detected from
            LAZYSEQ_LOG_LEVEL if None; logging is left untouched when neither is set.
        json_output: Render logs as JSON when logging is configured.
        max_depth: Default recursion limit for ``flatten_recursive``. Detected
            from LAZYSEQ_MAX_DEPTH if None. Values below -1 are clamped to -1.

    Returns:
        The SeqConfig that was installed.

    Example:
        ```python
        import lazyseq

        lazyseq.init(log_level='DEBUG', json_output=False, max_depth=3)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_depth = _detect_max_depth() if max_depth is None else max(-1, max_depth)

    _config = SeqConfig(
        log_level=resolved_level,
        json_output=json_output,
        max_depth=resolved_depth,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_output)

    return _config


def get_config() -> SeqConfig:
    """Get the installed configuration, detecting one from the environment if needed.

    Unlike ``init()``, detection never touches logging handlers.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = SeqConfig(log_level=_detect_log_level(), max_depth=_detect_max_depth())
    return _config


def reset_config() -> None:
    """Forget the installed configuration so the next lookup re-detects it."""
    global _config  # noqa: PLW0603
    _config = None
