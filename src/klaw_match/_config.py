"""Matcher configuration: Backend enum, MatchConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from klaw_match._logging import configure_logging, get_logger

__all__ = [
    'DEFAULT_NATIVE_MODULE',
    'Backend',
    'MatchConfig',
    'get_config',
    'init',
]

DEFAULT_NATIVE_MODULE = 'klaw_match._match_rs'
"""Import path of the optional compiled matcher."""

_log = get_logger(__name__)


class Backend(Enum):
    """Which matcher implementation to use."""

    AUTO = 'auto'
    NATIVE = 'native'
    PYTHON = 'python'


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for the matcher backend.

    Attributes:
        backend: AUTO and NATIVE try the compiled module first, PYTHON never does.
        native_module: Import path of the compiled matcher.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    backend: Backend = Backend.AUTO
    native_module: str = DEFAULT_NATIVE_MODULE
    log_level: str | None = None


_config: MatchConfig | None = None


def _detect_backend() -> Backend:
    """Detect the backend from KLAW_MATCH_BACKEND, defaulting to AUTO."""
    env_backend = os.environ.get('KLAW_MATCH_BACKEND', '').lower()
    if not env_backend:
        return Backend.AUTO
    try:
        return Backend(env_backend)
    except ValueError:
        _log.warning('config.unknown_backend', value=env_backend, default=Backend.AUTO.value)
        return Backend.AUTO


def _detect_native_module() -> str:
    return os.environ.get('KLAW_MATCH_NATIVE_MODULE') or DEFAULT_NATIVE_MODULE


def init(
    backend: Backend | str | None = None,
    native_module: str | None = None,
    log_level: str | None = None,
) -> MatchConfig:
    """Set the matcher configuration.

    Must run before the first match to influence backend selection; the
    selector commits to a strategy once and ignores later changes.

    Args:
        backend: Backend enum or string ("auto", "native", "python").
            Read from KLAW_MATCH_BACKEND if None.
        native_module: Import path of the compiled matcher.
            Read from KLAW_MATCH_NATIVE_MODULE if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The MatchConfig that was set.

    Example:
        ```python
        from klaw_match import init, Backend

        init(backend=Backend.PYTHON, log_level="INFO")
        ```
    """
    global _config  # noqa: PLW0603

    if backend is None:
        resolved_backend = _detect_backend()
    elif isinstance(backend, str):
        resolved_backend = Backend(backend.lower())
    else:
        resolved_backend = backend

    _config = MatchConfig(
        backend=resolved_backend,
        native_module=native_module or _detect_native_module(),
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    # Imported here: the backend module depends on this one.
    from klaw_match.backend import is_initialized

    if is_initialized():
        _log.warning('config.ignored_after_init', backend=resolved_backend.value)

    return _config


def get_config() -> MatchConfig:
    """Get the current configuration, creating one from the environment if unset."""
    if _config is None:
        return init()
    return _config


def _reset_config() -> None:
    global _config  # noqa: PLW0603
    _config = None
