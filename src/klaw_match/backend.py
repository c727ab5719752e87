"""Backend selector: picks the matcher strategy once per process.

The first call to `ensure_initialized()` (or its async twin) resolves the
configuration, tries to acquire the native matcher unless the config says
PYTHON, and commits to either `NativeMatcher` or `InterpretedMatcher`.
Acquisition failures never escape: they are logged as warnings and the
interpreted matcher is committed instead.

Later calls return immediately. Concurrent first calls, from threads or
async tasks, wait on the same aiologic lock so exactly one acquisition runs.
"""

from __future__ import annotations

import importlib

import msgspec

from klaw_match._backends import Matcher
from klaw_match._backends.interpreted import InterpretedMatcher
from klaw_match._backends.native import REQUIRED_EXPORTS, NativeMatcher
from klaw_match._config import Backend, MatchConfig, get_config
from klaw_match._internal.sync import OnceCell
from klaw_match._logging import get_logger
from klaw_match.errors import BackendUnavailableError

__all__ = [
    'BackendStatus',
    'active_matcher',
    'backend_status',
    'ensure_initialized',
    'ensure_initialized_async',
    'is_initialized',
    'using_accelerated',
]

_log = get_logger(__name__)

_matcher: OnceCell[Matcher] = OnceCell()


class BackendStatus(msgspec.Struct, frozen=True, gc=False):
    """Snapshot of the selector state."""

    initialized: bool
    accelerated: bool
    backend: str | None = None
    module: str | None = None


def _load_native(module_name: str) -> NativeMatcher:
    """Import and wrap the native module.

    Raises:
        BackendUnavailableError: If the import fails, an export is missing or
            the predicate object cannot be built.
    """
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise BackendUnavailableError(module_name, f'import failed: {exc!r}') from exc

    missing = [name for name in REQUIRED_EXPORTS if not callable(getattr(module, name, None))]
    if missing:
        raise BackendUnavailableError(module_name, f'missing exports: {", ".join(missing)}')

    try:
        return NativeMatcher(module)
    except Exception as exc:
        raise BackendUnavailableError(module_name, f'initialization failed: {exc!r}') from exc


def _select(config: MatchConfig) -> Matcher:
    if config.backend is Backend.PYTHON:
        _log.info('backend.selected', backend='interpreted', reason='configured')
        return InterpretedMatcher()

    try:
        matcher = _load_native(config.native_module)
    except BackendUnavailableError as exc:
        _log.warning('backend.native_unavailable', module=exc.module, reason=exc.reason, requested=config.backend.value)
        return InterpretedMatcher()

    _log.info('backend.selected', backend='native', module=config.native_module)
    return matcher


def ensure_initialized() -> None:
    """Select the matcher strategy if that has not happened yet.

    Blocks while another thread or task is selecting. A no-op once a
    strategy is committed.
    """
    _matcher.get_or_init(lambda: _select(get_config()))


async def ensure_initialized_async() -> None:
    """Async version of ensure_initialized.

    Waiting for another selector is awaited. The selection itself runs inline
    without suspending, so blocking entry points called from other tasks on
    the same loop never observe a half-held lock.
    """
    await _matcher.get_or_init_async(lambda: _select(get_config()))


def is_initialized() -> bool:
    """Return True once a strategy has been committed."""
    return _matcher.is_set()


def using_accelerated() -> bool:
    """Return True if the committed strategy is the native matcher.

    False before initialization.
    """
    matcher = _matcher.get()
    return matcher is not None and matcher.accelerated


def active_matcher() -> Matcher:
    """Return the committed strategy, selecting it first if needed."""
    matcher = _matcher.get()
    if matcher is None:
        return _matcher.get_or_init(lambda: _select(get_config()))
    return matcher


def backend_status() -> BackendStatus:
    """Report whether a strategy is committed and which one."""
    matcher = _matcher.get()
    if matcher is None:
        return BackendStatus(initialized=False, accelerated=False)
    if isinstance(matcher, NativeMatcher):
        return BackendStatus(initialized=True, accelerated=True, backend='native', module=matcher.module_name)
    return BackendStatus(initialized=True, accelerated=False, backend='interpreted')


def _reset_backend() -> None:
    """Forget the committed strategy. Test-only."""
    _matcher.clear()
