"""aiologic-backed once-cell for the backend selector.

aiologic locks work from both threads and async tasks, so one cell serialises
a blocking `ensure_initialized()` racing an awaited `ensure_initialized_async()`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, cast

import aiologic

__all__ = ['OnceCell']

_EMPTY: Any = object()


class OnceCell[T]:
    """Holds one lazily computed value; the initializer runs at most once.

    Reads after the first write take no lock. Concurrent first callers queue
    on the lock and, once inside, find the value already stored.

    Examples:
        >>> cell: OnceCell[str] = OnceCell()
        >>> cell.get() is None
        True
        >>> cell.get_or_init(lambda: 'first')
        'first'
        >>> cell.get_or_init(lambda: 'second')
        'first'
    """

    __slots__ = ('_lock', '_slot')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._slot: Any = _EMPTY

    def get(self) -> T | None:
        """Return the stored value, or None without blocking if there is none yet."""
        slot = self._slot
        return None if slot is _EMPTY else cast('T', slot)

    def get_or_init(self, init: Callable[[], T]) -> T:
        """Return the stored value, running `init()` first if the cell is empty.

        If `init` raises, the cell stays empty and the exception propagates.
        """
        slot = self._slot
        if slot is not _EMPTY:
            return cast('T', slot)
        with self._lock:
            if self._slot is _EMPTY:
                self._slot = init()
            return cast('T', self._slot)

    async def get_or_init_async(self, init: Callable[[], T]) -> T:
        """Awaiting counterpart of `get_or_init`.

        Only the lock acquisition awaits. `init` is a plain function run while
        the lock is held, so the lock is never held across a suspension and a
        blocking `get_or_init` on the same thread cannot find it taken.
        """
        slot = self._slot
        if slot is not _EMPTY:
            return cast('T', slot)
        async with self._lock:
            if self._slot is _EMPTY:
                self._slot = init()
            return cast('T', self._slot)

    def is_set(self) -> bool:
        return self._slot is not _EMPTY

    def clear(self) -> None:
        """Empty the cell so the next access initializes again."""
        with self._lock:
            self._slot = _EMPTY
