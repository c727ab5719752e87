"""Bundled Option variants: `Some(value)` and the `Nothing` singleton.

These are one producer of the Option contract; the matcher only relies on
`is_some`/`is_none`/`unwrap` (see `OptionLike`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A present value.

    Examples:
        >>> Some(3).unwrap()
        3
        >>> Some('a').map(str.upper)
        Some(value='A')
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, _msg: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Wrap `f(value)` in a new Some."""
        return Some(f(self.value))


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """The absent value. Use the module-level `Nothing`.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or('fallback')
        'fallback'
    """

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def unwrap(self) -> NoReturn:
        """Always raises.

        Raises:
            RuntimeError: There is no value to return.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise `RuntimeError(msg)`."""
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Nothing maps to itself; `_f` is never called."""
        return self


Nothing: NothingType = NothingType()

type Option[T] = Some[T] | NothingType
