"""Bundled Result variants: `Ok(value)` and `Err(error)`.

The matcher relies only on `is_ok`/`is_err`/`unwrap`/`unwrap_err`
(see `ResultLike`), so Result values from other libraries dispatch the same.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """A successful outcome carrying `value`.

    Examples:
        >>> Ok(2).map(lambda n: n + 1)
        Ok(value=3)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Always raises; an Ok has no error.

        Raises:
            RuntimeError: With the Ok value in the message.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, _msg: str) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """A failed outcome carrying `error`.

    Examples:
        >>> Err('timeout').unwrap_err()
        'timeout'
        >>> Err('timeout').unwrap_or(-1)
        -1
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def unwrap(self) -> NoReturn:
        """Always raises; an Err has no success value.

        Raises:
            RuntimeError: With the error in the message.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise `RuntimeError` with `msg` followed by the error."""
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Wrap `f(error)` in a new Err."""
        return Err(f(self.error))


type Result[T, E = Exception] = Ok[T] | Err[E]
