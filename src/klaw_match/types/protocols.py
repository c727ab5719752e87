"""Structural contracts for Option/Result producers.

The matcher never checks for the bundled `Some`/`Ok` classes. Anything that
exposes the four-method contract is recognised, so values coming from other
Result libraries dispatch the same way.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ['OptionLike', 'ResultLike', 'is_option', 'is_result']


@runtime_checkable
class OptionLike(Protocol):
    """Presence/absence of a value. Exactly one of is_some/is_none holds."""

    def is_some(self) -> bool: ...

    def is_none(self) -> bool: ...

    def unwrap(self) -> Any: ...


@runtime_checkable
class ResultLike(Protocol):
    """Success or failure. Exactly one of is_ok/is_err holds."""

    def is_ok(self) -> bool: ...

    def is_err(self) -> bool: ...

    def unwrap(self) -> Any: ...

    def unwrap_err(self) -> Any: ...


def is_option(value: object) -> bool:
    """Return True if value satisfies the Option contract."""
    return not isinstance(value, type) and isinstance(value, OptionLike)


def is_result(value: object) -> bool:
    """Return True if value satisfies the Result contract."""
    return not isinstance(value, type) and isinstance(value, ResultLike)
