"""Core matching primitives: `matches`, `extract` and the `is_` predicates.

Both primitives accept raw patterns (see `to_pattern`) and route through
whichever strategy the backend selector committed to.

Example:
    ```python
    from klaw_match import Some, SomePattern, extract, matches

    matches(Some(3), SomePattern)   # True
    extract(Some(3), SomePattern)   # 3
    matches({'a': 1, 'b': 2}, {'a': 1})  # True, extra keys are ignored
    ```
"""

from __future__ import annotations

from typing import Any

from klaw_match.backend import active_matcher
from klaw_match.patterns import to_pattern

__all__ = ['extract', 'get_predicates', 'is_', 'matches']


def matches(value: Any, pattern: Any) -> bool:
    """Return True if `value` satisfies `pattern`.

    Args:
        value: Any value, including Option/Result-like values.
        pattern: A shape token, a pattern variant, or a raw value lowered by
            `to_pattern`.

    Returns:
        Whether the value matches. The wildcard matches everything.
    """
    return active_matcher().matches(value, to_pattern(pattern))


def extract(value: Any, pattern: Any) -> Any:
    """Return what a handler receives once `pattern` has matched `value`.

    `SomePattern` yields the unwrapped Some value and `ErrPattern` the error
    carried by an Err. Every other pattern yields `value` unchanged. Calling
    this on a pair that did not match is not checked.
    """
    return active_matcher().extract(value, to_pattern(pattern))


def get_predicates() -> Any:
    """Return the active backend's predicate object."""
    return active_matcher().is_


class _PredicateProxy:
    """Forwards attribute access to the active backend's predicate object."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        return getattr(get_predicates(), name)

    def __dir__(self) -> list[str]:
        return dir(get_predicates())

    def __repr__(self) -> str:
        return f'<is_ -> {get_predicates()!r}>'


is_ = _PredicateProxy()
"""Runtime type predicates: `is_.raw_number(3)`, `is_.in_range(1, 5)(3)`, ..."""
