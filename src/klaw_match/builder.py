"""Fluent match expressions.

Example:
    ```python
    from klaw_match import MatchBuilder, __

    label = (
        MatchBuilder.create(code)
        .with_(200, lambda _: 'ok')
        .with_(lambda c: 500 <= c < 600, lambda _: 'server error')
        .otherwise(lambda c: f'unexpected {c}')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from klaw_match.backend import active_matcher, ensure_initialized
from klaw_match.errors import NoPatternMatchedError
from klaw_match.patterns import MatchArm, ShapeToken, to_pattern

__all__ = ['MatchBuilder', '__']

__ = ShapeToken.WILDCARD
"""Builder wildcard; the same token as `_`."""


class MatchBuilder[T, R]:
    """Accumulates arms against one value and evaluates them first-match-wins.

    Unlike `match_value`, handlers always receive the value unchanged.
    """

    __slots__ = ('_arms', '_value')

    def __init__(self, value: T) -> None:
        self._value = value
        self._arms: list[MatchArm] = []

    @classmethod
    def create(cls, value: T) -> MatchBuilder[T, Any]:
        """Start a match expression over `value`."""
        return cls(value)

    def with_(self, pattern: Any, handler: Callable[[T], R]) -> MatchBuilder[T, R]:
        """Add an arm. Returns self for chaining."""
        self._arms.append(MatchArm(to_pattern(pattern), handler))
        return self

    def _evaluate(self) -> MatchArm | None:
        ensure_initialized()
        matcher = active_matcher()
        for arm in self._arms:
            if matcher.matches(self._value, arm.pattern):
                return arm
        return None

    def otherwise(self, default: Callable[[T], R]) -> R:
        """Run the first matching arm, or `default(value)` if none matched."""
        arm = self._evaluate()
        if arm is None:
            return default(self._value)
        return arm.handler(self._value)

    def run(self) -> R:
        """Run the first matching arm.

        Raises:
            NoPatternMatchedError: If no arm matched.
        """
        arm = self._evaluate()
        if arm is None:
            raise NoPatternMatchedError()
        return arm.handler(self._value)

    def __len__(self) -> int:
        return len(self._arms)

    def __repr__(self) -> str:
        return f'MatchBuilder({self._value!r}, arms={len(self._arms)})'
