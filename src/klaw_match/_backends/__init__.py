"""Matcher protocol and its implementations."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from klaw_match.patterns import Pattern

__all__ = ['Matcher']


@runtime_checkable
class Matcher(Protocol):
    """Protocol for matcher strategies.

    Implementations:
        - InterpretedMatcher: pure-Python structural algorithm
        - NativeMatcher: delegates to the compiled `_match_rs` module

    Both receive patterns already lowered by `to_pattern` and must return
    identical results for identical inputs.
    """

    accelerated: bool
    is_: Any

    def matches(self, value: Any, pattern: Pattern) -> bool:
        """Return True if value satisfies pattern."""
        ...

    def extract(self, value: Any, pattern: Pattern) -> Any:
        """Return what the handler of a matched pattern receives."""
        ...
