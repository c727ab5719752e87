"""Pure-Python matcher."""

from __future__ import annotations

from typing import Any

from klaw_match.patterns import (
    LiteralPattern,
    Pattern,
    PredicatePattern,
    ShapeToken,
    StructuralPattern,
    is_missing,
    is_structural_target,
    lookup,
    strict_equals,
)
from klaw_match.predicates import TypePredicates
from klaw_match.types.protocols import is_option, is_result

__all__ = ['InterpretedMatcher']


class InterpretedMatcher:
    """Matcher that walks the pattern tree in Python.

    Structural patterns recurse depth-first over their listed keys and stop
    at the first failing key. Recursion follows the pattern, not the value,
    so cyclic values terminate; only a self-referential pattern would not.
    """

    accelerated = False

    __slots__ = ('is_',)

    def __init__(self) -> None:
        self.is_ = TypePredicates()

    def matches(self, value: Any, pattern: Pattern) -> bool:
        match pattern:
            case ShapeToken.WILDCARD:
                return True
            case ShapeToken.SOME:
                return is_option(value) and bool(value.is_some())
            case ShapeToken.NONE:
                return is_option(value) and bool(value.is_none())
            case ShapeToken.OK:
                return is_result(value) and bool(value.is_ok())
            case ShapeToken.ERR:
                return is_result(value) and bool(value.is_err())
            case PredicatePattern(fn=fn):
                return bool(fn(value))
            case StructuralPattern(fields=fields):
                return self._matches_fields(value, fields)
            case LiteralPattern(value=target):
                return strict_equals(value, target)
            case _:
                raise TypeError(f'Not a lowered pattern: {pattern!r}')

    def _matches_fields(self, value: Any, fields: Any) -> bool:
        if not is_structural_target(value):
            return False
        for key, sub_pattern in fields.items():
            found = lookup(value, key)
            if is_missing(found) or not self.matches(found, sub_pattern):
                return False
        return True

    def extract(self, value: Any, pattern: Pattern) -> Any:
        if pattern is ShapeToken.SOME and is_option(value):
            return value.unwrap()
        if pattern is ShapeToken.ERR and is_result(value):
            return value.unwrap_err()
        return value

    def __repr__(self) -> str:
        return '<InterpretedMatcher>'
