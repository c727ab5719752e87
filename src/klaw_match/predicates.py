"""Runtime type predicates used by `match_type` and exposed as `is_`.

The interpreted table below is what `is_` resolves to when no native matcher
was acquired. A native matcher supplies its own object with the same method
names, and both must agree on every input.

Category map:

| predicate    | matches                                                   |
| ------------ | --------------------------------------------------------- |
| `nullish`    | `None` and `msgspec.UNSET`                                |
| `str`        | `str` and `collections.UserString`                        |
| `raw_string` | `str` only                                                |
| `numeric`    | any `numbers.Number` except `bool` and NaN                |
| `raw_number` | `int` and `float` except `bool` and NaN                   |
| `boolean`    | `bool`                                                    |
| `vec`        | sequences that are not string- or bytes-like              |
| `object`     | mappings and attribute-bearing values (see `is_structural_target`) |
| `function`   | callables                                                 |
"""

from __future__ import annotations

import cmath
import math
import numbers
from collections import UserString
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import Any

import msgspec

from klaw_match.patterns import is_structural_target, strict_equals
from klaw_match.types.protocols import is_option, is_result

__all__ = ['TypePredicates']


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


class TypePredicates:
    """Interpreted predicate table.

    Method names mirror the predicate names so `is_.raw_number(3)` reads the
    same whichever backend is active.
    """

    __slots__ = ()

    def nullish(self, value: Any) -> bool:
        return value is None or value is msgspec.UNSET

    def str(self, value: Any) -> bool:
        return isinstance(value, str | UserString)

    def raw_string(self, value: Any) -> bool:
        return isinstance(value, str)

    def numeric(self, value: Any) -> bool:
        return isinstance(value, numbers.Number) and not isinstance(value, bool) and not _is_nan(value)

    def raw_number(self, value: Any) -> bool:
        return isinstance(value, int | float) and not isinstance(value, bool) and not _is_nan(value)

    def boolean(self, value: Any) -> bool:
        return isinstance(value, bool)

    def vec(self, value: Any) -> bool:
        return isinstance(value, Sequence) and not isinstance(value, str | UserString | bytes | bytearray)

    def object(self, value: Any) -> bool:
        return is_structural_target(value)

    def function(self, value: Any) -> bool:
        return callable(value)

    def some(self, value: Any) -> bool:
        return is_option(value) and bool(value.is_some())

    def none(self, value: Any) -> bool:
        return is_option(value) and bool(value.is_none())

    def ok(self, value: Any) -> bool:
        return is_result(value) and bool(value.is_ok())

    def err(self, value: Any) -> bool:
        return is_result(value) and bool(value.is_err())

    def empty(self, value: Any) -> bool:
        """Return True for nullish values and for containers with nothing in them.

        Strings and sequences are empty at length zero, mappings with no keys,
        structs with no fields and plain objects with no instance attributes.
        Numbers, bools, callables and Option/Result values (including
        `Nothing`) are never empty.
        """
        if self.nullish(value):
            return True
        if is_option(value) or is_result(value):
            return False
        if self.str(value) or self.vec(value):
            return len(value) == 0
        if isinstance(value, Mapping):
            return len(value) == 0
        if isinstance(value, msgspec.Struct):
            return not value.__struct_fields__
        if is_structural_target(value) and hasattr(value, '__dict__'):
            return not vars(value)
        return False

    def equal_to(self, target: Any) -> Callable[[Any], bool]:
        """Build a predicate testing strict equality with `target`."""

        def check(value: Any) -> bool:
            return strict_equals(value, target)

        return check

    def in_range(self, low: Any, high: Any) -> Callable[[Any], bool]:
        """Build a predicate testing `low <= value <= high`.

        Values that do not order against the bounds are out of range.
        """

        def check(value: Any) -> bool:
            try:
                return bool(low <= value <= high)
            except TypeError:
                return False

        return check

    def predicate[T](self, fn: Callable[[T], bool]) -> Callable[[T], bool]:
        """Return `fn` unchanged; marks a callable as a predicate at call sites."""
        return fn

    def __repr__(self) -> str:
        return '<TypePredicates interpreted>'
