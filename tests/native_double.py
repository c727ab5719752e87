"""Stand-in for the compiled matcher, used to exercise the native backend path.

Written independently of the interpreted matcher, in the duck-typed style of
the compiled module, so equivalence tests compare two implementations.
"""

from __future__ import annotations

import math
import numbers
import types
from collections import UserString
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import msgspec
from klaw_match.errors import NoPatternMatchedError
from klaw_match.patterns import LiteralPattern, PredicatePattern, ShapeToken, StructuralPattern

_TOKEN_METHODS = {
    ShapeToken.SOME: ('is_some', 'is_none'),
    ShapeToken.NONE: ('is_none', 'is_some'),
    ShapeToken.OK: ('is_ok', 'is_err'),
    ShapeToken.ERR: ('is_err', 'is_ok'),
}

_ATOMS = (str, UserString, bytes, bytearray, memoryview, bool, numbers.Number)


def _has_methods(value: Any, *names: str) -> bool:
    if isinstance(value, type):
        return False
    return all(callable(getattr(value, name, None)) for name in names)


def _probe(value: Any, token: ShapeToken) -> bool:
    probe, other = _TOKEN_METHODS[token]
    if not _has_methods(value, probe, other, 'unwrap'):
        return False
    if token in (ShapeToken.OK, ShapeToken.ERR) and not _has_methods(value, 'unwrap_err'):
        return False
    return bool(getattr(value, probe)())


def _same(a: Any, b: Any) -> bool:
    if type(a) is bool or type(b) is bool:
        return a is b
    return bool(a == b)


def _descendable(value: Any) -> bool:
    if value is None or value is msgspec.UNSET or isinstance(value, _ATOMS):
        return False
    return not isinstance(value, Sequence) and not callable(value)


def matches_pattern(value: Any, pattern: Any) -> bool:
    if pattern is ShapeToken.WILDCARD:
        return True
    if isinstance(pattern, ShapeToken):
        return _probe(value, pattern)
    if isinstance(pattern, PredicatePattern):
        return bool(pattern.fn(value))
    if isinstance(pattern, StructuralPattern):
        if not _descendable(value):
            return False
        for key, sub in pattern.fields.items():
            if isinstance(value, Mapping):
                if key not in value:
                    return False
                inner = value[key]
            elif isinstance(key, str) and hasattr(value, key):
                inner = getattr(value, key)
            else:
                return False
            if not matches_pattern(inner, sub):
                return False
        return True
    if isinstance(pattern, LiteralPattern):
        return _same(value, pattern.value)
    raise TypeError(pattern)


def extract_value(value: Any, pattern: Any) -> Any:
    if pattern is ShapeToken.SOME and _has_methods(value, 'is_some', 'is_none', 'unwrap'):
        return value.unwrap()
    if pattern is ShapeToken.ERR and _has_methods(value, 'is_ok', 'is_err', 'unwrap', 'unwrap_err'):
        return value.unwrap_err()
    return value


def match_value(value: Any, arms: Any) -> Any:
    for pattern, handler in arms:
        if matches_pattern(value, pattern):
            return handler(extract_value(value, pattern))
    raise NoPatternMatchedError()


def _not_nan(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, complex):
        return not (math.isnan(value.real) or math.isnan(value.imag))
    return True


def _empty(value: Any) -> bool:
    if value is None or value is msgspec.UNSET:
        return True
    if _has_methods(value, 'is_some', 'is_none', 'unwrap'):
        return False
    if _has_methods(value, 'is_ok', 'is_err', 'unwrap', 'unwrap_err'):
        return False
    if isinstance(value, str | UserString | Sequence | Mapping) and not isinstance(value, bytes | bytearray):
        return len(value) == 0
    if isinstance(value, msgspec.Struct):
        return len(value.__struct_fields__) == 0
    if _descendable(value) and hasattr(value, '__dict__'):
        return len(vars(value)) == 0
    return False


def _in_range(low: Any, high: Any) -> Any:
    def check(value: Any) -> bool:
        try:
            return bool(low <= value <= high)
        except TypeError:
            return False

    return check


def create_pattern_matcher_is() -> types.SimpleNamespace:
    return types.SimpleNamespace(
        nullish=lambda v: v is None or v is msgspec.UNSET,
        str=lambda v: isinstance(v, str | UserString),
        raw_string=lambda v: isinstance(v, str),
        numeric=lambda v: isinstance(v, numbers.Number) and type(v) is not bool and _not_nan(v),
        raw_number=lambda v: isinstance(v, int | float) and type(v) is not bool and _not_nan(v),
        boolean=lambda v: type(v) is bool,
        vec=lambda v: isinstance(v, Sequence) and not isinstance(v, str | UserString | bytes | bytearray),
        object=_descendable,
        function=callable,
        some=lambda v: _probe(v, ShapeToken.SOME),
        none=lambda v: _probe(v, ShapeToken.NONE),
        ok=lambda v: _probe(v, ShapeToken.OK),
        err=lambda v: _probe(v, ShapeToken.ERR),
        empty=_empty,
        equal_to=lambda target: lambda v: _same(v, target),
        in_range=_in_range,
        predicate=lambda fn: fn,
    )


def build(name: str = 'klaw_match_native_double', **overrides: Any) -> types.ModuleType:
    """Build a module object exposing the native matcher exports.

    Keyword overrides replace (or, when None, remove) individual exports.
    """
    module = types.ModuleType(name)
    exports = {
        'matches_pattern': matches_pattern,
        'extract_value': extract_value,
        'match_value': match_value,
        'create_pattern_matcher_is': create_pattern_matcher_is,
    }
    exports.update(overrides)
    for export, fn in exports.items():
        if fn is not None:
            setattr(module, export, fn)
    return module
