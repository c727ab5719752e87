"""Pattern language: shape tokens, explicit pattern variants and match tables.

A pattern is one of:

- a `ShapeToken` (`SomePattern`, `NonePattern`, `OkPattern`, `ErrPattern`, `_`),
  testing variant membership,
- a `PredicatePattern`, testing `fn(value)`,
- a `StructuralPattern`, requiring listed keys to exist and match recursively,
- a `LiteralPattern`, testing strict equality.

Callers rarely build the variants by hand. `to_pattern` lowers plain Python
values: mappings become structural patterns, callables become predicates and
anything else is a literal.

Example:
    ```python
    from klaw_match import SomePattern, _, match_value

    match_value(user, [
        ({'role': 'admin', 'active': True}, grant),
        (lambda u: u['age'] < 18, refuse),
        (_, ask),
    ])
    ```
"""

from __future__ import annotations

import numbers
from collections import UserString
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

import msgspec

__all__ = [
    'WILDCARD_KEY',
    'ErrPattern',
    'LiteralPattern',
    'MatchArm',
    'MatchTable',
    'NonePattern',
    'OkPattern',
    'Pattern',
    'PredicatePattern',
    'ShapeToken',
    'SomePattern',
    'StructuralPattern',
    '_',
    'is_missing',
    'is_structural_target',
    'lookup',
    'normalize_table',
    'strict_equals',
    'to_pattern',
]


class ShapeToken(Enum):
    """Reserved pattern identities. Never equal to an ordinary value."""

    SOME = 'Some'
    NONE = 'None'
    OK = 'Ok'
    ERR = 'Err'
    WILDCARD = '_'

    def __repr__(self) -> str:
        return f'<{self.value}>'


SomePattern = ShapeToken.SOME
NonePattern = ShapeToken.NONE
OkPattern = ShapeToken.OK
ErrPattern = ShapeToken.ERR
_ = ShapeToken.WILDCARD

WILDCARD_KEY = '_'
"""Map-form table key that becomes the trailing wildcard arm."""

_RESERVED_KEYS: dict[str, ShapeToken] = {
    'Some': ShapeToken.SOME,
    'None': ShapeToken.NONE,
    'Ok': ShapeToken.OK,
    'Err': ShapeToken.ERR,
}


class LiteralPattern(msgspec.Struct, frozen=True):
    """Matches a value strictly equal to `value`."""

    value: Any


class PredicatePattern(msgspec.Struct, frozen=True):
    """Matches when `fn(value)` is truthy."""

    fn: Any


class StructuralPattern(msgspec.Struct, frozen=True):
    """Matches values that expose every key in `fields` with a matching value.

    Unlisted keys on the value are ignored. An empty field set matches any
    structural target.
    """

    fields: Any


type Pattern = ShapeToken | LiteralPattern | PredicatePattern | StructuralPattern


class MatchArm(msgspec.Struct, frozen=True):
    """One (pattern, handler) entry of a normalized match table."""

    pattern: Any
    handler: Any


type MatchTable = Mapping[Any, Callable[[Any], Any] | None] | Iterable[MatchArm | tuple[Any, Callable[[Any], Any]]]


_MISSING: Any = object()


def to_pattern(raw: Any) -> Pattern:
    """Lower a plain Python value to a pattern variant.

    Args:
        raw: A shape token, an explicit variant, a mapping, a callable or a
            literal value.

    Returns:
        The equivalent pattern variant. Mapping values are lowered recursively.

    Examples:
        >>> to_pattern(5)
        LiteralPattern(value=5)
        >>> to_pattern({'a': 1})
        StructuralPattern(fields={'a': LiteralPattern(value=1)})
    """
    match raw:
        case ShapeToken() | LiteralPattern() | PredicatePattern() | StructuralPattern():
            return raw
        case Mapping():
            return StructuralPattern({key: to_pattern(sub) for key, sub in raw.items()})
        case _ if callable(raw):
            return PredicatePattern(raw)
        case _:
            return LiteralPattern(raw)


def strict_equals(value: Any, target: Any) -> bool:
    """Equality that never confuses bools with numbers."""
    if isinstance(value, bool) or isinstance(target, bool):
        return isinstance(value, bool) and isinstance(target, bool) and value is target
    return bool(value == target)


def is_structural_target(value: Any) -> bool:
    """Return True for values a structural pattern may look inside.

    Mappings and attribute-bearing objects qualify. Nullish values, strings,
    bytes, sequences, numbers, bools and callables do not.
    """
    if value is None or value is msgspec.UNSET:
        return False
    if isinstance(value, str | UserString | bytes | bytearray | memoryview | bool | numbers.Number):
        return False
    if isinstance(value, Sequence):
        return False
    return not callable(value)


def lookup(value: Any, key: Any) -> Any:
    """Read `key` from a mapping or attribute-bearing value.

    Returns a private sentinel when the key is absent, so present-but-None
    fields are distinguishable from missing ones.
    """
    if isinstance(value, Mapping):
        return value[key] if key in value else _MISSING
    if isinstance(key, str):
        return getattr(value, key, _MISSING)
    return _MISSING


def is_missing(found: Any) -> bool:
    """Return True if `lookup` found nothing."""
    return found is _MISSING


def normalize_table(table: MatchTable) -> list[MatchArm]:
    """Lower a match table to an ordered list of arms.

    Map-form tables map the reserved keys ("Some", "None", "Ok", "Err") to
    their shape tokens and every other key to a literal pattern. Entries whose
    handler is None are dropped, and the "_" entry is moved to the end so it
    only runs when nothing else matched.

    Ordered tables keep their order; each pattern is lowered with `to_pattern`.

    Args:
        table: A mapping of keys to handlers, or an iterable of
            `(pattern, handler)` pairs / `MatchArm`s.

    Returns:
        The arms in evaluation order.

    Raises:
        TypeError: If the table is neither a mapping nor an iterable of pairs.
    """
    if isinstance(table, Mapping):
        arms: list[MatchArm] = []
        wildcard: MatchArm | None = None
        for key, handler in table.items():
            if handler is None:
                continue
            if key == WILDCARD_KEY or key is ShapeToken.WILDCARD:
                wildcard = MatchArm(ShapeToken.WILDCARD, handler)
            elif isinstance(key, ShapeToken):
                arms.append(MatchArm(key, handler))
            elif isinstance(key, str) and key in _RESERVED_KEYS:
                arms.append(MatchArm(_RESERVED_KEYS[key], handler))
            else:
                arms.append(MatchArm(LiteralPattern(key), handler))
        if wildcard is not None:
            arms.append(wildcard)
        return arms

    if isinstance(table, str | bytes) or not isinstance(table, Iterable):
        raise TypeError(f'Invalid patterns argument: {type(table).__name__}')

    arms = []
    for entry in table:
        if isinstance(entry, MatchArm):
            pattern, handler = entry.pattern, entry.handler
        else:
            pattern, handler = entry
        if handler is None:
            continue
        arms.append(MatchArm(to_pattern(pattern), handler))
    return arms
