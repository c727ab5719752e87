"""Dispatch entry points built on `matches` and `extract`.

- `match_value` / `match`: keyed or ordered pattern tables.
- `match_pattern`: ordered (predicate, handler) pairs.
- `match_type`: runtime type categories.
- `match_tag`: a `type` / `kind` / `tag` discriminant field.
- `match_cases`: `match_value` with a fallback instead of an error.

Every entry point makes sure the backend selector has committed to a
strategy before it matches anything, and raises `NoPatternMatchedError` when
nothing matched and no default was supplied. Each has an `*_async` twin that
awaits the selector instead of blocking on it.

Example:
    ```python
    from klaw_match import Ok, match_value

    match_value(Ok(42), {'Ok': lambda v: v + 1, 'Err': lambda e: 0})  # 43
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

import msgspec
import wrapt

from klaw_match._backends import Matcher
from klaw_match.backend import active_matcher, ensure_initialized, ensure_initialized_async
from klaw_match.core import is_
from klaw_match.errors import NoPatternMatchedError
from klaw_match.patterns import (
    MatchArm,
    MatchTable,
    ShapeToken,
    is_missing,
    is_structural_target,
    lookup,
    normalize_table,
)
from klaw_match.types.protocols import is_option, is_result

__all__ = [
    'Patterns',
    'match',
    'match_cases',
    'match_cases_async',
    'match_pattern',
    'match_pattern_async',
    'match_tag',
    'match_tag_async',
    'match_type',
    'match_type_async',
    'match_value',
    'match_value_async',
]

NO_MATCH = 'No pattern matched and no default provided'
NO_OPTION_MATCH = 'No matching pattern found for Option value'
NO_RESULT_MATCH = 'No matching pattern found for Result value'

TAG_FIELDS = ('type', 'kind', 'tag')
"""Discriminant fields read by `match_tag`, in lookup order."""

# (handler key, predicate, narrower key): a value that also satisfies the
# narrower predicate skips this slot when a handler for the narrower key exists.
_TYPE_ORDER: tuple[tuple[str, str, str | None], ...] = (
    ('str', 'str', 'raw_string'),
    ('raw_string', 'raw_string', None),
    ('numeric', 'numeric', 'raw_number'),
    ('raw_number', 'raw_number', None),
    ('boolean', 'boolean', None),
    ('vec', 'vec', None),
    ('object', 'object', None),
)


@wrapt.decorator
def _with_backend(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    ensure_initialized()
    return wrapped(*args, **kwargs)


@wrapt.decorator
async def _with_backend_async(
    wrapped: Callable[..., Any],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    await ensure_initialized_async()
    return await wrapped(*args, **kwargs)


# --- Implementations (backend already selected) ---


def _scan(matcher: Matcher, value: Any, arms: list[MatchArm], message: str) -> Any:
    for arm in arms:
        if matcher.matches(value, arm.pattern):
            return arm.handler(matcher.extract(value, arm.pattern))
    raise NoPatternMatchedError(message)


def _keyed(table: Mapping[Any, Any], token: ShapeToken) -> Any:
    """Handler stored under a reserved key, written either as its name or as the token."""
    handler = table.get(token.value)
    return handler if handler is not None else table.get(token)


def _match_value(value: Any, table: MatchTable) -> Any:
    matcher = active_matcher()
    if not isinstance(table, Mapping):
        return _scan(matcher, value, normalize_table(table), NO_MATCH)

    # Keyed tables over Option/Result values skip the generic scan.
    if is_option(value):
        if value.is_some() and (handler := _keyed(table, ShapeToken.SOME)) is not None:
            return handler(value.unwrap())
        if value.is_none() and (handler := _keyed(table, ShapeToken.NONE)) is not None:
            return handler(value)
        return _scan(matcher, value, normalize_table(table), NO_OPTION_MATCH)

    if is_result(value):
        if value.is_ok() and (handler := _keyed(table, ShapeToken.OK)) is not None:
            return handler(value.unwrap())
        if value.is_err() and (handler := _keyed(table, ShapeToken.ERR)) is not None:
            return handler(value.unwrap_err())
        return _scan(matcher, value, normalize_table(table), NO_RESULT_MATCH)

    return _scan(matcher, value, normalize_table(table), NO_MATCH)


def _match_pattern(
    value: Any,
    patterns: Iterable[tuple[Callable[[Any], bool], Callable[[Any], Any]]],
    default: Callable[[Any], Any] | None,
) -> Any:
    for predicate, handler in patterns:
        if predicate(value):
            return handler(value)
    if default is not None:
        return default(value)
    raise NoPatternMatchedError(NO_MATCH)


def _match_type(value: Any, handlers: Mapping[str, Callable[..., Any]]) -> Any:
    predicates = active_matcher().is_
    for key, probe, narrower in _TYPE_ORDER:
        handler = handlers.get(key)
        if handler is None or not getattr(predicates, probe)(value):
            continue
        if narrower is not None and handlers.get(narrower) is not None and getattr(predicates, narrower)(value):
            continue
        return handler(value)

    if value is None and handlers.get('null') is not None:
        return handlers['null']()
    if value is msgspec.UNSET and handlers.get('undefined') is not None:
        return handlers['undefined']()

    default = handlers.get('default')
    if default is not None:
        return default(value)
    raise NoPatternMatchedError(NO_MATCH)


def _tag_text(tag: Any) -> str:
    if isinstance(tag, str):
        return str.__str__(tag)
    if isinstance(tag, Enum):
        return str(tag.value)
    data = getattr(tag, 'data', None)
    if isinstance(data, str):
        return data
    return str(tag)


def _discriminant(value: Any) -> str | None:
    """Read the first present discriminant field; None if absent or None."""
    if not is_structural_target(value):
        return None
    for field in TAG_FIELDS:
        found = lookup(value, field)
        if is_missing(found):
            continue
        return None if found is None else _tag_text(found)
    return None


def _match_tag(value: Any, handlers: Mapping[str, Callable[[Any], Any]], default: Callable[[Any], Any] | None) -> Any:
    tag = _discriminant(value)
    if tag is not None:
        handler = handlers.get(tag)
        if handler is not None:
            return handler(value)
    if default is not None:
        return default(value)
    shown = 'undefined' if tag is None else tag
    raise NoPatternMatchedError(f'No pattern matched for tag "{shown}" and no default provided', tag=shown)


def _match_cases(value: Any, cases: MatchTable, default_case: Callable[[], Any] | None) -> Any:
    try:
        return _match_value(value, cases)
    except NoPatternMatchedError:
        if default_case is not None:
            return default_case()
        raise


# --- Public entry points ---


@_with_backend
def match_value(value: Any, table: MatchTable) -> Any:
    """Run the handler of the first pattern that matches `value`.

    Args:
        value: The value to dispatch on.
        table: Either a mapping from keys to handlers or an ordered iterable
            of `(pattern, handler)` pairs. Mapping keys "Some", "None", "Ok"
            and "Err" (or the matching `ShapeToken`s) test variant
            membership, "_" is a trailing catch-all and any other key is
            compared by equality.

    Returns:
        The handler's result. Handlers for "Some"/`SomePattern` receive the
        unwrapped value and handlers for "Err"/`ErrPattern` the error. In a
        mapping, an "Ok" or `OkPattern` key also receives the unwrapped Ok
        value. Every other handler receives `value` itself.

    Raises:
        NoPatternMatchedError: If no pattern matched.
        TypeError: If `table` is not a mapping or an iterable of pairs.

    Example:
        ```python
        match_value(Some(2), {'Some': lambda x: x * 10, 'None': lambda _: 0})  # 20
        match_value(7, [(is_.in_range(1, 5), small), (_, large)])
        ```
    """
    return _match_value(value, table)


match = match_value


@_with_backend
def match_pattern(
    value: Any,
    patterns: Iterable[tuple[Callable[[Any], bool], Callable[[Any], Any]]],
    default: Callable[[Any], Any] | None = None,
) -> Any:
    """Run the handler of the first predicate that accepts `value`.

    Handlers receive `value` unchanged. `default(value)` runs when no
    predicate accepts it.

    Raises:
        NoPatternMatchedError: If nothing accepted the value and no default was given.
    """
    return _match_pattern(value, patterns, default)


@_with_backend
def match_type(value: Any, handlers: Mapping[str, Callable[..., Any]]) -> Any:
    """Dispatch on the runtime category of `value`.

    Categories are tried in order: "str", "raw_string", "numeric",
    "raw_number", "boolean", "vec", "object", "null", "undefined". A value
    that fits both a broad category and its narrower one ("str" and
    "raw_string", "numeric" and "raw_number") goes to the narrower handler
    when both are present. "null" (`None`) and "undefined" (`msgspec.UNSET`)
    handlers take no arguments; `handlers["default"](value)` runs when
    nothing else applies.

    Raises:
        NoPatternMatchedError: If no category handler applied and there is no default.

    Example:
        ```python
        match_type(3, {'raw_number': lambda _: 'raw', 'numeric': lambda _: 'generic'})  # 'raw'
        match_type(Decimal('3'), {'raw_number': ..., 'numeric': lambda _: 'generic'})  # 'generic'
        ```
    """
    return _match_type(value, handlers)


@_with_backend
def match_tag(
    value: Any,
    handlers: Mapping[str, Callable[[Any], Any]],
    default: Callable[[Any], Any] | None = None,
) -> Any:
    """Dispatch on a discriminant field.

    The first of `type`, `kind` and `tag` present on `value` (as a mapping
    key or attribute) names the handler, which receives the whole value.

    Raises:
        NoPatternMatchedError: If no handler is registered for the tag and no
            default was given. The message names the tag, or "undefined" when
            the value has no discriminant.

    Example:
        ```python
        match_tag({'kind': 'circle', 'r': 2}, {'circle': lambda s: math.pi * s['r'] ** 2})
        ```
    """
    return _match_tag(value, handlers, default)


@_with_backend
def match_cases(value: Any, cases: MatchTable, default_case: Callable[[], Any] | None = None) -> Any:
    """Like `match_value`, but call `default_case()` instead of raising on no match.

    Raises:
        NoPatternMatchedError: If nothing matched and no default case was given.
    """
    return _match_cases(value, cases, default_case)


@_with_backend_async
async def match_value_async(value: Any, table: MatchTable) -> Any:
    """Async twin of `match_value`."""
    return _match_value(value, table)


@_with_backend_async
async def match_pattern_async(
    value: Any,
    patterns: Iterable[tuple[Callable[[Any], bool], Callable[[Any], Any]]],
    default: Callable[[Any], Any] | None = None,
) -> Any:
    """Async twin of `match_pattern`."""
    return _match_pattern(value, patterns, default)


@_with_backend_async
async def match_type_async(value: Any, handlers: Mapping[str, Callable[..., Any]]) -> Any:
    """Async twin of `match_type`."""
    return _match_type(value, handlers)


@_with_backend_async
async def match_tag_async(
    value: Any,
    handlers: Mapping[str, Callable[[Any], Any]],
    default: Callable[[Any], Any] | None = None,
) -> Any:
    """Async twin of `match_tag`."""
    return _match_tag(value, handlers, default)


@_with_backend_async
async def match_cases_async(value: Any, cases: MatchTable, default_case: Callable[[], Any] | None = None) -> Any:
    """Async twin of `match_cases`."""
    return _match_cases(value, cases, default_case)


class Patterns:
    """Namespace bundling the shape tokens, entry points and predicates.

    Example:
        ```python
        from klaw_match import Patterns as P

        P.match(opt, [(P.SOME, show), (P.WILDCARD, hide)])
        P.is_.empty([])  # True
        ```
    """

    SOME = ShapeToken.SOME
    NONE = ShapeToken.NONE
    OK = ShapeToken.OK
    ERR = ShapeToken.ERR
    WILDCARD = ShapeToken.WILDCARD

    match = staticmethod(match_value)
    pattern = staticmethod(match_pattern)
    type = staticmethod(match_type)
    tag = staticmethod(match_tag)
    cases = staticmethod(match_cases)

    is_ = is_
