"""Matcher backed by the optional compiled extension.

The extension must export `matches_pattern`, `extract_value`, `match_value`
and `create_pattern_matcher_is`. Patterns are handed over already lowered,
so the extension sees `ShapeToken` members and the pattern structs.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from klaw_match._backends.interpreted import InterpretedMatcher
from klaw_match._logging import get_logger
from klaw_match.patterns import Pattern

__all__ = ['REQUIRED_EXPORTS', 'NativeMatcher']

REQUIRED_EXPORTS = ('matches_pattern', 'extract_value', 'match_value', 'create_pattern_matcher_is')

_log = get_logger(__name__)


class NativeMatcher:
    """Delegates matching to a native module.

    If a native call raises, the failure is logged and the interpreted
    result is returned for that call only. Exceptions raised by the caller's
    own predicates therefore surface from the interpreted retry, and a
    predicate that raised inside the native call runs a second time there.
    Predicates with side effects may observe both calls.
    """

    accelerated = True

    __slots__ = ('_fallback', '_module', 'is_')

    def __init__(self, module: ModuleType) -> None:
        self._module = module
        self._fallback = InterpretedMatcher()
        # Built once and shared; predicate probes reuse it.
        self.is_ = module.create_pattern_matcher_is()

    @property
    def module_name(self) -> str:
        return self._module.__name__

    def matches(self, value: Any, pattern: Pattern) -> bool:
        try:
            return bool(self._module.matches_pattern(value, pattern))
        except Exception as exc:
            _log.warning('backend.native_call_failed', op='matches', module=self.module_name, error=repr(exc))
            return self._fallback.matches(value, pattern)

    def extract(self, value: Any, pattern: Pattern) -> Any:
        try:
            return self._module.extract_value(value, pattern)
        except Exception as exc:
            _log.warning('backend.native_call_failed', op='extract', module=self.module_name, error=repr(exc))
            return self._fallback.extract(value, pattern)

    def __repr__(self) -> str:
        return f'<NativeMatcher {self.module_name}>'
