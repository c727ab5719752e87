"""klaw-match: match-style dispatch over Option, Result and plain values.

Flat imports (preferred):
    from klaw_match import match_value, match_tag, SomePattern, _
    from klaw_match import Some, Nothing, Ok, Err, is_

Submodule imports (for organization):
    from klaw_match.patterns import to_pattern, normalize_table
    from klaw_match.backend import ensure_initialized, using_accelerated
    from klaw_match.types import OptionLike, ResultLike
"""

# Configuration
from klaw_match._config import Backend, MatchConfig, get_config, init

# Logging
from klaw_match._logging import configure_logging, get_logger

# Backend selector
from klaw_match.backend import (
    BackendStatus,
    backend_status,
    ensure_initialized,
    ensure_initialized_async,
    using_accelerated,
)

# Fluent builder
from klaw_match.builder import MatchBuilder, __

# Core primitives
from klaw_match.core import extract, get_predicates, is_, matches

# Dispatch
from klaw_match.dispatch import (
    Patterns,
    match,
    match_cases,
    match_cases_async,
    match_pattern,
    match_pattern_async,
    match_tag,
    match_tag_async,
    match_type,
    match_type_async,
    match_value,
    match_value_async,
)

# Errors
from klaw_match.errors import (
    BackendUnavailable,
    BackendUnavailableError,
    MatchError,
    NoPatternMatched,
    NoPatternMatchedError,
)

# Patterns
from klaw_match.patterns import (
    ErrPattern,
    LiteralPattern,
    MatchArm,
    NonePattern,
    OkPattern,
    PredicatePattern,
    ShapeToken,
    SomePattern,
    StructuralPattern,
    _,
    to_pattern,
)

# Types
from klaw_match.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    OptionLike,
    Result,
    ResultLike,
    Some,
)

__all__ = [
    'Backend',
    'BackendStatus',
    'BackendUnavailable',
    'BackendUnavailableError',
    'Err',
    'ErrPattern',
    'LiteralPattern',
    'MatchArm',
    'MatchBuilder',
    'MatchConfig',
    'MatchError',
    'NoPatternMatched',
    'NoPatternMatchedError',
    'NonePattern',
    'Nothing',
    'NothingType',
    'Ok',
    'OkPattern',
    'Option',
    'OptionLike',
    'Patterns',
    'PredicatePattern',
    'Result',
    'ResultLike',
    'ShapeToken',
    'Some',
    'SomePattern',
    'StructuralPattern',
    '_',
    '__',
    'backend_status',
    'configure_logging',
    'ensure_initialized',
    'ensure_initialized_async',
    'extract',
    'get_config',
    'get_logger',
    'get_predicates',
    'init',
    'is_',
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
    'matches',
    'to_pattern',
    'using_accelerated',
]
