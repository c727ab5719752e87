"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Tagged value types can be imported."""
    from klaw_match import Err, Nothing, Ok, Option, Result, Some

    assert Ok is not None
    assert Err is not None
    assert Some is not None
    assert Nothing is not None
    assert Result is not None
    assert Option is not None


def test_import_patterns():
    """Pattern tokens and variants can be imported."""
    from klaw_match import ErrPattern, NonePattern, OkPattern, ShapeToken, SomePattern, _, __

    assert SomePattern is ShapeToken.SOME
    assert NonePattern is ShapeToken.NONE
    assert OkPattern is ShapeToken.OK
    assert ErrPattern is ShapeToken.ERR
    assert _ is ShapeToken.WILDCARD
    assert __ is _


def test_import_dispatch():
    """Dispatch entry points can be imported."""
    from klaw_match import match, match_cases, match_pattern, match_tag, match_type, match_value

    assert match is match_value
    assert match_cases is not None
    assert match_pattern is not None
    assert match_tag is not None
    assert match_type is not None


def test_submodule_imports():
    """Submodule imports work."""
    from klaw_match.backend import ensure_initialized, using_accelerated  # noqa: F401
    from klaw_match.builder import MatchBuilder  # noqa: F401
    from klaw_match.core import extract, is_, matches  # noqa: F401
    from klaw_match.errors import NoPatternMatchedError  # noqa: F401
    from klaw_match.patterns import normalize_table, to_pattern  # noqa: F401
    from klaw_match.types import OptionLike, ResultLike  # noqa: F401
