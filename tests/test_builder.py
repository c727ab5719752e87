"""Tests for MatchBuilder."""

from __future__ import annotations

import pytest
from klaw_match import MatchBuilder, NoPatternMatchedError, Some, SomePattern, __


class TestMatchBuilder:
    """Tests for fluent match expressions."""

    def test_first_arm_wins(self):
        """Arms are tried in insertion order."""
        result = MatchBuilder.create(200).with_(200, lambda _: 'ok').with_(__, lambda _: 'other').otherwise(str)
        assert result == 'ok'

    def test_predicate_arms(self):
        """Callables are predicates."""
        label = (
            MatchBuilder.create(503)
            .with_(200, lambda _: 'ok')
            .with_(lambda c: 500 <= c < 600, lambda c: f'5xx {c}')
        )
        assert label.run() == '5xx 503'

    def test_otherwise(self):
        """otherwise(value) handles unmatched values."""
        builder = MatchBuilder.create(404).with_(200, lambda _: 'ok')
        assert builder.otherwise(lambda c: f'unexpected {c}') == 'unexpected 404'

    def test_run_without_match(self):
        """run() raises when no arm matches."""
        with pytest.raises(NoPatternMatchedError):
            MatchBuilder.create(1).with_(2, lambda _: 'two').run()

    def test_handlers_get_value_unchanged(self):
        """Even token arms hand over the original value."""
        some = Some(3)
        assert MatchBuilder.create(some).with_(SomePattern, lambda v: v).run() is some

    def test_structural_arms(self):
        """Mappings are structural patterns."""
        builder = MatchBuilder.create({'kind': 'circle', 'r': 1}).with_({'kind': 'square'}, lambda _: 's')
        builder.with_({'kind': 'circle'}, lambda s: s['r'])
        assert builder.run() == 1
        assert len(builder) == 2

    def test_repr(self):
        """repr shows the value and arm count."""
        assert repr(MatchBuilder.create(1).with_(1, str)) == 'MatchBuilder(1, arms=1)'

    def test_native_backend(self, native):
        """Builders evaluate through the native matcher when selected."""
        assert MatchBuilder.create(Some(1)).with_(SomePattern, lambda _: 'some').run() == 'some'
