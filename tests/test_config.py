"""Tests for matcher configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from klaw_match import Backend, MatchConfig, get_config, init
from klaw_match._config import DEFAULT_NATIVE_MODULE


class TestInit:
    """Tests for init()."""

    def test_defaults(self):
        """With no arguments and a clean environment, AUTO and the default module are used."""
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == MatchConfig(backend=Backend.AUTO, native_module=DEFAULT_NATIVE_MODULE)

    def test_string_backend(self):
        """Backend names are accepted case-insensitively."""
        assert init(backend='PYTHON').backend is Backend.PYTHON
        assert init(backend='native').backend is Backend.NATIVE

    def test_enum_backend(self):
        """Backend members are accepted as-is."""
        assert init(backend=Backend.PYTHON).backend is Backend.PYTHON

    def test_unknown_backend_name(self):
        """An unknown backend name passed explicitly is an error."""
        with pytest.raises(ValueError):
            init(backend='gpu')

    def test_native_module_argument(self):
        """native_module overrides the default import path."""
        assert init(native_module='my_pkg._fast').native_module == 'my_pkg._fast'

    def test_log_level_configures_logging(self):
        """Passing log_level sets the root logger level."""
        import logging

        init(log_level='WARNING')
        assert logging.getLogger().level == logging.WARNING

    def test_config_is_frozen(self):
        """MatchConfig is immutable."""
        config = init()
        with pytest.raises(AttributeError):
            config.backend = Backend.PYTHON  # type: ignore[misc]


class TestEnvironment:
    """Tests for environment detection."""

    def test_backend_from_environment(self):
        """KLAW_MATCH_BACKEND selects the backend."""
        with patch.dict(os.environ, {'KLAW_MATCH_BACKEND': 'python'}):
            assert init().backend is Backend.PYTHON

    def test_module_from_environment(self):
        """KLAW_MATCH_NATIVE_MODULE selects the native module."""
        with patch.dict(os.environ, {'KLAW_MATCH_NATIVE_MODULE': 'other._native'}):
            assert init().native_module == 'other._native'

    def test_unknown_backend_in_environment(self, log_events):
        """A bad environment value falls back to AUTO with a warning."""
        with patch.dict(os.environ, {'KLAW_MATCH_BACKEND': 'quantum'}):
            assert init().backend is Backend.AUTO
        warnings = [entry for entry in log_events if entry.get('event') == 'config.unknown_backend']
        assert warnings[0]['value'] == 'quantum'

    def test_explicit_argument_wins(self):
        """Explicit arguments beat the environment."""
        with patch.dict(os.environ, {'KLAW_MATCH_BACKEND': 'python'}):
            assert init(backend='native').backend is Backend.NATIVE


class TestGetConfig:
    """Tests for get_config()."""

    def test_lazily_created(self):
        """get_config() creates a config from the environment when none was set."""
        with patch.dict(os.environ, {'KLAW_MATCH_BACKEND': 'python'}):
            assert get_config().backend is Backend.PYTHON

    def test_returns_last_init(self):
        """get_config() returns the config set by init()."""
        config = init(backend='native', native_module='x._y')
        assert get_config() is config
