"""Tests for package configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from downdash import DowndashConfig, get_config, init
from downdash._config import _detect_json_logs, _detect_log_level
from downdash._logging import is_debug_enabled


class TestDowndashConfig:
    """Tests for the DowndashConfig dataclass."""

    def test_default_values(self) -> None:
        config = DowndashConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = DowndashConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectFromEnvironment:
    """Tests for the environment readers."""

    def test_log_level_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_log_level_normalized(self) -> None:
        with patch.dict(os.environ, {'DOWNDASH_LOG_LEVEL': ' debug '}):
            assert _detect_log_level() == 'DEBUG'

    @pytest.mark.parametrize(('raw', 'expected'), [('', True), ('1', True), ('yes', True), ('off', False), ('0', False)])
    def test_json_logs_values(self, raw: str, expected: bool) -> None:
        with patch.dict(os.environ, {'DOWNDASH_JSON_LOGS': raw}):
            assert _detect_json_logs() is expected

    def test_json_logs_unknown_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'DOWNDASH_JSON_LOGS': 'sometimes'}), caplog.at_level(logging.WARNING):
            assert _detect_json_logs() is True
        assert 'Unknown DOWNDASH_JSON_LOGS' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults_are_silent(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == DowndashConfig(log_level=None, json_logs=True)
        assert get_config() is config
        assert is_debug_enabled() is False

    def test_init_explicit_level(self) -> None:
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert is_debug_enabled() is True

    def test_init_reads_environment(self) -> None:
        with patch.dict(os.environ, {'DOWNDASH_LOG_LEVEL': 'INFO', 'DOWNDASH_JSON_LOGS': 'false'}):
            config = init()
        assert config.log_level == 'INFO'
        assert config.json_logs is False

    def test_explicit_arguments_win_over_environment(self) -> None:
        with patch.dict(os.environ, {'DOWNDASH_LOG_LEVEL': 'INFO'}):
            config = init(log_level='WARNING')
        assert config.log_level == 'WARNING'

    def test_init_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match='Unknown log level'):
            init(log_level='chatty')

    def test_reinit_replaces_config(self) -> None:
        first = init(log_level='INFO')
        second = init(log_level='ERROR')
        assert first != second
        assert get_config() is second
