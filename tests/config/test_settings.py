"""
Unit tests for chart and logging settings.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from chartsync.config.settings import (
    DEFAULT_PALETTE,
    ChartSettings,
    LoggingSettings,
    clear_settings_cache,
    get_chart_settings,
    get_logging_settings,
)


class TestChartSettings:
    """Test chart settings defaults and env overrides."""

    def setup_method(self):
        """Clear cache before each test."""
        clear_settings_cache()

    def teardown_method(self):
        """Clear cache after each test."""
        clear_settings_cache()

    def test_defaults(self):
        settings = ChartSettings()

        assert settings.default_height == 500
        assert settings.palette == DEFAULT_PALETTE
        assert settings.bullish_color == "rgba(0, 150, 136, 0.8)"
        assert settings.bearish_color == "rgba(255,82,82, 0.8)"

    def test_env_override(self):
        env = {
            "CHARTSYNC_CHART_DEFAULT_HEIGHT": "320",
            "CHARTSYNC_CHART_PALETTE": '["#000000", "#ffffff"]',
        }
        with patch.dict(os.environ, env):
            settings = ChartSettings()

        assert settings.default_height == 320
        assert settings.palette == ["#000000", "#ffffff"]

    def test_empty_palette_rejected(self):
        with pytest.raises(ValidationError):
            ChartSettings(palette=[])

    def test_non_positive_height_rejected(self):
        with pytest.raises(ValidationError):
            ChartSettings(default_height=0)

    def test_getter_is_cached(self):
        assert get_chart_settings() is get_chart_settings()

    def test_cache_clear_rereads_env(self):
        first = get_chart_settings()
        with patch.dict(os.environ, {"CHARTSYNC_CHART_DEFAULT_HEIGHT": "250"}):
            clear_settings_cache()
            second = get_chart_settings()

        assert second is not first
        assert second.default_height == 250


class TestLoggingSettings:
    def setup_method(self):
        clear_settings_cache()

    def teardown_method(self):
        clear_settings_cache()

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = LoggingSettings()

        assert settings.level == "INFO"
        assert settings.log_dir is None
        assert settings.debug is False

    def test_env_override(self):
        with patch.dict(
            os.environ, {"CHARTSYNC_LOGGING_LEVEL": "DEBUG", "CHARTSYNC_LOGGING_DEBUG": "true"}
        ):
            settings = get_logging_settings()

        assert settings.level == "DEBUG"
        assert settings.debug is True
