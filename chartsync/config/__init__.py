"""
Configuration management for chartsync.

This package provides runtime settings, the pydantic models of a chart
configuration, and loading of chart configurations from YAML files.
"""

from chartsync.config.loader import ConfigLoader
from chartsync.config.models import (
    Configuration,
    DataPoint,
    EventHandlers,
    OhlcPoint,
    ScalarPoint,
    SeriesSpec,
    SeriesType,
    ViewportRange,
)
from chartsync.config.settings import (
    ChartSettings,
    LoggingSettings,
    clear_settings_cache,
    get_chart_settings,
    get_logging_settings,
)

__all__ = [
    "ConfigLoader",
    "Configuration",
    "DataPoint",
    "EventHandlers",
    "OhlcPoint",
    "ScalarPoint",
    "SeriesSpec",
    "SeriesType",
    "ViewportRange",
    "ChartSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_chart_settings",
    "get_logging_settings",
]
