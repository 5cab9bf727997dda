"""
chartsync Settings - Runtime configuration management.

Defaults for chart rendering can be overridden through environment variables
(or a ``.env`` file) using the ``CHARTSYNC_CHART_`` and ``CHARTSYNC_LOGGING_``
prefixes.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PALETTE = [
    "#008FFB",
    "#00E396",
    "#FEB019",
    "#FF4560",
    "#775DD0",
    "#F86624",
    "#A5978B",
]


class ChartSettings(BaseSettings):
    """Chart rendering defaults."""

    default_height: int = Field(
        default=500, gt=0, description="Chart height when neither height source applies"
    )
    palette: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        min_length=1,
        description="Series colors cycled in order of addition",
    )
    bullish_color: str = Field(
        default="rgba(0, 150, 136, 0.8)",
        description="Legend color for OHLC prices closing at or above the open",
    )
    bearish_color: str = Field(
        default="rgba(255,82,82, 0.8)",
        description="Legend color for OHLC prices closing below the open",
    )

    model_config = SettingsConfigDict(env_prefix="CHARTSYNC_CHART_")


class LoggingSettings(BaseSettings):
    """Logging Settings."""

    level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None)
    debug: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="CHARTSYNC_LOGGING_")


# Cache settings to avoid repeated env access
@lru_cache
def get_chart_settings() -> ChartSettings:
    """Get chart settings with caching."""
    return ChartSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings with caching."""
    return LoggingSettings()


def clear_settings_cache() -> None:
    """Clear settings cache, used by tests that patch the environment."""
    get_chart_settings.cache_clear()
    get_logging_settings.cache_clear()
