"""
Global test fixtures for the chartsync project.

This module contains test fixtures that can be used across all test modules.
"""

import pandas as pd
import pytest

from chartsync.config.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def sample_ohlc_frame():
    """
    Daily OHLC bars indexed by date.

    Returns:
        pd.DataFrame: Four bars starting 2024-01-01, the second one bearish.
    """
    dates = pd.DatetimeIndex(["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04"])
    return pd.DataFrame(
        {
            "open": [100.0, 102.0, 99.0, 101.0],
            "high": [103.0, 103.5, 102.0, 104.0],
            "low": [99.5, 98.0, 98.5, 100.5],
            "close": [102.0, 99.0, 101.0, 103.5],
            "volume": [1000, 1500, 1200, 900],
        },
        index=dates,
    )
