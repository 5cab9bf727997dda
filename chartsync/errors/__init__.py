"""
Error handling framework for chartsync.

This module provides the exception hierarchy and the registry of error codes.
"""

from chartsync.errors.error_codes import ErrorCodes
from chartsync.errors.exceptions import (
    ChartLifecycleError,
    ChartSyncError,
    ConfigurationError,
    ConfigurationFileError,
    DataError,
    DataFormatError,
    InvalidConfigurationError,
    UnsupportedSeriesTypeError,
)

__all__ = [
    # Base exception
    "ChartSyncError",
    # Exception hierarchy
    "ConfigurationError",
    "UnsupportedSeriesTypeError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    "DataError",
    "DataFormatError",
    "ChartLifecycleError",
    # Error codes
    "ErrorCodes",
]
