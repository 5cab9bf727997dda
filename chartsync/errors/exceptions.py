"""
Exception hierarchy for chartsync.

Configuration and programming errors are raised immediately. Data-shape guards
(such as interpolation requested on OHLC data) and operations against a chart
instance that is not created yet or already disposed are not errors and never
raise.
"""

from typing import Any, Optional

from chartsync.errors.error_codes import ErrorCodes


class ChartSyncError(Exception):
    """
    Base exception class for all chartsync errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the error to a dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "suggestion": self.suggestion,
        }


# --- Configuration Errors ---


class ConfigurationError(ChartSyncError):
    """
    Base class for errors in a chart configuration.

    The fix typically requires **changing the configuration** passed to the
    chart, or the configuration file it was loaded from.

    Examples:
        >>> raise ConfigurationError(
        ...     message="Palette must contain at least one color",
        ...     error_code="CONFIG-EmptyPalette",
        ... )
    """

    pass


class UnsupportedSeriesTypeError(ConfigurationError):
    """Exception raised when a series type tag has no engine factory."""

    def __init__(self, series_type: Any, supported: list[str]) -> None:
        super().__init__(
            message=f"Unsupported series type: {series_type!r}. Use {', '.join(supported)}.",
            error_code=ErrorCodes.CONFIG_UNSUPPORTED_SERIES_TYPE,
            details={"series_type": series_type, "supported_types": supported},
            suggestion=f"Declare the series in one of the {', '.join(supported)} lists",
        )
        self.series_type = series_type


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when configuration content fails validation."""

    pass


class ConfigurationFileError(ConfigurationError):
    """Exception raised when a configuration file cannot be read."""

    pass


# --- Data Errors ---


class DataError(ChartSyncError):
    """
    Base class for errors related to series data.

    Covers data that cannot be converted into engine points: missing columns or
    missing time information.
    """

    pass


class DataFormatError(DataError):
    """Exception raised when data format is invalid."""

    pass


# --- Lifecycle Errors ---


class ChartLifecycleError(ChartSyncError):
    """Exception raised when lifecycle entry points are called out of order."""

    pass
