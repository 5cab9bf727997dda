"""
Central registry of error codes for chartsync.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- CONFIG: Chart configuration and configuration file errors
- DATA: Series data validation and conversion errors
- CHART: Chart instance lifecycle errors
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Configuration errors
    CONFIG_UNSUPPORTED_SERIES_TYPE = "CONFIG-UnsupportedSeriesType"
    CONFIG_EMPTY_PALETTE = "CONFIG-EmptyPalette"
    CONFIG_VALIDATION_FAILED = "CONFIG-ValidationFailed"
    CONFIG_INVALID_YAML = "CONFIG-InvalidYaml"
    CONFIG_FILE_NOT_FOUND = "CONFIG-FileNotFound"

    # Data errors
    DATA_MISSING_TIME_COLUMN = "DATA-MissingTimeColumn"
    DATA_MISSING_COLUMNS = "DATA-MissingColumns"

    # Chart lifecycle errors
    CHART_ALREADY_MOUNTED = "CHART-AlreadyMounted"
