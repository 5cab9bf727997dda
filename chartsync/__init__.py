"""
chartsync - keeps a stateful chart instance in sync with a declarative configuration.
"""

from dotenv import load_dotenv

from chartsync.logging import (
    configure_logging,
    get_logger,
    is_debug_mode,
    log_entry_exit,
    log_performance,
    set_debug_mode,
)

# Load environment variables from .env file
load_dotenv()

from chartsync.config import (  # noqa: E402
    ConfigLoader,
    Configuration,
    SeriesSpec,
    SeriesType,
    get_logging_settings,
)
from chartsync.errors import (  # noqa: E402
    ChartSyncError,
    ConfigurationError,
    UnsupportedSeriesTypeError,
)
from chartsync.visualization import (  # noqa: E402
    ChartApi,
    ContainerBox,
    CrosshairEvent,
    LegendRow,
    LightweightChart,
    OverlayRenderer,
    Reconciler,
    ResizeSignal,
    SeriesApi,
    TimeScaleApi,
    UpdateTier,
    interpolate,
)

__version__ = "0.1.0"

_logging_settings = get_logging_settings()
set_debug_mode(_logging_settings.debug)
configure_logging(
    log_dir=_logging_settings.log_dir,
    console_level=_logging_settings.level.upper(),
)

__all__ = [
    "__version__",
    # Logging
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "set_debug_mode",
    "log_entry_exit",
    "log_performance",
    # Configuration
    "ConfigLoader",
    "Configuration",
    "SeriesSpec",
    "SeriesType",
    # Errors
    "ChartSyncError",
    "ConfigurationError",
    "UnsupportedSeriesTypeError",
    # Chart component
    "LightweightChart",
    "Reconciler",
    "UpdateTier",
    "interpolate",
    # Engine contract
    "ChartApi",
    "SeriesApi",
    "TimeScaleApi",
    "ContainerBox",
    "ResizeSignal",
    "OverlayRenderer",
    "LegendRow",
    "CrosshairEvent",
]
