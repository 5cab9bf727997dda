"""
Reconciliation of chart configurations against a chart instance.

The :class:`Reconciler` owns the chart instance for one mount. On every
configuration change it compares the previous and the new configuration and
performs the cheapest update that brings the chart in line:

1. theme, options or any series list changed: every series is removed and the
   chart is fully rebuilt, which also re-subscribes the event handlers;
2. only event handlers changed: the previous handlers are unsubscribed;
3. only the visible range changed: the visible range is applied;
4. otherwise nothing is done.

Only the first matching tier runs.
"""

from enum import Enum
from typing import Any, Optional

from chartsync.config.models import Configuration
from chartsync.config.settings import ChartSettings, get_chart_settings
from chartsync.errors import ChartLifecycleError, ErrorCodes
from chartsync.logging import get_logger, log_entry_exit, log_performance
from chartsync.visualization.engine import (
    ChartApi,
    ChartFactory,
    ContainerBox,
    OverlayRenderer,
    ResizeSignal,
)
from chartsync.visualization.events import EventBridge
from chartsync.visualization.legend import LegendOverlay
from chartsync.visualization.resize import AutoSizeMode, ResizeController, chart_dimensions
from chartsync.visualization.series import SeriesManager
from chartsync.visualization.theme import resolve_chart_options

logger = get_logger(__name__)

HANDLER_FIELDS = ("on_click", "on_crosshair_move", "on_time_range_move")
SERIES_FIELDS = (
    "dark_theme",
    "options",
    "candlestick_series",
    "line_series",
    "area_series",
    "bar_series",
    "histogram_series",
)
VIEWPORT_FIELDS = ("from_", "to")


class UpdateTier(str, Enum):
    """Update performed for a configuration change."""

    EVENTS = "events"
    SERIES = "series"
    VIEWPORT = "viewport"
    NONE = "none"


def _differs(prev: Configuration, new: Configuration, fields: tuple[str, ...]) -> bool:
    return [getattr(prev, f) for f in fields] != [getattr(new, f) for f in fields]


def classify_update(prev: Configuration, new: Configuration) -> UpdateTier:
    """Select the update tier for a configuration change."""
    if _differs(prev, new, SERIES_FIELDS):
        return UpdateTier.SERIES
    if _differs(prev, new, HANDLER_FIELDS):
        return UpdateTier.EVENTS
    if _differs(prev, new, VIEWPORT_FIELDS):
        return UpdateTier.VIEWPORT
    return UpdateTier.NONE


class Reconciler:
    """
    Keeps a chart instance, its legend overlay and its event subscriptions
    synchronized with the latest configuration.

    Every operation against the chart is skipped while no chart instance
    exists, that is before :meth:`mount` and after :meth:`unmount`.

    Attributes:
        chart_factory: Creates the chart instance bound to a container
        settings: Chart defaults (default height, palette, legend colors)
        series: Manager of the realized series
        legend: Legend overlay
        events: Event subscription bridge
        resize_controller: Window resize handling, created on mount
    """

    def __init__(
        self,
        chart_factory: ChartFactory,
        overlay: Optional[OverlayRenderer] = None,
        signal: Optional[ResizeSignal] = None,
        settings: Optional[ChartSettings] = None,
    ):
        self.chart_factory = chart_factory
        self.settings = settings or get_chart_settings()
        self.signal = signal

        self.series = SeriesManager(self.settings.palette)
        self.legend = LegendOverlay(
            overlay,
            bullish_color=self.settings.bullish_color,
            bearish_color=self.settings.bearish_color,
        )
        self.events = EventBridge(self.legend.on_crosshair_move)
        self.resize_controller: Optional[ResizeController] = None

        self.container: Optional[ContainerBox] = None
        self._chart: Optional[ChartApi] = None
        self._mounted = False

    @property
    def chart(self) -> Optional[ChartApi]:
        """The chart instance, None before mount and after unmount."""
        return self._chart

    @property
    def mounted(self) -> bool:
        return self._mounted

    @log_entry_exit(logger=logger)
    def mount(self, container: Any, config: Configuration) -> ChartApi:
        """
        Create the chart instance and render the initial configuration.

        Args:
            container: Host element the chart is drawn into; also used as the
                box for automatic sizing
            config: Initial configuration

        Returns:
            The created chart instance

        Raises:
            ChartLifecycleError: If the reconciler is already mounted

        If the initial render raises, the chart is unmounted before the error
        propagates, so mounting can be retried.
        """
        if self._mounted:
            raise ChartLifecycleError(
                message="Chart is already mounted",
                error_code=ErrorCodes.CHART_ALREADY_MOUNTED,
                suggestion="Call unmount() before mounting again",
            )

        self.container = container
        self._chart = self.chart_factory(container)
        self._mounted = True
        self.resize_controller = ResizeController(
            self.signal,
            container,
            lambda: self._chart,
            default_height=self.settings.default_height,
        )

        try:
            self.full_update(config)
            self.resize()
        except Exception:
            logger.error("Initial render failed, tearing down the chart")
            self.unmount()
            raise
        logger.info(f"Chart mounted with {len(self.series)} series")
        return self._chart

    def update(self, prev: Configuration, new: Configuration) -> UpdateTier:
        """
        Apply a configuration change with the cheapest sufficient update.

        When only event handlers change, the previous handlers are unsubscribed
        and the new ones are not subscribed; they are attached by the next
        full update.

        Returns:
            The update tier that ran
        """
        if self.resize_controller is not None and not AutoSizeMode.from_config(new).active:
            self.resize_controller.disable()

        tier = classify_update(prev, new)
        if tier is UpdateTier.EVENTS:
            self.events.unsubscribe(self._chart, prev.handlers())
        elif tier is UpdateTier.SERIES:
            self.series.remove_all_series(self._chart)
            self.legend.set_entries([])
            self.full_update(new)
        elif tier is UpdateTier.VIEWPORT:
            self.apply_viewport_only(new)

        logger.debug(f"Configuration update handled as '{tier.value}'")
        return tier

    @log_performance(logger=logger)
    def full_update(self, config: Configuration) -> None:
        """
        Re-apply a whole configuration to the chart.

        Applies theme and dimensions, redraws the static legend label,
        recreates every series, subscribes events, applies the visible range
        and installs the resize listener when auto sizing is requested.
        Series still tracked from an earlier configuration must have been
        removed with :meth:`SeriesManager.remove_all_series` beforehand.
        """
        chart = self._chart
        if chart is None:
            logger.debug("Chart not available, skipping full update")
            return

        if self.resize_controller is not None:
            self.resize_controller.disable()

        mode = AutoSizeMode.from_config(config)
        width, height = chart_dimensions(mode, self.container, self.settings.default_height)
        chart.apply_options(resolve_chart_options(config, width, height))

        self.legend.clear()
        self.legend.set_entries([])
        if config.legend:
            self.legend.render_label(config.legend)

        self.series.use_palette(config.colors or self.settings.palette)
        self.series.add_all(chart, config)
        self.legend.set_entries(self.series.legend_entries)

        self.events.subscribe(chart, config.handlers())
        self._apply_viewport(config)

        if self.resize_controller is not None:
            self.resize_controller.enable(mode)

    def apply_viewport_only(self, config: Configuration) -> None:
        """Apply only the visible range of a configuration."""
        self._apply_viewport(config)

    def _apply_viewport(self, config: Configuration) -> None:
        viewport = config.viewport()
        if self._chart is None or viewport is None:
            return
        self._chart.time_scale().set_visible_range(viewport.model_dump(by_alias=True))

    def resize(self) -> None:
        """Resize the chart to the dimensions of the current sizing mode."""
        if self.resize_controller is not None:
            self.resize_controller.handle_resize()

    @log_entry_exit(logger=logger)
    def unmount(self) -> None:
        """
        Tear down the chart instance.

        The resize listener and every event subscription are removed before
        the series are removed and the chart instance is released.
        """
        if not self._mounted:
            return

        chart = self._chart
        if self.resize_controller is not None:
            self.resize_controller.disable()
        self.events.release(chart)
        self.series.remove_all_series(chart)
        self.legend.set_entries([])
        self.legend.clear()

        self._chart = None
        self._mounted = False
        self.resize_controller = None
        self.container = None
        if chart is not None:
            chart.remove()
        logger.info("Chart unmounted")
