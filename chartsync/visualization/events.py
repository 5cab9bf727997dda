"""
Subscription of chart event handlers.
"""

from typing import Optional

from chartsync.config.models import EventHandlers
from chartsync.logging import get_logger
from chartsync.visualization.engine import ChartApi, Handler

logger = get_logger(__name__)


class EventBridge:
    """
    Attaches caller event handlers to a chart instance.

    Besides the three optional caller handlers, the bridge keeps the legend
    refresh handler subscribed to crosshair movement. The legend subscription
    is not controlled by callers and is only detached by :meth:`release`.
    """

    def __init__(self, legend_handler: Handler):
        self.legend_handler = legend_handler
        self._active: Optional[EventHandlers] = None
        self._legend_attached = False

    @property
    def active(self) -> Optional[EventHandlers]:
        """Caller handlers currently attached, if any."""
        return self._active

    @property
    def legend_attached(self) -> bool:
        return self._legend_attached

    def subscribe(self, chart: Optional[ChartApi], handlers: EventHandlers) -> None:
        """
        Attach caller handlers and make sure the legend refresh is attached.

        Handlers still attached from an earlier call are detached first, so
        subscribing again never stacks duplicate subscriptions.
        """
        if chart is None:
            logger.debug("Chart not available, skipping event subscription")
            return

        if self._active is not None:
            self.unsubscribe(chart, self._active)

        if handlers.on_click:
            chart.subscribe_click(handlers.on_click)
        if handlers.on_crosshair_move:
            chart.subscribe_crosshair_move(handlers.on_crosshair_move)
        if handlers.on_time_range_move:
            chart.time_scale().subscribe_visible_time_range_change(
                handlers.on_time_range_move
            )
        self._active = handlers

        if not self._legend_attached:
            chart.subscribe_crosshair_move(self.legend_handler)
            self._legend_attached = True

    def unsubscribe(self, chart: Optional[ChartApi], handlers: EventHandlers) -> None:
        """Detach the given caller handlers; the legend refresh stays attached."""
        if chart is None:
            logger.debug("Chart not available, skipping event unsubscription")
            return

        if handlers.on_click:
            chart.unsubscribe_click(handlers.on_click)
        if handlers.on_crosshair_move:
            chart.unsubscribe_crosshair_move(handlers.on_crosshair_move)
        if handlers.on_time_range_move:
            chart.time_scale().unsubscribe_visible_time_range_change(
                handlers.on_time_range_move
            )

        if self._active == handlers:
            self._active = None

    def release(self, chart: Optional[ChartApi]) -> None:
        """Detach every subscription, including the legend refresh."""
        if chart is not None:
            if self._active is not None:
                self.unsubscribe(chart, self._active)
            if self._legend_attached:
                chart.unsubscribe_crosshair_move(self.legend_handler)

        self._active = None
        self._legend_attached = False
