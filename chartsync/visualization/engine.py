"""
Rendering engine contract.

The reconciliation core drives a stateful chart engine that follows the
lightweight-charts API. These protocols describe the calls it makes, using
snake_case names, together with the host capabilities the core needs: the
container box used for sizing, the window resize signal and the overlay that
draws legend rows.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

Handler = Callable[..., Any]


@runtime_checkable
class SeriesApi(Protocol):
    """Handle of one realized series."""

    def set_data(self, data: list[dict[str, Any]]) -> None: ...

    def set_markers(self, markers: list[dict[str, Any]]) -> None: ...

    def create_price_line(self, options: dict[str, Any]) -> Any: ...


@runtime_checkable
class TimeScaleApi(Protocol):
    """Time axis of a chart."""

    def set_visible_range(self, visible_range: dict[str, Any]) -> None: ...

    def subscribe_visible_time_range_change(self, handler: Handler) -> None: ...

    def unsubscribe_visible_time_range_change(self, handler: Handler) -> None: ...


@runtime_checkable
class ChartApi(Protocol):
    """Handle of one chart instance created by the engine."""

    def add_candlestick_series(self, options: dict[str, Any]) -> SeriesApi: ...

    def add_line_series(self, options: dict[str, Any]) -> SeriesApi: ...

    def add_area_series(self, options: dict[str, Any]) -> SeriesApi: ...

    def add_bar_series(self, options: dict[str, Any]) -> SeriesApi: ...

    def add_histogram_series(self, options: dict[str, Any]) -> SeriesApi: ...

    def remove_series(self, series: SeriesApi) -> None: ...

    def subscribe_click(self, handler: Handler) -> None: ...

    def unsubscribe_click(self, handler: Handler) -> None: ...

    def subscribe_crosshair_move(self, handler: Handler) -> None: ...

    def unsubscribe_crosshair_move(self, handler: Handler) -> None: ...

    def time_scale(self) -> TimeScaleApi: ...

    def apply_options(self, options: dict[str, Any]) -> None: ...

    def resize(self, width: int, height: int) -> None: ...

    def remove(self) -> None: ...


class ContainerBox(Protocol):
    """Box of the element hosting the chart surface."""

    @property
    def client_width(self) -> int: ...

    @property
    def client_height(self) -> int: ...


class ResizeSignal(Protocol):
    """Window resize notification source."""

    def add_listener(self, listener: Callable[[], None]) -> None: ...

    def remove_listener(self, listener: Callable[[], None]) -> None: ...


@dataclass(frozen=True)
class LegendRow:
    """
    One rendered legend line.

    Attributes:
        title: Leading label of the row
        value: Formatted price text, empty for label-only rows
        color: Color of the price text, None for the default text color
    """

    title: str
    value: str = ""
    color: Optional[str] = None

    @property
    def text(self) -> str:
        return f"{self.title} {self.value}" if self.value else self.title


class OverlayRenderer(Protocol):
    """Draws colored text rows on top of the chart."""

    def clear(self) -> None: ...

    def append_row(self, row: LegendRow) -> None: ...


@dataclass(frozen=True)
class CrosshairEvent:
    """
    Crosshair movement notification.

    Attributes:
        time: Time under the crosshair, None when outside the data range
        series_prices: Price per series handle at that time; a number for
            single-value series or an open/high/low/close bar
        point: Pointer coordinates, when known
    """

    time: Optional[Any] = None
    series_prices: Mapping[Any, Any] = field(default_factory=dict)
    point: Optional[Mapping[str, float]] = None


ChartFactory = Callable[[Any], ChartApi]
