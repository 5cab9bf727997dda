"""
Pydantic models for chart configuration.

This module defines the declarative configuration compared between updates:
series specifications and their data points, theme flags, sizing, viewport
range and event handler references. Field names accept both snake_case and
the camelCase spelling used by JavaScript chart configurations.
"""

from enum import Enum
from typing import Any, Callable, Iterator, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]
# UNIX timestamp, business day string ("2019-04-11") or {year, month, day}
Time = Union[int, float, str, dict[str, int]]
Handler = Callable[..., Any]


def is_timestamp(time: Time) -> bool:
    """Whether a time value is a numeric UNIX timestamp."""
    return isinstance(time, (int, float)) and not isinstance(time, bool)


def time_key(time: Time) -> tuple[str, Any]:
    """
    Sort key of a time value, tagged with its form.

    Keys are only comparable when their tags match: business day strings
    order lexically (ISO ``YYYY-MM-DD``), business day objects by
    year, month and day.
    """
    if is_timestamp(time):
        return "timestamp", time
    if isinstance(time, str):
        return "business_day_string", time
    return "business_day", (time.get("year", 0), time.get("month", 0), time.get("day", 0))


class _ChartModel(BaseModel):
    """Base model with camelCase aliases; instances are immutable inputs."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
    )


class SeriesType(str, Enum):
    """Series kinds supported by the rendering engine."""

    CANDLESTICK = "candlestick"
    LINE = "line"
    AREA = "area"
    BAR = "bar"
    HISTOGRAM = "histogram"


class ScalarPoint(_ChartModel):
    """A single-value sample, used by line, area and histogram series."""

    model_config = ConfigDict(extra="allow")

    time: Time
    value: Number


class OhlcPoint(_ChartModel):
    """An open/high/low/close sample, used by candlestick and bar series."""

    model_config = ConfigDict(extra="allow")

    time: Time
    open: Number
    high: Number
    low: Number
    close: Number


DataPoint = Union[ScalarPoint, OhlcPoint]


class SeriesSpec(_ChartModel):
    """Declarative description of one plotted series."""

    data: list[DataPoint] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)
    markers: Optional[list[dict[str, Any]]] = None
    price_lines: Optional[list[dict[str, Any]]] = None
    legend: Optional[str] = None
    linear_interpolation: Optional[Number] = None

    @field_validator("data", mode="before")
    @classmethod
    def convert_dataframe(cls, v: Any) -> Any:
        """Accept a pandas DataFrame and convert it to engine points."""
        # Lazy import to avoid circular dependency with the visualization package
        from chartsync.visualization.data_adapter import DataAdapter

        if DataAdapter.is_frame(v):
            return DataAdapter.to_points(v)
        return v

    @field_validator("data")
    @classmethod
    def times_strictly_increasing(cls, v: list[DataPoint]) -> list[DataPoint]:
        """Validate that time values of the same form are strictly increasing."""
        for index in range(1, len(v)):
            prev_key, key = time_key(v[index - 1].time), time_key(v[index].time)
            if prev_key[0] == key[0] and key[1] <= prev_key[1]:
                raise ValueError(
                    f"Time values must be strictly increasing: point {index} "
                    f"has time {v[index].time} after {v[index - 1].time}"
                )
        return v


class ViewportRange(_ChartModel):
    """Visible time window of the chart."""

    from_: Time = Field(alias="from")
    to: Time


class EventHandlers(NamedTuple):
    """The caller-supplied chart event handlers."""

    on_click: Optional[Handler] = None
    on_crosshair_move: Optional[Handler] = None
    on_time_range_move: Optional[Handler] = None


class Configuration(_ChartModel):
    """
    Complete declarative chart configuration.

    This is the unit compared between updates. Equality is structural over all
    fields; handler callables compare by identity.
    """

    auto_width: bool = False
    auto_height: bool = False
    width: Optional[Number] = None
    height: Optional[Number] = None
    legend: Optional[str] = None

    candlestick_series: list[SeriesSpec] = Field(default_factory=list)
    line_series: list[SeriesSpec] = Field(default_factory=list)
    area_series: list[SeriesSpec] = Field(default_factory=list)
    bar_series: list[SeriesSpec] = Field(default_factory=list)
    histogram_series: list[SeriesSpec] = Field(default_factory=list)

    on_click: Optional[Handler] = None
    on_crosshair_move: Optional[Handler] = None
    on_time_range_move: Optional[Handler] = None

    dark_theme: bool = False
    background_theme: Optional[dict[str, Any]] = None
    colors: Optional[list[str]] = None
    options: dict[str, Any] = Field(default_factory=dict)

    from_: Optional[Time] = Field(default=None, alias="from")
    to: Optional[Time] = None

    @field_validator(
        "candlestick_series",
        "line_series",
        "area_series",
        "bar_series",
        "histogram_series",
        "options",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicit None the same as an omitted field."""
        if v is None:
            return {} if info.field_name == "options" else []
        return v

    def series_groups(self) -> Iterator[tuple[SeriesType, list[SeriesSpec]]]:
        """Yield each series list with its type, in rendering order."""
        yield SeriesType.CANDLESTICK, self.candlestick_series
        yield SeriesType.LINE, self.line_series
        yield SeriesType.AREA, self.area_series
        yield SeriesType.BAR, self.bar_series
        yield SeriesType.HISTOGRAM, self.histogram_series

    def handlers(self) -> EventHandlers:
        return EventHandlers(
            on_click=self.on_click,
            on_crosshair_move=self.on_crosshair_move,
            on_time_range_move=self.on_time_range_move,
        )

    def viewport(self) -> Optional[ViewportRange]:
        """Return the visible range, or None unless both bounds are set."""
        if self.from_ is None or self.to is None:
            return None
        return ViewportRange(from_=self.from_, to=self.to)
