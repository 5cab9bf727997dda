"""
Series creation and lifecycle.

:class:`SeriesFactory` realizes one series specification on a chart instance.
:class:`SeriesManager` owns the realized series handles and the legend entries
they contribute, so the chart never holds series that are not declared by the
configuration most recently applied.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from chartsync.config.models import Configuration, SeriesSpec, SeriesType
from chartsync.errors import ConfigurationError, ErrorCodes, UnsupportedSeriesTypeError
from chartsync.logging import get_logger
from chartsync.visualization.engine import ChartApi, SeriesApi
from chartsync.visualization.interpolation import interpolate

logger = get_logger(__name__)


@dataclass(frozen=True)
class LegendEntry:
    """Legend registration of one series handle."""

    series: SeriesApi
    color: str
    title: str


class SeriesFactory:
    """Creates engine series from series specifications."""

    ADD_SERIES_METHODS = {
        SeriesType.CANDLESTICK: "add_candlestick_series",
        SeriesType.LINE: "add_line_series",
        SeriesType.AREA: "add_area_series",
        SeriesType.BAR: "add_bar_series",
        SeriesType.HISTOGRAM: "add_histogram_series",
    }

    @classmethod
    def resolve_type(cls, series_type: Union[SeriesType, str]) -> SeriesType:
        """
        Normalize a series type tag.

        Raises:
            UnsupportedSeriesTypeError: If the tag is not a known series type
        """
        try:
            return SeriesType(series_type)
        except ValueError:
            raise UnsupportedSeriesTypeError(
                series_type, [t.value for t in SeriesType]
            ) from None

    @classmethod
    def create(
        cls,
        chart: ChartApi,
        spec: SeriesSpec,
        series_type: Union[SeriesType, str],
        color: str,
    ) -> SeriesApi:
        """
        Realize a series on the chart.

        Args:
            chart: Chart instance receiving the series
            spec: Series specification
            series_type: Type tag selecting the engine factory
            color: Resolved series color, overridden by ``spec.options["color"]``

        Returns:
            The engine series handle, with data, markers and price lines set

        Raises:
            UnsupportedSeriesTypeError: If the type tag is unknown
        """
        method = cls.ADD_SERIES_METHODS[cls.resolve_type(series_type)]
        series = getattr(chart, method)({"color": color, **spec.options})

        points = interpolate(spec.data, spec.linear_interpolation)
        series.set_data([point.model_dump(exclude_none=True) for point in points])

        if spec.markers:
            series.set_markers(list(spec.markers))
        if spec.price_lines:
            for line in spec.price_lines:
                series.create_price_line(dict(line))

        return series


class SeriesManager:
    """
    Tracks the series handles realized on the chart.

    Colors are assigned from the palette by the number of series already
    tracked, so a rebuild after :meth:`remove_all_series` assigns the same
    colors in the same order.
    """

    def __init__(self, palette: Sequence[str]):
        self.use_palette(palette)
        self._handles: list[SeriesApi] = []
        self._legend_entries: list[LegendEntry] = []

    def __len__(self) -> int:
        return len(self._handles)

    @property
    def handles(self) -> list[SeriesApi]:
        return list(self._handles)

    @property
    def legend_entries(self) -> list[LegendEntry]:
        return list(self._legend_entries)

    def use_palette(self, palette: Sequence[str]) -> None:
        """
        Replace the palette used for series without an explicit color.

        Raises:
            ConfigurationError: If the palette is empty
        """
        if not palette:
            raise ConfigurationError(
                message="Palette must contain at least one color",
                error_code=ErrorCodes.CONFIG_EMPTY_PALETTE,
            )
        self.palette = list(palette)

    def next_color(self) -> str:
        return self.palette[len(self._handles) % len(self.palette)]

    def add_series(
        self,
        chart: Optional[ChartApi],
        spec: SeriesSpec,
        series_type: Union[SeriesType, str],
    ) -> Optional[SeriesApi]:
        """
        Realize a series and track it.

        Returns:
            The new handle, or None when the chart is not available

        Raises:
            UnsupportedSeriesTypeError: If the type tag is unknown
        """
        series_type = SeriesFactory.resolve_type(series_type)
        if chart is None:
            logger.debug("Chart not available, skipping series creation")
            return None

        color = spec.options.get("color") or self.next_color()
        series = SeriesFactory.create(chart, spec, series_type, color)
        self._handles.append(series)

        if spec.legend:
            self._legend_entries.append(LegendEntry(series, color, spec.legend))

        return series

    def add_all(self, chart: Optional[ChartApi], config: Configuration) -> int:
        """Realize every series declared by the configuration, in type order."""
        added = 0
        for series_type, specs in config.series_groups():
            for spec in specs:
                if self.add_series(chart, spec, series_type) is not None:
                    added += 1
        logger.debug(f"Added {added} series ({len(self._legend_entries)} with legend)")
        return added

    def remove_all_series(self, chart: Optional[ChartApi]) -> None:
        """Remove every tracked series from the chart and forget them."""
        if chart is not None:
            for series in self._handles:
                chart.remove_series(series)
        logger.debug(f"Removed {len(self._handles)} series")
        self._handles.clear()
        self._legend_entries.clear()
