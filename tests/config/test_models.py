"""
Tests for the chart configuration models.
"""

import pandas as pd
import pytest
from pydantic import ValidationError

from chartsync.config.models import (
    Configuration,
    EventHandlers,
    OhlcPoint,
    ScalarPoint,
    SeriesSpec,
    SeriesType,
    is_timestamp,
    time_key,
)
from chartsync.errors import DataError


def handler(param):
    pass


class TestSeriesSpec:
    def test_point_shapes(self):
        spec = SeriesSpec(
            data=[
                {"time": 1, "value": 2},
                {"time": 2, "open": 1, "high": 3, "low": 0, "close": 2},
            ]
        )

        assert isinstance(spec.data[0], ScalarPoint)
        assert isinstance(spec.data[1], OhlcPoint)

    def test_point_extra_fields_kept(self):
        spec = SeriesSpec(data=[{"time": 1, "value": 2, "color": "red"}])

        assert spec.data[0].model_dump() == {"time": 1, "value": 2, "color": "red"}

    def test_camel_case_aliases(self):
        spec = SeriesSpec.model_validate(
            {"linearInterpolation": 5, "priceLines": [{"price": 1}]}
        )

        assert spec.linear_interpolation == 5
        assert spec.price_lines == [{"price": 1}]

    def test_non_increasing_time_rejected(self):
        with pytest.raises(ValidationError, match="strictly increasing"):
            SeriesSpec(data=[{"time": 1, "value": 2}, {"time": 1, "value": 3}])

    def test_dataframe_data(self):
        df = pd.DataFrame({"time": [10, 20], "value": [1.0, 2.0]})

        spec = SeriesSpec(data=df)

        assert [p.time for p in spec.data] == [10, 20]
        assert isinstance(spec.data[0], ScalarPoint)

    def test_dataframe_without_time_raises_data_error(self):
        with pytest.raises(DataError):
            SeriesSpec(data=pd.DataFrame({"value": [1.0]}))

    def test_immutable(self):
        spec = SeriesSpec()

        with pytest.raises(ValidationError):
            spec.legend = "x"


class TestConfiguration:
    def test_defaults(self):
        config = Configuration()

        assert config.auto_width is False
        assert config.dark_theme is False
        assert config.line_series == []
        assert config.options == {}
        assert config.viewport() is None

    def test_none_lists_become_empty(self):
        config = Configuration.model_validate({"lineSeries": None, "options": None})

        assert config.line_series == []
        assert config.options == {}

    def test_from_alias(self):
        config = Configuration.model_validate({"from": 1, "to": 2})

        assert config.from_ == 1
        assert config.viewport().model_dump(by_alias=True) == {"from": 1, "to": 2}

    def test_viewport_requires_both_bounds(self):
        assert Configuration(from_=1).viewport() is None

    def test_series_groups_order(self):
        config = Configuration(barSeries=[SeriesSpec()], candlestickSeries=[SeriesSpec()])

        groups = list(config.series_groups())

        assert [t for t, _ in groups] == [
            SeriesType.CANDLESTICK,
            SeriesType.LINE,
            SeriesType.AREA,
            SeriesType.BAR,
            SeriesType.HISTOGRAM,
        ]
        assert len(groups[0][1]) == 1

    def test_handlers(self):
        config = Configuration(onClick=handler)

        assert config.handlers() == EventHandlers(on_click=handler)

    def test_structural_equality(self):
        a = Configuration(lineSeries=[{"data": [{"time": 1, "value": 1}]}], onClick=handler)
        b = Configuration(lineSeries=[{"data": [{"time": 1, "value": 1}]}], onClick=handler)

        assert a == b
        assert a != b.model_copy(update={"on_click": print})

    def test_ohlc_dataframe(self, sample_ohlc_frame):
        config = Configuration(candlestickSeries=[{"data": sample_ohlc_frame}])

        points = config.candlestick_series[0].data
        assert len(points) == 4
        assert isinstance(points[0], OhlcPoint)
        assert points[0].time == 1704067200
        assert points[1].close < points[1].open


class TestTimeForms:
    """Tests for business day times alongside UNIX timestamps."""

    def test_business_day_string_series(self):
        config = Configuration(
            line_series=[
                {
                    "data": [
                        {"time": "2019-04-11", "value": 1},
                        {"time": "2019-04-12", "value": 2},
                    ]
                }
            ]
        )

        assert [p.time for p in config.line_series[0].data] == ["2019-04-11", "2019-04-12"]

    def test_business_day_object_series(self):
        spec = SeriesSpec(
            data=[
                {"time": {"year": 2019, "month": 4, "day": 11}, "open": 1, "high": 2, "low": 0, "close": 1},
                {"time": {"year": 2019, "month": 5, "day": 1}, "open": 1, "high": 2, "low": 0, "close": 2},
            ]
        )

        assert spec.data[1].time == {"year": 2019, "month": 5, "day": 1}
        assert isinstance(spec.data[0], OhlcPoint)

    def test_timestamps_stay_numeric(self):
        spec = SeriesSpec(data=[{"time": 10, "value": 1}])

        assert spec.data[0].time == 10
        assert isinstance(spec.data[0].time, int)

    @pytest.mark.parametrize(
        "times",
        [
            ["2019-04-12", "2019-04-11"],
            [{"year": 2019, "month": 4, "day": 12}, {"year": 2019, "month": 4, "day": 12}],
        ],
    )
    def test_business_day_order_checked(self, times):
        with pytest.raises(ValidationError, match="strictly increasing"):
            SeriesSpec(data=[{"time": t, "value": 1} for t in times])

    def test_string_viewport(self):
        config = Configuration(**{"from": "2019-04-11", "to": "2019-04-20"})

        assert config.viewport().model_dump(by_alias=True) == {
            "from": "2019-04-11",
            "to": "2019-04-20",
        }

    def test_time_key(self):
        assert time_key(5) == ("timestamp", 5)
        assert time_key("2019-04-11") == ("business_day_string", "2019-04-11")
        assert time_key({"year": 2019, "month": 4, "day": 11}) == ("business_day", (2019, 4, 11))
        assert not is_timestamp(True)
