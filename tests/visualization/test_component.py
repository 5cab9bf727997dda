"""
Tests for the LightweightChart component.
"""

import pytest

from chartsync.errors import InvalidConfigurationError
from chartsync.visualization.component import LightweightChart, as_configuration
from chartsync.visualization.reconciler import UpdateTier


@pytest.fixture
def config_dict(line_points):
    return {
        "lineSeries": [{"data": line_points, "legend": "Close"}],
        "from": 0,
        "to": 20,
    }


@pytest.fixture
def chart(container, config_dict, factory, overlay, signal, settings):
    return LightweightChart(
        container,
        config_dict,
        chart_factory=factory,
        overlay=overlay,
        signal=signal,
        settings=settings,
    )


class TestAsConfiguration:
    def test_camel_case_mapping(self, config_dict):
        config = as_configuration(config_dict)

        assert len(config.line_series) == 1
        assert config.from_ == 0

    def test_configuration_passed_through(self, config_dict):
        config = as_configuration(config_dict)

        assert as_configuration(config) is config

    def test_invalid_mapping(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            as_configuration({"lineSeries": [{"data": [{"time": 1}]}]})

        assert exc_info.value.error_code == "CONFIG-ValidationFailed"
        assert exc_info.value.details["validation_errors"]


class TestLightweightChart:
    def test_mounts_on_construction(self, chart, factory):
        assert chart.chart is factory.last
        assert not chart.closed
        assert len(factory.last.series) == 1

    def test_set_config_returns_tier(self, chart, config_dict, factory):
        tier = chart.set_config({**config_dict, "from": 5, "to": 15})

        assert tier is UpdateTier.VIEWPORT
        assert chart.config.from_ == 5
        assert factory.last.time_scale().visible_ranges[-1] == {"from": 5, "to": 15}

    def test_set_config_compares_with_previous(self, chart, config_dict):
        chart.set_config({**config_dict, "darkTheme": True})

        assert chart.set_config({**config_dict, "darkTheme": True}) is UpdateTier.NONE

    def test_text_color_follows_theme(self, chart, config_dict):
        assert chart.text_color == "#191919"

        chart.set_config({**config_dict, "darkTheme": True})

        assert chart.text_color == "#D9D9D9"

    def test_invalid_update_keeps_previous_config(self, chart):
        previous = chart.config

        with pytest.raises(InvalidConfigurationError):
            chart.set_config({"width": "wide"})

        assert chart.config is previous

    def test_close(self, chart, factory, config_dict):
        chart.close()
        chart.close()

        assert chart.closed
        assert chart.chart is None
        assert factory.last.removed
        assert chart.set_config({**config_dict, "darkTheme": True}) is UpdateTier.NONE

    def test_context_manager(self, container, config_dict, factory):
        with LightweightChart(container, config_dict, chart_factory=factory) as chart:
            assert not chart.closed

        assert chart.closed
        assert factory.last.removed

    def test_without_host_capabilities(self, container, config_dict, factory):
        chart = LightweightChart(
            container, {**config_dict, "autoWidth": True}, chart_factory=factory
        )

        chart.chart.move_crosshair(None)
        chart.close()

        assert factory.last.removed
