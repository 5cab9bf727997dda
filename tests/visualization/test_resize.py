"""
Tests for the ResizeController class and chart dimension computation.
"""

import pytest

from chartsync.visualization.resize import AutoSizeMode, ResizeController, chart_dimensions

from .fakes import FakeChart, FakeContainer, FakeResizeSignal


@pytest.fixture
def chart():
    return FakeChart()


@pytest.fixture
def holder(chart):
    """Mutable chart reference, emulating mount and unmount."""
    return {"chart": chart}


@pytest.fixture
def controller(signal, container, holder):
    return ResizeController(signal, container, lambda: holder["chart"], default_height=500)


class TestChartDimensions:
    @pytest.mark.parametrize(
        "mode, expected",
        [
            (AutoSizeMode(), (None, 500)),
            (AutoSizeMode(width=300, height=200), (300, 200)),
            (AutoSizeMode(auto_width=True), (800, 500)),
            (AutoSizeMode(auto_height=True, width=300), (300, 600)),
            (AutoSizeMode(auto_width=True, auto_height=True, width=1, height=2), (800, 600)),
        ],
    )
    def test_dimensions(self, mode, expected):
        assert chart_dimensions(mode, FakeContainer(800, 600), 500) == expected

    def test_auto_without_container_uses_configured_values(self):
        mode = AutoSizeMode(auto_width=True, auto_height=True, width=300)

        assert chart_dimensions(mode, None, 500) == (300, 500)


class TestResizeController:
    """Tests for ResizeController."""

    def test_enable_installs_single_listener(self, controller, signal):
        mode = AutoSizeMode(auto_width=True)

        controller.enable(mode)
        controller.enable(mode)

        assert len(signal.listeners) == 1
        assert controller.enabled

    def test_enable_without_auto_axis_removes_listener(self, controller, signal):
        controller.enable(AutoSizeMode(auto_height=True))

        controller.enable(AutoSizeMode(width=300))

        assert signal.listeners == []
        assert not controller.enabled

    def test_disable_is_idempotent(self, controller, signal):
        controller.enable(AutoSizeMode(auto_width=True))

        controller.disable()
        controller.disable()

        assert signal.listeners == []

    def test_window_resize_follows_container(self, controller, signal, container, chart):
        controller.enable(AutoSizeMode(auto_width=True, auto_height=True))
        container.client_width = 1024
        container.client_height = 768

        signal.fire()

        assert chart.sizes == [(1024, 768)]

    def test_fixed_axis_falls_back_to_configured_value(self, controller, signal, chart):
        controller.enable(AutoSizeMode(auto_width=True, height=300))

        signal.fire()

        assert chart.sizes == [(800, 300)]

    def test_fixed_height_falls_back_to_default(self, controller, signal, chart):
        controller.enable(AutoSizeMode(auto_width=True))

        signal.fire()

        assert chart.sizes == [(800, 500)]

    def test_width_without_any_source_uses_container(self, controller, chart):
        controller.enable(AutoSizeMode(auto_height=True))

        assert controller.compute_size() == (800, 600)

    def test_resize_after_unmount_is_noop(self, controller, signal, holder, chart):
        controller.enable(AutoSizeMode(auto_width=True))
        holder["chart"] = None

        signal.fire()

        assert chart.sizes == []

    def test_missing_signal(self, container, holder):
        controller = ResizeController(None, container, lambda: holder["chart"])

        controller.enable(AutoSizeMode(auto_width=True))

        assert not controller.enabled
