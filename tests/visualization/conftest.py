"""
Fixtures for the visualization tests.
"""

import pytest

from chartsync.config.settings import ChartSettings
from chartsync.visualization.reconciler import Reconciler

from .fakes import FakeChartFactory, FakeContainer, FakeOverlay, FakeResizeSignal


@pytest.fixture
def settings():
    """Chart settings with the built-in defaults."""
    return ChartSettings()


@pytest.fixture
def factory():
    return FakeChartFactory()


@pytest.fixture
def container():
    return FakeContainer(800, 600)


@pytest.fixture
def overlay():
    return FakeOverlay()


@pytest.fixture
def signal():
    return FakeResizeSignal()


@pytest.fixture
def reconciler(factory, overlay, signal, settings):
    """A reconciler that is not mounted yet."""
    return Reconciler(factory, overlay=overlay, signal=signal, settings=settings)


@pytest.fixture
def line_points():
    """Sparse single-value samples, one every 10 seconds."""
    return [
        {"time": 0, "value": 10},
        {"time": 10, "value": 20},
        {"time": 20, "value": 15},
    ]


@pytest.fixture
def candle_points():
    return [
        {"time": 0, "open": 10, "high": 12, "low": 9, "close": 11},
        {"time": 10, "open": 11, "high": 13, "low": 8, "close": 9},
    ]
