"""
chartsync visualization module.

This module keeps a stateful chart instance synchronized with a declarative
configuration: series creation and removal, legend overlay, event
subscriptions, resize handling and linear interpolation of sparse series.
"""

from chartsync.visualization.component import LightweightChart, as_configuration
from chartsync.visualization.data_adapter import DataAdapter
from chartsync.visualization.engine import (
    ChartApi,
    ChartFactory,
    ContainerBox,
    CrosshairEvent,
    LegendRow,
    OverlayRenderer,
    ResizeSignal,
    SeriesApi,
    TimeScaleApi,
)
from chartsync.visualization.events import EventBridge
from chartsync.visualization.interpolation import interpolate
from chartsync.visualization.legend import LegendOverlay
from chartsync.visualization.reconciler import Reconciler, UpdateTier, classify_update
from chartsync.visualization.resize import AutoSizeMode, ResizeController
from chartsync.visualization.series import LegendEntry, SeriesFactory, SeriesManager
from chartsync.visualization.theme import DARK_THEME, LIGHT_THEME, merge_deep

__all__ = [
    "LightweightChart",
    "as_configuration",
    "Reconciler",
    "UpdateTier",
    "classify_update",
    "SeriesFactory",
    "SeriesManager",
    "LegendEntry",
    "LegendOverlay",
    "EventBridge",
    "ResizeController",
    "AutoSizeMode",
    "DataAdapter",
    "interpolate",
    "DARK_THEME",
    "LIGHT_THEME",
    "merge_deep",
    # Engine contract
    "ChartApi",
    "ChartFactory",
    "SeriesApi",
    "TimeScaleApi",
    "ContainerBox",
    "ResizeSignal",
    "OverlayRenderer",
    "LegendRow",
    "CrosshairEvent",
]
