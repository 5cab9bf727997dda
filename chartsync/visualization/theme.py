"""
Chart theme resolution.

This module holds the dark and light presets and builds the options applied to
a chart instance from a configuration: preset, background overlay, computed
dimensions and caller options, merged in that order.
"""

import copy
from typing import Any, Mapping, Optional

from chartsync.config.models import Configuration

DARK_THEME: dict[str, Any] = {
    "layout": {
        "backgroundColor": "#131722",
        "lineColor": "#2B2B43",
        "textColor": "#D9D9D9",
    },
    "grid": {
        "vertLines": {"color": "#363c4e"},
        "horzLines": {"color": "#363c4e"},
    },
}

LIGHT_THEME: dict[str, Any] = {
    "layout": {
        "backgroundColor": "#FFFFFF",
        "lineColor": "#2B2B43",
        "textColor": "#191919",
    },
    "grid": {
        "vertLines": {"color": "#e1ecf2"},
        "horzLines": {"color": "#e1ecf2"},
    },
}


def merge_deep(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge ``overlay`` into a copy of ``base``.

    Nested mappings are merged key by key; any other value in ``overlay``
    replaces the value in ``base``. Neither argument is modified.
    """
    result = copy.deepcopy(dict(base))
    for key, value in overlay.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = merge_deep(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def theme_preset(dark: bool) -> dict[str, Any]:
    return DARK_THEME if dark else LIGHT_THEME


def legend_text_color(dark: bool) -> str:
    """Text color of the legend overlay for the given theme."""
    return theme_preset(dark)["layout"]["textColor"]


def resolve_chart_options(
    config: Configuration, width: Optional[float], height: float
) -> dict[str, Any]:
    """
    Build the options applied to the chart instance.

    Args:
        config: Configuration providing the theme flag, background overlay
            and caller options
        width: Chart width, omitted from the options when None
        height: Chart height

    Returns:
        Options dictionary; caller options take precedence over dimensions,
        which take precedence over the theme
    """
    options = merge_deep(theme_preset(config.dark_theme), config.background_theme or {})

    sizing: dict[str, Any] = {"height": height}
    if width is not None:
        sizing["width"] = width

    return merge_deep(options, {**sizing, **config.options})
