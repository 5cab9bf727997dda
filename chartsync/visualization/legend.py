"""
Legend overlay tracking live series values under the crosshair.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from chartsync.logging import get_logger
from chartsync.visualization.engine import CrosshairEvent, LegendRow, OverlayRenderer
from chartsync.visualization.series import LegendEntry

logger = get_logger(__name__)

_OHLC_FIELDS = ("open", "high", "low", "close")


def _ohlc_fields(price: Any) -> Optional[dict[str, Any]]:
    """Return the open/high/low/close values of a bar price, or None for a scalar."""
    if isinstance(price, Mapping):
        if all(name in price for name in _OHLC_FIELDS):
            return {name: price[name] for name in _OHLC_FIELDS}
        return None
    if all(hasattr(price, name) for name in _OHLC_FIELDS):
        return {name: getattr(price, name) for name in _OHLC_FIELDS}
    return None


class LegendOverlay:
    """
    Renders one row per legend entry on every crosshair movement.

    Each movement redraws the overlay from scratch. A missing renderer makes
    every operation a no-op.
    """

    def __init__(
        self,
        renderer: Optional[OverlayRenderer],
        bullish_color: str = "rgba(0, 150, 136, 0.8)",
        bearish_color: str = "rgba(255,82,82, 0.8)",
    ):
        self.renderer = renderer
        self.bullish_color = bullish_color
        self.bearish_color = bearish_color
        self._entries: list[LegendEntry] = []

    @property
    def entries(self) -> list[LegendEntry]:
        return list(self._entries)

    def set_entries(self, entries: Iterable[LegendEntry]) -> None:
        self._entries = list(entries)
        logger.debug(f"Tracking {len(self._entries)} legend entries")

    def clear(self) -> None:
        """Clear rendered rows; tracked entries are kept."""
        if self.renderer is not None:
            self.renderer.clear()

    def render_label(self, text: str) -> None:
        """Render the static label row shown above the series rows."""
        if self.renderer is not None and text:
            self.renderer.append_row(LegendRow(title=text))

    def format_row(self, entry: LegendEntry, price: Any) -> LegendRow:
        bar = _ohlc_fields(price)
        if bar is None:
            return LegendRow(title=entry.title, value=f"{price}", color=entry.color)

        color = self.bullish_color if bar["close"] >= bar["open"] else self.bearish_color
        value = f"O:{bar['open']} H:{bar['high']} L:{bar['low']} C:{bar['close']}"
        return LegendRow(title=entry.title, value=value, color=color)

    def on_crosshair_move(self, event: CrosshairEvent) -> None:
        """Redraw the rows for the prices under the crosshair."""
        if self.renderer is None or event.time is None or not self._entries:
            return

        self.renderer.clear()
        for entry in self._entries:
            price = event.series_prices.get(entry.series)
            if price is None:
                continue
            self.renderer.append_row(self.format_row(entry, price))
