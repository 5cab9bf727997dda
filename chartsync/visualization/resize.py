"""
Chart sizing and window resize handling.
"""

from typing import Callable, NamedTuple, Optional

from chartsync.config.models import Configuration, Number
from chartsync.logging import get_logger
from chartsync.visualization.engine import ChartApi, ContainerBox, ResizeSignal

logger = get_logger(__name__)


class AutoSizeMode(NamedTuple):
    """Sizing mode: auto axes follow the container box, others use fixed values."""

    auto_width: bool = False
    auto_height: bool = False
    width: Optional[Number] = None
    height: Optional[Number] = None

    @classmethod
    def from_config(cls, config: Configuration) -> "AutoSizeMode":
        return cls(config.auto_width, config.auto_height, config.width, config.height)

    @property
    def active(self) -> bool:
        return self.auto_width or self.auto_height


def chart_dimensions(
    mode: AutoSizeMode, container: Optional[ContainerBox], default_height: int
) -> tuple[Optional[Number], Number]:
    """
    Compute the chart width and height.

    Auto axes take the container box size. Otherwise the configured value is
    used; the height falls back to ``default_height`` and the width to None.
    """
    if mode.auto_width and container is not None:
        width = container.client_width
    else:
        width = mode.width

    if mode.auto_height and container is not None:
        height = container.client_height
    else:
        height = mode.height or default_height

    return width, height


class ResizeController:
    """
    Keeps the chart size in step with the window when auto sizing is enabled.

    The chart is looked up through ``chart_provider`` on every resize, so a
    resize arriving before mount or after unmount does nothing.
    """

    def __init__(
        self,
        signal: Optional[ResizeSignal],
        container: Optional[ContainerBox],
        chart_provider: Callable[[], Optional[ChartApi]],
        default_height: int = 500,
    ):
        self.signal = signal
        self.container = container
        self.chart_provider = chart_provider
        self.default_height = default_height
        self.mode = AutoSizeMode()
        self._installed = False

    @property
    def enabled(self) -> bool:
        return self._installed

    def enable(self, mode: AutoSizeMode) -> None:
        """Install the resize listener when ``mode`` has an auto axis."""
        self.mode = mode
        if not mode.active:
            self.disable()
            return
        if self._installed or self.signal is None:
            return
        self.signal.add_listener(self.handle_resize)
        self._installed = True
        logger.debug("Resize listener installed")

    def disable(self) -> None:
        if not self._installed:
            return
        if self.signal is not None:
            self.signal.remove_listener(self.handle_resize)
        self._installed = False
        logger.debug("Resize listener removed")

    def compute_size(self) -> tuple[Number, Number]:
        """Size for the current mode; without a configured width, the container width."""
        width, height = chart_dimensions(self.mode, self.container, self.default_height)
        if width is None:
            width = self.container.client_width if self.container is not None else 0
        return width, height

    def handle_resize(self) -> None:
        chart = self.chart_provider()
        if chart is None:
            logger.debug("Chart not available, ignoring resize")
            return
        width, height = self.compute_size()
        chart.resize(width, height)
