"""
Chart component for host UI frameworks.

:class:`LightweightChart` is the surface a host framework adapter works with:
construct it with a container and a configuration, pass every new
configuration to :meth:`LightweightChart.set_config`, and close it when the
host element goes away.
"""

from typing import Any, Optional, Union

from pydantic import ValidationError

from chartsync.config.models import Configuration
from chartsync.config.settings import ChartSettings
from chartsync.errors import ErrorCodes, InvalidConfigurationError
from chartsync.logging import get_logger
from chartsync.visualization.engine import (
    ChartApi,
    ChartFactory,
    OverlayRenderer,
    ResizeSignal,
)
from chartsync.visualization.reconciler import Reconciler, UpdateTier
from chartsync.visualization.theme import legend_text_color

logger = get_logger(__name__)

ConfigInput = Union[Configuration, dict[str, Any]]


def as_configuration(config: ConfigInput) -> Configuration:
    """
    Validate a configuration given as a mapping.

    Raises:
        InvalidConfigurationError: If validation fails
    """
    if isinstance(config, Configuration):
        return config
    try:
        return Configuration.model_validate(config)
    except ValidationError as e:
        raise InvalidConfigurationError(
            message=f"Chart configuration validation failed: {e}",
            error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
            details={"validation_errors": e.errors(include_url=False)},
        ) from e


class LightweightChart:
    """
    A chart bound to one host container.

    The chart is mounted on construction and stays mounted until
    :meth:`close`. The instance can be used as a context manager.

    Example:
        >>> chart = LightweightChart(
        ...     container,
        ...     {"lineSeries": [{"data": points, "legend": "Close"}]},
        ...     chart_factory=create_chart,
        ...     overlay=legend_div,
        ...     signal=window_resize,
        ... )
        >>> chart.set_config({**chart.config.model_dump(by_alias=True), "from": t0, "to": t1})
        >>> chart.close()
    """

    def __init__(
        self,
        container: Any,
        config: ConfigInput,
        *,
        chart_factory: ChartFactory,
        overlay: Optional[OverlayRenderer] = None,
        signal: Optional[ResizeSignal] = None,
        settings: Optional[ChartSettings] = None,
    ):
        self._config = as_configuration(config)
        self.reconciler = Reconciler(
            chart_factory, overlay=overlay, signal=signal, settings=settings
        )
        self.reconciler.mount(container, self._config)

    @property
    def config(self) -> Configuration:
        """The configuration most recently applied."""
        return self._config

    @property
    def chart(self) -> Optional[ChartApi]:
        return self.reconciler.chart

    @property
    def closed(self) -> bool:
        return not self.reconciler.mounted

    @property
    def text_color(self) -> str:
        """Legend overlay text color for the current theme."""
        return legend_text_color(self._config.dark_theme)

    def set_config(self, config: ConfigInput) -> UpdateTier:
        """
        Apply a new configuration.

        Returns:
            The update tier that ran; NONE when the chart is closed
        """
        new_config = as_configuration(config)
        if self.closed:
            logger.debug("Chart closed, ignoring configuration update")
            return UpdateTier.NONE

        previous, self._config = self._config, new_config
        return self.reconciler.update(previous, new_config)

    def close(self) -> None:
        """Unmount the chart; calling it again does nothing."""
        self.reconciler.unmount()

    def __enter__(self) -> "LightweightChart":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
