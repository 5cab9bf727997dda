"""
Linear interpolation of sparse time series.

Densifies single-value series so that gaps wider than the requested interval
are filled with samples on the straight line between the bracketing points.
"""

from typing import Optional, Sequence

from chartsync.config.models import DataPoint, Number, ScalarPoint, is_timestamp
from chartsync.logging import get_logger

logger = get_logger(__name__)


def interpolate(
    points: Sequence[DataPoint], interval: Optional[Number]
) -> list[DataPoint]:
    """
    Fill gaps between consecutive samples with linearly interpolated points.

    Between two known samples ``prev`` and ``cur`` synthetic samples are
    emitted at ``prev.time + j * interval`` for every ``j >= 1`` such that the
    synthetic time is below ``cur.time - interval``. Known samples are kept
    unchanged at their original timestamps.

    The input is returned unchanged when the interval is falsy, when there are
    fewer than two points, or when the points are not single-value samples
    with UNIX timestamps (open/high/low/close bars and business day times are
    never interpolated).

    Args:
        points: Samples ordered by strictly increasing time
        interval: Spacing of the synthetic samples, in time units

    Returns:
        Samples ordered by time, original and synthetic
    """
    if not interval or len(points) < 2:
        return list(points)
    if interval < 0:
        logger.warning(f"Ignoring negative interpolation interval {interval}")
        return list(points)
    if not all(
        isinstance(point, ScalarPoint) and is_timestamp(point.time) for point in points
    ):
        logger.debug("Skipping interpolation for non scalar or non timestamp series data")
        return list(points)

    result: list[DataPoint] = [points[0]]
    for prev, cur in zip(points, points[1:]):
        slope = (cur.value - prev.value) / (cur.time - prev.time)
        step = 1
        inter_time = prev.time + interval
        while inter_time < cur.time - interval:
            inter_value = prev.value + (inter_time - prev.time) * slope
            result.append(ScalarPoint(time=inter_time, value=inter_value))
            step += 1
            inter_time = prev.time + step * interval
        result.append(cur)

    logger.debug(
        f"Interpolated {len(points)} points to {len(result)} with interval {interval}"
    )
    return result
