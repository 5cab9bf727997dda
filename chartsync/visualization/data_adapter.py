"""
Data transformation layer for series specifications.

This module converts pandas DataFrames into the point dictionaries accepted by
:class:`~chartsync.config.models.SeriesSpec`, so series data can be supplied
either as a list of points or as a frame.
"""

import numbers
from datetime import datetime
from typing import Any, Optional

import pandas as pd

from chartsync.errors import DataError, DataFormatError, ErrorCodes
from chartsync.logging import get_logger

logger = get_logger(__name__)

OHLC_COLUMNS = ("open", "high", "low", "close")


class DataAdapter:
    """
    Transforms pandas DataFrames into lightweight-charts points.

    Timestamps are converted to UNIX seconds. The time is read from a
    DatetimeIndex, or from a ``time`` or ``date`` column (case-insensitive).
    """

    @staticmethod
    def is_frame(value: Any) -> bool:
        return isinstance(value, pd.DataFrame)

    @staticmethod
    def to_points(df: pd.DataFrame) -> list[dict[str, Any]]:
        """
        Convert a frame to points, detecting its shape.

        Frames with open/high/low/close columns produce OHLC points. Otherwise a
        ``value`` column, or failing that the first numeric column, produces
        single-value points. A ``color`` column on a single-value frame sets
        the per-point color.

        Raises:
            DataError: If no time information or no value column is found
        """
        col_map = {str(col).lower(): col for col in df.columns}
        if all(name in col_map for name in OHLC_COLUMNS):
            return DataAdapter.transform_ohlc(df)
        color_column = "color" if "color" in col_map else None
        if "value" in col_map:
            return DataAdapter.transform_line(
                df, value_column="value", color_column=color_column
            )

        time_columns = {"time", "date"}
        numeric = [
            col
            for col in df.select_dtypes(include="number").columns
            if str(col).lower() not in time_columns
        ]
        if not numeric:
            raise DataError(
                message="No value column found in DataFrame",
                error_code=ErrorCodes.DATA_MISSING_COLUMNS,
                details={"available_columns": [str(c) for c in df.columns]},
            )
        logger.debug(f"Using column '{numeric[0]}' as series value")
        return DataAdapter.transform_line(
            df, value_column=str(numeric[0]), color_column=color_column
        )

    @staticmethod
    def _time_column(df: pd.DataFrame) -> tuple[pd.DataFrame, str]:
        """
        Locate the time information of a frame.

        Returns:
            The frame, with the index copied to a ``time`` column when the
            index is a DatetimeIndex, and the name of the time column

        Raises:
            DataError: If no suitable time column can be found
        """
        if isinstance(df.index, pd.DatetimeIndex):
            df = df.copy()
            df["time"] = df.index
            return df, "time"

        col_map = {str(col).lower(): col for col in df.columns}
        for candidate in ("time", "date"):
            if candidate in col_map:
                return df, col_map[candidate]

        raise DataError(
            message="No suitable time column found. Expected 'time', 'date' or a DatetimeIndex.",
            error_code=ErrorCodes.DATA_MISSING_TIME_COLUMN,
            details={"available_columns": [str(c) for c in df.columns]},
        )

    @staticmethod
    def _to_unix(time_value: Any) -> int:
        if isinstance(time_value, (pd.Timestamp, datetime)):
            return int(time_value.timestamp())
        if isinstance(time_value, numbers.Number) and not isinstance(time_value, bool):
            # Assume it's already a UNIX timestamp in seconds
            return int(time_value)
        if isinstance(time_value, str):
            return int(pd.Timestamp(time_value).timestamp())
        raise DataFormatError(
            message=f"Unsupported timestamp format: {type(time_value)}",
            error_code=ErrorCodes.DATA_MISSING_TIME_COLUMN,
            details={"timestamp_type": str(type(time_value))},
        )

    @staticmethod
    def transform_ohlc(df: pd.DataFrame) -> list[dict[str, Any]]:
        """
        Transform OHLC data from a DataFrame.

        Args:
            df: DataFrame with open, high, low and close columns

        Returns:
            List of ``{time, open, high, low, close}`` dictionaries

        Raises:
            DataError: If the frame is missing required columns
        """
        logger.debug(f"Transforming OHLC data with shape {df.shape}")
        df, time_column = DataAdapter._time_column(df)

        col_map = {str(col).lower(): col for col in df.columns}
        missing = [name for name in OHLC_COLUMNS if name not in col_map]
        if missing:
            raise DataError(
                message=f"Missing required columns for OHLC transformation: {missing}",
                error_code=ErrorCodes.DATA_MISSING_COLUMNS,
                details={"available_columns": [str(c) for c in df.columns]},
            )

        result = []
        for _, row in df.iterrows():
            if any(pd.isna(row[col_map[name]]) for name in OHLC_COLUMNS):
                logger.debug(f"Skipping incomplete bar at {row[time_column]}")
                continue
            entry = {"time": DataAdapter._to_unix(row[time_column])}
            for name in OHLC_COLUMNS:
                entry[name] = float(row[col_map[name]])
            result.append(entry)

        logger.debug(f"Transformed {len(result)} OHLC data points")
        return result

    @staticmethod
    def transform_line(
        df: pd.DataFrame,
        value_column: str = "value",
        color_column: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Transform single-value data from a DataFrame.

        Args:
            df: DataFrame containing the values
            value_column: Name of the column containing the values
            color_column: Optional column holding a per-point color

        Returns:
            List of ``{time, value}`` dictionaries, with ``color`` when requested

        Raises:
            DataError: If the value column is missing
        """
        logger.debug(f"Transforming line data with shape {df.shape}")
        df, time_column = DataAdapter._time_column(df)

        col_map = {str(col).lower(): col for col in df.columns}
        actual_value_col = col_map.get(value_column.lower())
        if actual_value_col is None:
            raise DataError(
                message=f"Missing required column for line transformation: {value_column}",
                error_code=ErrorCodes.DATA_MISSING_COLUMNS,
                details={
                    "available_columns": [str(c) for c in df.columns],
                    "required_column": value_column,
                },
            )

        actual_color_col = None
        if color_column:
            actual_color_col = col_map.get(color_column.lower())
            if actual_color_col is None:
                logger.warning(f"Color column '{color_column}' not found, ignoring it")

        result = []
        for _, row in df.iterrows():
            value = row[actual_value_col]
            if pd.isna(value):
                logger.debug(f"Skipping NaN value at {row[time_column]}")
                continue

            entry: dict[str, Any] = {
                "time": DataAdapter._to_unix(row[time_column]),
                "value": float(value),
            }
            if actual_color_col is not None and isinstance(row[actual_color_col], str):
                entry["color"] = row[actual_color_col]
            result.append(entry)

        logger.debug(f"Transformed {len(result)} line data points")
        return result
