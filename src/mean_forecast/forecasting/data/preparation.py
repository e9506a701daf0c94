"""Data preparation utilities for the mean model.

This module turns user input into the float series the model works on and
holds the trailing rolling-mean computation shared by estimation and
interpolation, so both always agree on what a fitted value is.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from pandas.tseries.frequencies import to_offset

from mean_forecast.exceptions import InvalidInputError, MultivariateInputError


def extract_measured_series(data: Any, column: str | None = None) -> pd.Series:
    """Read the single measured variable from a series-like input.

    Args:
        data: A pd.Series, a pd.DataFrame, or any 1-D array-like of numbers.
            Missing values may be NaN or None.
        column: Column to read when data is a DataFrame. If None, the
            DataFrame must have exactly one column.

    Returns:
        Float Series with the original index (a RangeIndex for plain arrays).

    Raises:
        MultivariateInputError: If more than one measured variable is supplied.
        InvalidInputError: If the requested column does not exist or values
            are not numeric.
    """
    if isinstance(data, pd.DataFrame):
        if column is not None:
            if column not in data.columns:
                raise InvalidInputError(
                    f"Column '{column}' not found. Available: {list(data.columns)}"
                )
            series = data[column]
        elif data.shape[1] == 1:
            series = data.iloc[:, 0]
        else:
            raise MultivariateInputError(
                f"Only univariate responses are supported by MEAN, got columns {list(data.columns)}"
            )
    elif isinstance(data, pd.Series):
        series = data
    else:
        values = np.asarray(data, dtype=object)
        if values.ndim > 1:
            if values.ndim == 2 and values.shape[1] == 1:
                values = values[:, 0]
            else:
                raise MultivariateInputError(
                    f"Only univariate responses are supported by MEAN, got shape {values.shape}"
                )
        series = pd.Series(values)

    try:
        return pd.to_numeric(series).astype(float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Series values must be numeric: {e}") from e


def rolling_mean(series: pd.Series, window_size: int) -> pd.Series:
    """Trailing rolling mean with partial windows and missing values ignored.

    The value at position t is the mean of the non-missing observations among
    the last window_size positions ending at t. Early positions use whatever
    history exists. A window made only of missing values yields NaN.

    Args:
        series: Float series, possibly with NaN values
        window_size: Number of positions in the trailing window (>= 1)

    Returns:
        Series aligned to the input index
    """
    return series.rolling(window=window_size, min_periods=1).mean()


def lagged_rolling_mean(series: pd.Series, window_size: int) -> pd.Series:
    """One-step-ahead rolling mean: position t only uses data before t.

    Args:
        series: Float series, possibly with NaN values
        window_size: Number of positions in the trailing window (>= 1)

    Returns:
        Series aligned to the input index, NaN at the first position
    """
    return rolling_mean(series, window_size).shift(1)


def future_index(index: pd.Index, steps: int) -> pd.Index:
    """Build the index for the steps that follow a training index.

    DatetimeIndex inputs continue at their frequency (inferred if not set,
    daily as a last resort). Integer indexes continue counting. Anything else
    falls back to positions after the end of the sample.

    Args:
        index: Index of the training series
        steps: Number of future periods

    Returns:
        Index with `steps` entries
    """
    if isinstance(index, pd.DatetimeIndex) and len(index) > 0:
        freq = index.freq
        if freq is None and len(index) >= 3:
            freq = pd.infer_freq(index)
        if freq is None:
            freq = "D"
        offset = to_offset(freq)
        return pd.date_range(start=index[-1] + offset, periods=steps, freq=offset)

    if len(index) > 0 and pd.api.types.is_integer_dtype(index):
        start = int(index[-1]) + 1
        return pd.RangeIndex(start, start + steps)

    return pd.RangeIndex(len(index), len(index) + steps)
