"""Data loading and preparation utilities."""

from mean_forecast.forecasting.data.loaders import load_series_csv
from mean_forecast.forecasting.data.preparation import (
    extract_measured_series,
    future_index,
    lagged_rolling_mean,
    rolling_mean,
)

__all__ = [
    "extract_measured_series",
    "future_index",
    "lagged_rolling_mean",
    "load_series_csv",
    "rolling_mean",
]
