"""mean_forecast - Mean and rolling-mean time series forecasting.

This package provides a single univariate forecasting model: the mean of the
observed series, optionally restricted to a trailing rolling window.

Module Structure:
    mean_forecast.forecasting: Model, forecasts, simulation and panel API
    mean_forecast.forecasting.models: MeanModel estimator
    mean_forecast.forecasting.simulation: Sample path generation
    mean_forecast.forecasting.diagnostics: Residual tests
    mean_forecast.exceptions: Error hierarchy

Quick Start:
    >>> import pandas as pd
    >>> from mean_forecast.forecasting import ForecastConfig, WindowConfig, run_mean_forecast
    >>>
    >>> df = pd.read_csv("sales.csv")  # columns: store, date, sales
    >>> config = ForecastConfig(
    ...     horizon=14,
    ...     value_column="sales",
    ...     key_column="store",
    ...     window=WindowConfig(window_size=28),
    ... )
    >>> result = run_mean_forecast(df, config)
    >>> print(result.forecast.head())
"""

__version__ = "0.1.0"

from mean_forecast.exceptions import (
    AllMissingError,
    ConfigError,
    DataQualityError,
    InvalidInputError,
    MeanForecastError,
    MultivariateInputError,
)

__all__ = [
    "AllMissingError",
    "ConfigError",
    "DataQualityError",
    "InvalidInputError",
    "MeanForecastError",
    "MultivariateInputError",
    "__version__",
]
