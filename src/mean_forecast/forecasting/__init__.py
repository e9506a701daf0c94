"""Mean model forecasting module.

This module estimates the mean (or trailing rolling mean) of a series,
forecasts it with Normal or bootstrap intervals, simulates future paths and
fills missing values.

Example:
    >>> import numpy as np
    >>> import pandas as pd
    >>> from mean_forecast.forecasting import MeanModel, WindowConfig
    >>>
    >>> y = pd.Series([1.0, 2.0, 3.0, 4.0, 5.0])
    >>> model = MeanModel(WindowConfig())
    >>> fit = model.train(y)
    >>> fit.estimate, fit.sigma2
    (3.0, 2.5)
    >>>
    >>> fc = model.forecast(fit, steps=3)
    >>> print(fc.to_frame())
    >>>
    >>> # Bootstrap intervals, reproducible with a seeded generator
    >>> fc = model.forecast(fit, steps=3, bootstrap=True, times=1000,
    ...                     rng=np.random.default_rng(42))

"""

from mean_forecast.forecasting.api import ForecastConfig, ForecastResult, run_mean_forecast
from mean_forecast.forecasting.config import WindowConfig
from mean_forecast.forecasting.diagnostics import residual_diagnostics
from mean_forecast.forecasting.models import MeanModel, fit_mean
from mean_forecast.forecasting.types import (
    EmpiricalDistribution,
    FittedModel,
    MeanForecast,
    NormalDistribution,
)

__all__ = [
    "EmpiricalDistribution",
    "FittedModel",
    "ForecastConfig",
    "ForecastResult",
    "MeanForecast",
    "MeanModel",
    "NormalDistribution",
    "WindowConfig",
    "fit_mean",
    "residual_diagnostics",
    "run_mean_forecast",
]
