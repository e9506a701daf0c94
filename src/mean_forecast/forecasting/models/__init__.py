"""Forecasting models module.

A model class carries configuration only. train() returns an immutable
FittedModel, and forecast(), generate() and interpolate() take that fitted
state explicitly, so one model instance can serve many series:

    >>> model = MeanModel(window=7)
    >>> fit = model.train(series)
    >>> fc = model.forecast(fit, steps=14, bootstrap=True, rng=np.random.default_rng(1))
    >>> path = model.generate(fit, steps=14)
    >>> filled = model.interpolate(fit, series_with_gaps)
"""

from mean_forecast.forecasting.models.base import ForecastModel
from mean_forecast.forecasting.models.mean import MeanModel, fit_mean

__all__ = ["ForecastModel", "MeanModel", "fit_mean"]
