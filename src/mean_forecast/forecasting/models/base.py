"""Base model interface for forecasting models.

This module defines the abstract base class a forecasting model implements:
training produces an immutable fitted state, and every other operation takes
that state explicitly instead of reading it from the model instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pandas as pd

from mean_forecast.forecasting.types import FittedModel, MeanForecast


class ForecastModel(ABC):
    """Abstract base class for forecasting models.

    Models implement train(), forecast(), generate() and interpolate().
    The model instance only carries configuration, so one instance can fit
    many series.
    """

    @abstractmethod
    def train(self, series: Any, **kwargs: Any) -> FittedModel:
        """Fit the model to a univariate series.

        Args:
            series: Series (or single-column DataFrame) of observations
            **kwargs: Model-specific options

        Returns:
            Fitted model state

        Raises:
            InvalidInputError: If the model cannot be estimated from the data
        """
        pass

    @abstractmethod
    def forecast(self, model: FittedModel, steps: int, **kwargs: Any) -> MeanForecast:
        """Forecast `steps` periods ahead from a fitted state.

        Args:
            model: Fitted model (from train())
            steps: Number of periods to forecast ahead
            **kwargs: Model-specific forecast options

        Returns:
            Point forecasts and forecast distribution
        """
        pass

    @abstractmethod
    def generate(self, model: FittedModel, **kwargs: Any) -> pd.Series:
        """Simulate a future sample path from a fitted state."""
        pass

    @abstractmethod
    def interpolate(self, model: FittedModel, new_data: Any, **kwargs: Any) -> Any:
        """Fill missing values of a series using a fitted state."""
        pass
