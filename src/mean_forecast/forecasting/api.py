"""Public API for forecasting panels of series with the mean model.

This module fits one mean model per series key of an in-memory DataFrame
and collects the forecasts into a single table, with no side effects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from mean_forecast.exceptions import DataQualityError, InvalidInputError
from mean_forecast.forecasting.config import (
    DEFAULT_HORIZON,
    DEFAULT_LEVELS,
    DEFAULT_TIMES,
    WindowConfig,
)
from mean_forecast.forecasting.models.mean import MeanModel
from mean_forecast.forecasting.types import FittedModel, MeanForecast

logger = logging.getLogger(__name__)


@dataclass
class ForecastConfig:
    """Configuration for panel forecasting.

    Attributes:
        horizon: Number of periods ahead to forecast (default: 10).
        value_column: Column holding the measured variable.
        date_column: Optional column used as the time index of each series.
            If None, rows are taken in their current order.
        key_column: Optional column identifying independent series. If None,
            the whole DataFrame is a single series.
        window: Rolling window configuration (default: full-sample mean).
        bootstrap: Use bootstrap instead of Normal prediction intervals.
        times: Number of simulated paths for bootstrap intervals.
        levels: Prediction interval levels in percent.
        seed: Optional seed for the random generator used by bootstrap draws.
    """

    horizon: int = DEFAULT_HORIZON
    value_column: str = "value"
    date_column: Optional[str] = "date"
    key_column: Optional[str] = None
    window: WindowConfig = field(default_factory=WindowConfig)
    bootstrap: bool = False
    times: int = DEFAULT_TIMES
    levels: Tuple[float, ...] = DEFAULT_LEVELS
    seed: Optional[int] = None


@dataclass
class ForecastResult:
    """Result of the panel forecasting pipeline.

    Attributes:
        forecast: DataFrame with columns key, date, point, std_error and
            lower_<level>/upper_<level> for each configured level
        models: Fitted model per series key
        forecasts: MeanForecast per series key, with the full distribution
        metadata: Dictionary with run information (keys, horizon, counts, etc.)
    """

    forecast: pd.DataFrame
    models: Dict[str, FittedModel] = field(default_factory=dict)
    forecasts: Dict[str, MeanForecast] = field(default_factory=dict)
    metadata: Dict[str, object] = field(default_factory=dict)


def _build_series(df: pd.DataFrame, config: ForecastConfig) -> pd.Series:
    """Select the measured variable, indexed by date when configured."""
    if config.date_column is None:
        series = df[config.value_column].reset_index(drop=True)
    else:
        series = df.set_index(config.date_column)[config.value_column].sort_index()
        series.index = pd.DatetimeIndex(series.index)
    return series


def _forecast_frame(key: str, forecast: MeanForecast, levels: Tuple[float, ...]) -> pd.DataFrame:
    frame = forecast.to_frame(levels=levels)
    frame.index.name = "date"
    frame = frame.reset_index()
    frame.insert(0, "key", key)
    return frame


def run_mean_forecast(
    df: pd.DataFrame,
    config: Optional[ForecastConfig] = None,
) -> ForecastResult:
    """Fit a mean model per series and forecast each one.

    This function:
    - does NOT read or write any files,
    - does NOT parse CLI arguments or read environment variables,
    - MAY log progress via the logging module.

    Args:
        df: Long-format observations. Expected columns include at least
            config.value_column, plus config.date_column and
            config.key_column when those are set.
        config: ForecastConfig for horizon, columns, window and intervals.
            If None, uses defaults.

    Returns:
        ForecastResult containing:
        - forecast: one row per key and forecast date
        - models: fitted models per key
        - forecasts: MeanForecast objects per key
        - metadata: additional information about the run

    Raises:
        DataQualityError: If required columns are missing.
        DataQualityError: If no forecasts are generated.
    """
    if config is None:
        config = ForecastConfig()

    required_columns = [config.value_column] + [
        col for col in (config.date_column, config.key_column) if col is not None
    ]
    missing_columns = [col for col in required_columns if col not in df.columns]
    if missing_columns:
        raise DataQualityError(
            f"Missing required columns in df: {missing_columns}. Required: {required_columns}"
        )

    if config.key_column is None:
        groups: List[Tuple[str, pd.DataFrame]] = [(config.value_column, df)]
    else:
        groups = [(str(key), group) for key, group in df.groupby(config.key_column, sort=True)]

    logger.info(
        f"Running {len(groups)} mean forecast(s), horizon={config.horizon}, "
        f"window={config.window.window_size}, bootstrap={config.bootstrap}"
    )

    model = MeanModel(config.window)
    rng = np.random.default_rng(config.seed)

    models: Dict[str, FittedModel] = {}
    forecasts: Dict[str, MeanForecast] = {}
    frames: List[pd.DataFrame] = []
    failed_keys: List[str] = []

    for key, group in groups:
        series = _build_series(group, config)
        try:
            fit = model.train(series)
            forecast = model.forecast(
                fit,
                steps=config.horizon,
                bootstrap=config.bootstrap,
                times=config.times,
                rng=rng,
            )
        except InvalidInputError as e:
            logger.warning(f"Skipping series '{key}': {e}")
            failed_keys.append(key)
            continue

        logger.debug(f"{key}: estimate={fit.estimate:.4f}, sigma2={fit.sigma2:.4f}")
        models[key] = fit
        forecasts[key] = forecast
        frames.append(_forecast_frame(key, forecast, config.levels))

    logger.info(f"Forecast summary: {len(models)} successful, {len(failed_keys)} failed")

    if not frames:
        raise DataQualityError(
            "No forecasts were generated. Check data availability and missing values."
        )

    forecast_df = pd.concat(frames, ignore_index=True)

    return ForecastResult(
        forecast=forecast_df,
        models=models,
        forecasts=forecasts,
        metadata={
            "keys": list(models),
            "failed_keys": failed_keys,
            "horizon": config.horizon,
            "window_size": config.window.window_size,
            "bootstrap": config.bootstrap,
            "successful_forecasts": len(models),
            "failed_forecasts": len(failed_keys),
        },
    )
