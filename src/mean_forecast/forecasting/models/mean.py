"""Mean (and rolling-mean) forecasting model.

The model forecasts every future period with a single location estimate:
the sample mean, or the mean of the most recent `window_size` observations.
In-sample fitted values are one-step-ahead predictions, so residuals are
genuine forecast errors and their variance drives the prediction intervals.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import numpy as np
import pandas as pd
from scipy import stats

from mean_forecast.exceptions import AllMissingError, InvalidInputError
from mean_forecast.forecasting.config import DEFAULT_TIMES, WindowConfig
from mean_forecast.forecasting.data.preparation import (
    extract_measured_series,
    future_index,
    lagged_rolling_mean,
    rolling_mean,
)
from mean_forecast.forecasting.models.base import ForecastModel
from mean_forecast.forecasting.simulation import simulate_path, simulate_paths
from mean_forecast.forecasting.types import (
    EmpiricalDistribution,
    FittedModel,
    MeanForecast,
    NormalDistribution,
)

logger = logging.getLogger(__name__)

# Column of a new_data frame holding caller-supplied innovations
INNOVATION_COLUMN = "innov"


def _as_window(window: Union[WindowConfig, int, None]) -> WindowConfig:
    if isinstance(window, WindowConfig):
        return window
    return WindowConfig.from_size(window)


class MeanModel(ForecastModel):
    """Mean model with an optional trailing rolling window.

    Without a window the forecast is the mean of all non-missing observations.
    With window_size=w the forecast is the mean of the last w positions
    (missing values ignored), and each fitted value is the mean of the w
    positions before it.

    Example:
        >>> model = MeanModel(WindowConfig(window_size=7))
        >>> fit = model.train(series)
        >>> fc = model.forecast(fit, steps=14)
        >>> fc.to_frame().head()
    """

    def __init__(self, window: Union[WindowConfig, int, None] = None) -> None:
        """Initialize the mean model.

        Args:
            window: WindowConfig, a window size, or None for the full-sample mean
        """
        self.window = _as_window(window)

    def train(
        self,
        series: Any,
        window: Union[WindowConfig, int, None] = None,
        column: Optional[str] = None,
        **_kwargs: Any,
    ) -> FittedModel:
        """Estimate the mean model from a series.

        Args:
            series: Series, single-column DataFrame or 1-D array of observations.
                Missing values (NaN) are allowed.
            window: Overrides the model's window configuration for this fit
            column: Column to use when series is a multi-column DataFrame
            **_kwargs: Additional parameters (unused, for interface compatibility)

        Returns:
            FittedModel with estimate, standard error, fitted values and residuals

        Raises:
            MultivariateInputError: If more than one measured variable is supplied
            AllMissingError: If every observation is missing
        """
        window_cfg = self.window if window is None else _as_window(window)
        y = extract_measured_series(series, column)

        if y.isna().all():
            raise AllMissingError(
                "All observations are missing, a model cannot be estimated without data."
            )

        n_obs = int(y.notna().sum())
        window_size = window_cfg.window_size

        if window_size is None:
            estimate = float(y.mean())
            fitted = pd.Series(estimate, index=y.index, dtype=float)
        else:
            # The forecast uses the latest window; fitted values lag by one step
            means = rolling_mean(y, window_size)
            estimate = float(means.iloc[-1])
            fitted = means.shift(1)

        residuals = y - fitted
        sigma = float(residuals.std(ddof=1))

        # Degenerate fits (zero variance, one observation) yield inf/NaN
        with np.errstate(divide="ignore", invalid="ignore"):
            std_error = float(np.float64(sigma) / np.sqrt(n_obs))
            statistic = float(np.float64(estimate) / np.float64(std_error))
        p_value = float(2 * stats.t.sf(abs(statistic), df=n_obs - 1))

        if np.isnan(estimate):
            logger.warning(
                f"Last window of {window_size} observations is entirely missing; "
                "estimate is undefined"
            )

        fit = FittedModel(
            estimate=estimate,
            std_error=std_error,
            statistic=statistic,
            p_value=p_value,
            fitted=fitted.rename("fitted"),
            residuals=residuals.rename("residuals"),
            sigma2=sigma**2,
            window_size=window_size,
            n=n_obs,
            series_name=None if y.name is None else str(y.name),
        )
        logger.debug(
            f"Fitted {fit.model_sum()} on {n_obs} observations: "
            f"estimate={estimate:.4f}, sigma2={fit.sigma2:.4f}"
        )
        return fit

    def forecast(
        self,
        model: FittedModel,
        steps: int,
        bootstrap: bool = False,
        times: int = DEFAULT_TIMES,
        rng: Optional[np.random.Generator] = None,
        index: Optional[pd.Index] = None,
        **_kwargs: Any,
    ) -> MeanForecast:
        """Generate point forecasts and a forecast distribution.

        The point forecast is the fitted estimate at every step. Analytic
        intervals are Normal with sd = sigma * sqrt(1 + 1/n), n being the
        training sample length. Bootstrap intervals come from `times`
        simulated paths with resampled residuals.

        Args:
            model: Fitted model (from train())
            steps: Number of periods to forecast ahead
            bootstrap: Use simulated paths instead of the Normal approximation
            times: Number of simulated paths when bootstrap is True
            rng: Random generator for bootstrap draws
            index: Optional forecast index. If None, continues the training index.

        Returns:
            MeanForecast with point, std_error and distribution

        Raises:
            InvalidInputError: If steps < 1, times < 2, or index length != steps
        """
        if steps < 1:
            raise InvalidInputError(f"steps must be >= 1, got {steps}")
        if index is None:
            index = future_index(model.index, steps)
        elif len(index) != steps:
            raise InvalidInputError(f"index has {len(index)} entries, expected {steps}")

        point = pd.Series(model.estimate, index=index, dtype=float, name="point")

        if bootstrap:
            if times < 2:
                raise InvalidInputError(f"times must be >= 2 for bootstrap intervals, got {times}")
            samples = simulate_paths(model, index, times, bootstrap=True, rng=rng)
            distribution = EmpiricalDistribution(samples=samples, index=index)
            std_error = distribution.std
        else:
            n = len(model.fitted)
            se = model.sigma * np.sqrt(1 + 1 / n)
            std_error = pd.Series(se, index=index, dtype=float)
            distribution = NormalDistribution(mean=point.copy(), sd=std_error.copy())

        return MeanForecast(
            point=point,
            std_error=std_error.rename("std_error"),
            distribution=distribution,
        )

    def generate(
        self,
        model: FittedModel,
        new_index: Any = None,
        steps: Optional[int] = None,
        bootstrap: bool = False,
        innovations: Optional[np.ndarray] = None,
        rng: Optional[np.random.Generator] = None,
        **_kwargs: Any,
    ) -> pd.Series:
        """Simulate one future sample path.

        Args:
            model: Fitted model (from train())
            new_index: Index of the simulated period, or a Series/DataFrame
                whose index is used. A DataFrame with an "innov" column
                supplies the innovations.
            steps: Path length when new_index is None (continues the
                training index)
            bootstrap: Resample centred residuals instead of Gaussian draws
            innovations: Innovations used as-is instead of random draws
            rng: Random generator

        Returns:
            Series named "sim"

        Raises:
            InvalidInputError: If neither new_index, steps nor innovations
                determine the path length
        """
        if isinstance(new_index, pd.DataFrame):
            if innovations is None and INNOVATION_COLUMN in new_index.columns:
                innovations = new_index[INNOVATION_COLUMN].to_numpy(dtype=float)
            index = new_index.index
        elif isinstance(new_index, pd.Series):
            index = new_index.index
        elif new_index is not None:
            index = pd.Index(new_index)
        else:
            if steps is None and innovations is not None:
                steps = len(innovations)
            if steps is None:
                raise InvalidInputError("Either new_index or steps must be given")
            index = future_index(model.index, steps)

        return simulate_path(
            model, index, bootstrap=bootstrap, innovations=innovations, rng=rng
        )

    def interpolate(
        self,
        model: FittedModel,
        new_data: Any,
        column: Optional[str] = None,
        **_kwargs: Any,
    ) -> Any:
        """Fill missing values of a series with the fitted structure.

        Without a window, missing values become the fitted estimate. With a
        window, each missing value becomes the one-step-ahead rolling mean of
        the new series at that position. Where that mean is undefined (a
        leading missing value, or a window with no observations) the fitted
        estimate is used instead.

        Args:
            model: Fitted model (from train())
            new_data: Series or DataFrame holding the measured variable
            column: Column to fill when new_data is a multi-column DataFrame

        Returns:
            Copy of new_data (same type) with missing values filled
        """
        y = extract_measured_series(new_data, column)
        missing = y.isna()

        if model.window_size is None:
            fills = pd.Series(model.estimate, index=y.index, dtype=float)
        else:
            fills = lagged_rolling_mean(y, model.window_size)
            undefined = missing & fills.isna()
            if undefined.any():
                logger.debug(
                    f"{int(undefined.sum())} missing values have no prior window, "
                    "using the fitted estimate"
                )
                fills = fills.fillna(model.estimate)

        filled = y.where(~missing, fills)
        logger.debug(f"Interpolated {int(missing.sum())} of {len(y)} values")

        if isinstance(new_data, pd.DataFrame):
            out = new_data.copy()
            target = column if column is not None else new_data.columns[0]
            out[target] = filled.to_numpy()
            return out
        if isinstance(new_data, pd.Series):
            return filled.rename(new_data.name)
        return filled


def fit_mean(
    series: Any,
    window_size: Optional[int] = None,
    column: Optional[str] = None,
) -> FittedModel:
    """Fit a mean model in one call.

    Args:
        series: Series, single-column DataFrame or 1-D array of observations
        window_size: Rolling window size, or None for the full-sample mean
        column: Column to use when series is a multi-column DataFrame

    Returns:
        FittedModel
    """
    return MeanModel(WindowConfig.from_size(window_size)).train(series, column=column)
