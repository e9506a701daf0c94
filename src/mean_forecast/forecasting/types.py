"""Shared types for the mean forecasting model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Tuple, Union

import numpy as np
import pandas as pd
from scipy import stats

from mean_forecast.exceptions import InvalidInputError
from mean_forecast.forecasting.config import DEFAULT_LEVELS


def _level_bounds(level: float) -> Tuple[float, float]:
    if not 0 < level < 100:
        raise InvalidInputError(f"Interval level must be between 0 and 100, got {level}")
    tail = (100 - level) / 200
    return tail, 1 - tail


@dataclass(frozen=True, eq=False)
class FittedModel:
    """Fitted state of a mean model.

    Created once by MeanModel.train() and read-only afterwards. Forecasting,
    simulation and interpolation all take a FittedModel and never modify it.

    Attributes:
        estimate: Location parameter used as the point forecast. For a
            rolling window this is the last (unlagged) window mean.
        std_error: Standard error of estimate.
        statistic: t statistic of estimate against zero.
        p_value: Two-sided p-value of statistic with n - 1 degrees of freedom.
        fitted: One-step-ahead in-sample predictions, aligned to the training
            index (NaN where undefined).
        residuals: Observation minus fitted value, NaN where either is missing.
        sigma2: Sample variance of the non-missing residuals.
        window_size: Rolling window size, or None for the full-sample mean.
        n: Number of non-missing training observations.
        series_name: Name of the measured variable, if known.

    Note:
        fitted and residuals are returned as copies by the accessor methods
        so callers cannot mutate the stored state.
    """

    estimate: float
    std_error: float
    statistic: float
    p_value: float
    fitted: pd.Series
    residuals: pd.Series
    sigma2: float
    window_size: int | None
    n: int
    series_name: str | None = None

    @property
    def sigma(self) -> float:
        return float(np.sqrt(self.sigma2))

    @property
    def index(self) -> pd.Index:
        """Index of the training series."""
        return self.fitted.index

    def fitted_values(self) -> pd.Series:
        return self.fitted.copy()

    def residual_values(self) -> pd.Series:
        return self.residuals.copy()

    def glance(self) -> pd.DataFrame:
        """One row summary of the fit: the residual variance."""
        return pd.DataFrame({"sigma2": [self.sigma2]})

    def tidy(self) -> pd.DataFrame:
        """Parameter table with a single row for the mean term."""
        return pd.DataFrame(
            {
                "term": ["mean"],
                "estimate": [self.estimate],
                "std_error": [self.std_error],
                "statistic": [self.statistic],
                "p_value": [self.p_value],
            }
        )

    def model_sum(self) -> str:
        """Short model label, e.g. "MEAN" or "MEAN(7)"."""
        if self.window_size is None:
            return "MEAN"
        return f"MEAN({self.window_size})"

    def report(self) -> str:
        """Human-readable report of the point estimate and residual variance."""
        lines = []
        if self.series_name is not None:
            lines.append(f"Series: {self.series_name}")
        lines.append(f"Model: {self.model_sum()}")
        lines.append("")
        lines.append(f"Mean: {self.estimate:.4f}")
        lines.append(f"sigma^2: {self.sigma2:.4f}")
        return "\n".join(lines)


@dataclass(frozen=True, eq=False)
class NormalDistribution:
    """Normal forecast distribution, one (mean, sd) pair per horizon step."""

    mean: pd.Series
    sd: pd.Series

    kind: ClassVar[str] = "normal"

    @property
    def std(self) -> pd.Series:
        return self.sd

    def quantile(self, p: float) -> pd.Series:
        values = stats.norm.ppf(p, loc=self.mean.to_numpy(), scale=self.sd.to_numpy())
        return pd.Series(values, index=self.mean.index, dtype=float)

    def interval(self, level: float) -> Tuple[pd.Series, pd.Series]:
        """Central prediction interval at `level` percent."""
        lower, upper = _level_bounds(level)
        return self.quantile(lower), self.quantile(upper)


@dataclass(frozen=True, eq=False)
class EmpiricalDistribution:
    """Forecast distribution given by simulated values.

    Attributes:
        samples: Array of shape (steps, times); row i holds every simulated
            value for horizon step i.
        index: Forecast index, one entry per row of samples.
    """

    samples: np.ndarray
    index: pd.Index

    kind: ClassVar[str] = "empirical"

    @property
    def mean(self) -> pd.Series:
        return pd.Series(self.samples.mean(axis=1), index=self.index, dtype=float)

    @property
    def std(self) -> pd.Series:
        return pd.Series(self.samples.std(axis=1, ddof=1), index=self.index, dtype=float)

    def quantile(self, p: float) -> pd.Series:
        return pd.Series(np.quantile(self.samples, p, axis=1), index=self.index, dtype=float)

    def interval(self, level: float) -> Tuple[pd.Series, pd.Series]:
        """Central prediction interval at `level` percent."""
        lower, upper = _level_bounds(level)
        return self.quantile(lower), self.quantile(upper)


ForecastDistribution = Union[NormalDistribution, EmpiricalDistribution]


@dataclass(frozen=True, eq=False)
class MeanForecast:
    """Point forecasts and forecast distribution for one series.

    Attributes:
        point: Point forecast per step (always the fitted estimate).
        std_error: Standard deviation of the forecast distribution per step.
        distribution: NormalDistribution for analytic intervals or
            EmpiricalDistribution for bootstrap intervals.
    """

    point: pd.Series
    std_error: pd.Series
    distribution: ForecastDistribution

    @property
    def kind(self) -> str:
        return self.distribution.kind

    @property
    def steps(self) -> int:
        return len(self.point)

    def to_frame(self, levels: Iterable[float] = DEFAULT_LEVELS) -> pd.DataFrame:
        """Forecast table with point, std_error and lower/upper interval columns.

        Args:
            levels: Interval levels in percent (default: 80 and 95)

        Returns:
            DataFrame indexed by the forecast index
        """
        frame = pd.DataFrame({"point": self.point, "std_error": self.std_error})
        for level in levels:
            lower, upper = self.distribution.interval(level)
            frame[f"lower_{level:g}"] = lower
            frame[f"upper_{level:g}"] = upper
        return frame
