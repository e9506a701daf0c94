"""Tests for MeanModel.forecast() and the forecast distributions."""

import numpy as np
import pandas as pd
import pytest
from scipy import stats

from mean_forecast.exceptions import InvalidInputError
from mean_forecast.forecasting.config import WindowConfig
from mean_forecast.forecasting.models.mean import MeanModel
from mean_forecast.forecasting.types import EmpiricalDistribution, NormalDistribution


def _noisy_series(n: int = 50, seed: int = 3) -> pd.Series:
    rng = np.random.default_rng(seed)
    dates = pd.date_range("2025-01-01", periods=n, freq="D")
    return pd.Series(rng.normal(100.0, 5.0, size=n), index=dates)


def test_point_forecast_is_constant() -> None:
    """Test that every point forecast equals the estimate."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0, 4.0, 5.0]))

    fc = model.forecast(fit, steps=5)

    assert len(fc.point) == 5
    assert fc.point.tolist() == [3.0] * 5
    assert fc.steps == 5


def test_normal_standard_error() -> None:
    """Test se = sigma * sqrt(1 + 1/n) at every step."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0, 4.0, 5.0]))

    fc = model.forecast(fit, steps=4)

    expected = np.sqrt(fit.sigma2) * np.sqrt(1 + 1 / 5)
    assert fc.std_error.tolist() == pytest.approx([expected] * 4)
    assert fc.kind == "normal"
    assert isinstance(fc.distribution, NormalDistribution)
    assert fc.distribution.std.tolist() == pytest.approx([expected] * 4)


def test_normal_standard_error_counts_full_sample_length() -> None:
    """Test that n includes lag-induced and missing entries of the fit."""
    model = MeanModel(WindowConfig(window_size=2))
    fit = model.train(pd.Series([2.0, 4.0, 6.0, np.nan, 10.0]))

    fc = model.forecast(fit, steps=2)

    # sigma2 is 1 and the fitted table has 5 rows
    assert fc.std_error.tolist() == pytest.approx([np.sqrt(1.2)] * 2)
    assert fc.point.tolist() == [10.0, 10.0]


def test_normal_intervals() -> None:
    """Test that Normal intervals are symmetric around the point forecast."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0, 4.0, 5.0]))
    fc = model.forecast(fit, steps=3)

    lower, upper = fc.distribution.interval(95)
    z = stats.norm.ppf(0.975)
    se = fc.std_error.iloc[0]

    assert lower.tolist() == pytest.approx([3.0 - z * se] * 3)
    assert upper.tolist() == pytest.approx([3.0 + z * se] * 3)
    assert fc.distribution.quantile(0.5).tolist() == pytest.approx([3.0] * 3)


def test_forecast_index_continues_dates() -> None:
    """Test that the forecast index follows a daily training index."""
    model = MeanModel()
    fit = model.train(_noisy_series(n=10))

    fc = model.forecast(fit, steps=3)

    expected = pd.date_range("2025-01-11", periods=3, freq="D")
    assert fc.point.index.equals(expected)
    assert fc.std_error.index.equals(expected)


def test_forecast_index_continues_integers() -> None:
    """Test that a RangeIndex continues counting."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0]))

    fc = model.forecast(fit, steps=2)

    assert fc.point.index.tolist() == [3, 4]


def test_forecast_explicit_index() -> None:
    """Test forecasting onto a caller-supplied index."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0]))
    index = pd.Index(["a", "b"])

    fc = model.forecast(fit, steps=2, index=index)
    assert fc.point.index.equals(index)

    with pytest.raises(InvalidInputError, match="expected 3"):
        model.forecast(fit, steps=3, index=index)


def test_forecast_invalid_arguments() -> None:
    """Test that non-positive horizons and too few simulations are rejected."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0]))

    with pytest.raises(InvalidInputError, match="steps"):
        model.forecast(fit, steps=0)

    with pytest.raises(InvalidInputError, match="times"):
        model.forecast(fit, steps=2, bootstrap=True, times=1)


def test_bootstrap_forecast_distribution() -> None:
    """Test the empirical distribution built from simulated paths."""
    model = MeanModel()
    fit = model.train(_noisy_series())

    fc = model.forecast(fit, steps=4, bootstrap=True, times=200, rng=np.random.default_rng(1))

    assert fc.kind == "empirical"
    assert isinstance(fc.distribution, EmpiricalDistribution)
    assert fc.distribution.samples.shape == (4, 200)
    # Point forecasts stay at the estimate even in bootstrap mode
    assert fc.point.tolist() == pytest.approx([fit.estimate] * 4)
    assert fc.std_error.tolist() == pytest.approx(fc.distribution.std.tolist())


def test_bootstrap_standard_error_is_positive_and_stable() -> None:
    """Test bootstrap widths across seeds on a 50 observation series."""
    model = MeanModel()
    fit = model.train(_noisy_series(n=50))
    sigma = np.sqrt(fit.sigma2)

    for seed in (11, 22, 33):
        fc = model.forecast(
            fit, steps=6, bootstrap=True, times=1000, rng=np.random.default_rng(seed)
        )
        assert (fc.std_error > 0).all()
        # Resampled centred residuals have roughly the residual standard deviation
        relative = (fc.std_error - sigma).abs() / sigma
        assert (relative < 0.15).all()


def test_bootstrap_reproducible_with_seed() -> None:
    """Test that the same seed yields the same simulations."""
    model = MeanModel(WindowConfig(window_size=5))
    fit = model.train(_noisy_series())

    fc1 = model.forecast(fit, steps=3, bootstrap=True, times=50, rng=np.random.default_rng(9))
    fc2 = model.forecast(fit, steps=3, bootstrap=True, times=50, rng=np.random.default_rng(9))

    np.testing.assert_array_equal(fc1.distribution.samples, fc2.distribution.samples)


def test_bootstrap_intervals_contain_point() -> None:
    """Test that empirical intervals bracket the estimate."""
    model = MeanModel()
    fit = model.train(_noisy_series())
    fc = model.forecast(fit, steps=3, bootstrap=True, times=500, rng=np.random.default_rng(2))

    lower, upper = fc.distribution.interval(80)

    assert (lower < fc.point).all()
    assert (upper > fc.point).all()
    assert fc.distribution.mean.tolist() == pytest.approx([fit.estimate] * 3, abs=1.0)


def test_to_frame_columns() -> None:
    """Test the forecast table layout."""
    model = MeanModel()
    fit = model.train(pd.Series([1.0, 2.0, 3.0, 4.0, 5.0]))

    frame = model.forecast(fit, steps=2).to_frame(levels=(80, 97.5))

    assert list(frame.columns) == [
        "point",
        "std_error",
        "lower_80",
        "upper_80",
        "lower_97.5",
        "upper_97.5",
    ]
    assert len(frame) == 2
    assert (frame["lower_97.5"] < frame["lower_80"]).all()


def test_interval_level_validation() -> None:
    """Test that interval levels outside (0, 100) are rejected."""
    model = MeanModel()
    fc = model.forecast(model.train(pd.Series([1.0, 2.0, 3.0])), steps=1)

    with pytest.raises(InvalidInputError, match="between 0 and 100"):
        fc.distribution.interval(100)


def test_forecast_does_not_mutate_fit() -> None:
    """Test that forecasting leaves the fitted model untouched."""
    model = MeanModel()
    fit = model.train(_noisy_series(n=20))
    before = fit.residuals.copy()

    model.forecast(fit, steps=3, bootstrap=True, times=20, rng=np.random.default_rng(0))

    pd.testing.assert_series_equal(fit.residuals, before)


def test_zero_variance_gives_zero_width_intervals() -> None:
    """Test that a constant series yields degenerate rather than failing intervals."""
    model = MeanModel()
    fit = model.train(pd.Series([2.0, 2.0, 2.0]))

    fc = model.forecast(fit, steps=2)

    assert fc.std_error.tolist() == [0.0, 0.0]
