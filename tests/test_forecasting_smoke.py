"""Smoke tests for the panel forecasting API."""

import numpy as np
import pandas as pd
import pytest

from mean_forecast.exceptions import DataQualityError
from mean_forecast.forecasting import (
    ForecastConfig,
    ForecastResult,
    WindowConfig,
    run_mean_forecast,
)


def _panel(num_days: int = 30) -> pd.DataFrame:
    rng = np.random.default_rng(5)
    dates = pd.date_range("2025-01-01", periods=num_days, freq="D")
    return pd.DataFrame(
        {
            "store": ["north"] * num_days + ["south"] * num_days,
            "date": list(dates) * 2,
            "sales": np.concatenate(
                [rng.normal(100.0, 5.0, num_days), rng.normal(40.0, 2.0, num_days)]
            ),
        }
    )


def test_forecasting_smoke() -> None:
    """Test that one model per key is fitted and forecast."""
    config = ForecastConfig(horizon=3, value_column="sales", key_column="store")

    result = run_mean_forecast(_panel(), config=config)

    assert isinstance(result, ForecastResult)
    assert len(result.forecast) == 6
    assert set(result.forecast["key"]) == {"north", "south"}
    for col in ["key", "date", "point", "std_error", "lower_80", "upper_80", "lower_95", "upper_95"]:
        assert col in result.forecast.columns

    assert set(result.models) == {"north", "south"}
    north = result.forecast[result.forecast["key"] == "north"]
    assert north["point"].tolist() == pytest.approx([result.models["north"].estimate] * 3)
    assert north["date"].iloc[0] == pd.Timestamp("2025-01-31")

    assert result.metadata["horizon"] == 3
    assert result.metadata["successful_forecasts"] == 2
    assert result.metadata["failed_forecasts"] == 0


def test_forecasting_single_series_with_window() -> None:
    """Test a DataFrame without a key column as one series."""
    df = _panel()
    df = df[df["store"] == "north"].drop(columns="store")
    config = ForecastConfig(
        horizon=2, value_column="sales", window=WindowConfig(window_size=7)
    )

    result = run_mean_forecast(df, config=config)

    assert list(result.models) == ["sales"]
    expected = df["sales"].iloc[-7:].mean()
    assert result.forecast["point"].tolist() == pytest.approx([expected] * 2)
    assert result.metadata["window_size"] == 7


def test_forecasting_bootstrap_reproducible() -> None:
    """Test that a seeded bootstrap run is reproducible."""
    config = ForecastConfig(
        horizon=2,
        value_column="sales",
        key_column="store",
        bootstrap=True,
        times=200,
        seed=123,
    )

    first = run_mean_forecast(_panel(), config=config)
    second = run_mean_forecast(_panel(), config=config)

    pd.testing.assert_frame_equal(first.forecast, second.forecast)
    assert first.forecasts["south"].kind == "empirical"


def test_forecasting_skips_unfittable_series() -> None:
    """Test that an all-missing series is skipped and reported."""
    df = _panel()
    df.loc[df["store"] == "south", "sales"] = np.nan
    config = ForecastConfig(horizon=2, value_column="sales", key_column="store")

    result = run_mean_forecast(df, config=config)

    assert list(result.models) == ["north"]
    assert result.metadata["failed_keys"] == ["south"]


def test_forecasting_no_forecasts_raises() -> None:
    """Test that a run with no successful series fails."""
    df = pd.DataFrame({"date": pd.date_range("2025-01-01", periods=3), "value": [np.nan] * 3})

    with pytest.raises(DataQualityError, match="No forecasts were generated"):
        run_mean_forecast(df)


def test_forecasting_missing_columns_raises() -> None:
    """Test that missing required columns are reported."""
    df = pd.DataFrame({"date": pd.date_range("2025-01-01", periods=3), "y": [1.0, 2.0, 3.0]})

    with pytest.raises(DataQualityError, match="Missing required columns"):
        run_mean_forecast(df, ForecastConfig(value_column="sales"))
