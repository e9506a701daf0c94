"""Example: Forecasting with the mean and rolling-mean models

This example fits the full-sample mean and a 28-day rolling mean to a
synthetic daily series, compares Normal and bootstrap prediction intervals,
simulates a few future paths and fills gaps in the history.
"""

import numpy as np
import pandas as pd

from mean_forecast.forecasting import MeanModel, WindowConfig, residual_diagnostics

rng = np.random.default_rng(2025)

# Daily series with a level shift halfway through and a few missing days
dates = pd.date_range("2025-01-01", periods=120, freq="D")
values = np.concatenate([rng.normal(100.0, 8.0, 60), rng.normal(120.0, 8.0, 60)])
series = pd.Series(values, index=dates, name="demand")
series.iloc[[10, 45, 46, 90]] = np.nan

print("=" * 80)
print("Example 1: Full-sample mean vs. 28-day rolling mean")
print("=" * 80)

for window in (WindowConfig(), WindowConfig(window_size=28)):
    model = MeanModel(window)
    fit = model.train(series)
    print()
    print(fit.report())
    print(fit.tidy().to_string(index=False))

print("\n" + "=" * 80)
print("Example 2: Normal vs. bootstrap intervals (rolling mean)")
print("=" * 80)

model = MeanModel(WindowConfig(window_size=28))
fit = model.train(series)

normal_fc = model.forecast(fit, steps=7)
bootstrap_fc = model.forecast(fit, steps=7, bootstrap=True, times=2000, rng=rng)

print("\nNormal:")
print(normal_fc.to_frame())
print("\nBootstrap:")
print(bootstrap_fc.to_frame())

print("\n" + "=" * 80)
print("Example 3: Simulated paths and residual diagnostics")
print("=" * 80)

for i in range(3):
    path = model.generate(fit, steps=7, bootstrap=True, rng=rng)
    print(f"\nPath {i + 1}: {np.round(path.to_numpy(), 2)}")

print(f"\nResidual diagnostics: {residual_diagnostics(fit)}")

print("\n" + "=" * 80)
print("Example 4: Filling missing days")
print("=" * 80)

filled = model.interpolate(fit, series)
print(filled[series.isna()])
