"""Console output formatting utilities."""

from __future__ import annotations

import pandas as pd

from mean_forecast.forecasting.api import ForecastResult


def _format_date(value: object) -> str:
    if isinstance(value, pd.Timestamp):
        return value.strftime("%Y-%m-%d")
    return str(value)


def format_model_reports(result: ForecastResult) -> str:
    """Build the text report of every fitted model in a forecast result.

    Args:
        result: ForecastResult with fitted models per key

    Returns:
        One report block per key, separated by blank lines
    """
    blocks = []
    for key, model in result.models.items():
        blocks.append(f"[{key}]\n{model.report()}")
    return "\n\n".join(blocks)


def format_forecast_for_console(result: ForecastResult) -> str:
    """Build a human-readable table of point forecasts and intervals.

    Args:
        result: ForecastResult containing the forecast DataFrame

    Returns:
        Human-readable text string for console output
    """
    if result.forecast.empty:
        return "No forecasts available."

    lines = []
    horizon = result.metadata.get("horizon", "?")
    lines.append(f"Mean Model Forecast - Next {horizon} Periods")
    lines.append("=" * 60)
    lines.append("")

    interval_columns = [col for col in result.forecast.columns if col.startswith("lower_")]

    for key, key_forecasts in result.forecast.groupby("key", sort=False):
        lines.append(f"{key}:")
        for _, row in key_forecasts.iterrows():
            parts = [f"{row['point']:,.4f}"]
            for lower_col in interval_columns:
                level = lower_col[len("lower_") :]
                upper = row[f"upper_{level}"]
                parts.append(f"{level}%: [{row[lower_col]:,.4f}, {upper:,.4f}]")
            lines.append(f"  {_format_date(row['date'])}: " + "  ".join(parts))
        lines.append("")  # Blank line between series

    return "\n".join(lines)
