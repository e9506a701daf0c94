"""Output formatting utilities."""

from mean_forecast.forecasting.formatters.console import (
    format_forecast_for_console,
    format_model_reports,
)

__all__ = ["format_forecast_for_console", "format_model_reports"]
