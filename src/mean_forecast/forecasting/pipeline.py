"""CLI wrapper for the mean forecasting pipeline.

This module provides a command-line interface for running forecasts.
All core forecasting logic is in mean_forecast.forecasting.api.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from mean_forecast.exceptions import MeanForecastError
from mean_forecast.forecasting.api import ForecastConfig, run_mean_forecast
from mean_forecast.forecasting.config import DEFAULT_HORIZON, DEFAULT_TIMES, WindowConfig
from mean_forecast.forecasting.data.loaders import load_series_csv
from mean_forecast.forecasting.formatters.console import (
    format_forecast_for_console,
    format_model_reports,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Forecast time series with the mean model.")
    parser.add_argument("--file", type=str, required=True, help="Path to a CSV file.")
    parser.add_argument(
        "--value-column",
        type=str,
        default="value",
        help="Column holding the measured variable (default: value)",
    )
    parser.add_argument(
        "--date-column",
        type=str,
        default="date",
        help="Column holding observation dates (default: date). Use '' for row order.",
    )
    parser.add_argument(
        "--key-column",
        type=str,
        default=None,
        help="Column identifying independent series (default: single series)",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=None,
        help="Rolling window size (default: full-sample mean)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=DEFAULT_HORIZON,
        help=f"Number of periods to forecast ahead (default: {DEFAULT_HORIZON})",
    )
    parser.add_argument(
        "--bootstrap",
        action="store_true",
        help="Use bootstrapped residuals for prediction intervals",
    )
    parser.add_argument(
        "--times",
        type=int,
        default=DEFAULT_TIMES,
        help=f"Number of simulated paths for bootstrap intervals (default: {DEFAULT_TIMES})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point for the forecasting pipeline.

    Parses command-line arguments, loads the CSV, fits one model per series
    and prints the model reports and forecast table.
    """
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    date_column = args.date_column or None
    sort_columns = [args.key_column] if args.key_column else None

    try:
        df = load_series_csv(Path(args.file), date_column=date_column, sort_columns=sort_columns)
        logger.info(f"Loaded {len(df)} rows from {args.file}")

        config = ForecastConfig(
            horizon=args.horizon,
            value_column=args.value_column,
            date_column=date_column,
            key_column=args.key_column,
            window=WindowConfig(window_size=args.window),
            bootstrap=args.bootstrap,
            times=args.times,
            seed=args.seed,
        )
        result = run_mean_forecast(df, config=config)
    except FileNotFoundError as e:
        raise SystemExit(f"ERROR: {e}") from e
    except MeanForecastError as e:
        raise SystemExit(f"ERROR: Forecast failed. {e}") from e

    print(format_model_reports(result))
    print("")
    print(format_forecast_for_console(result))


if __name__ == "__main__":
    main()
