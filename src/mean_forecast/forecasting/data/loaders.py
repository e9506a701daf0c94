"""Data loading utilities for the forecasting pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd


def load_series_csv(
    csv_path: Path,
    date_column: Optional[str] = None,
    sort_columns: Optional[list[str]] = None,
) -> pd.DataFrame:
    """Load time series observations from a CSV file.

    Args:
        csv_path: Path to the CSV file
        date_column: Optional column parsed as datetime. Rows are sorted by it.
        sort_columns: Optional columns to sort by before the date column
            (e.g. a series key column).

    Returns:
        DataFrame with the CSV contents, sorted when a date column is given

    Raises:
        FileNotFoundError: If the CSV file does not exist
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Series data not found at {csv_path}")

    df = pd.read_csv(csv_path)
    if date_column is not None and date_column in df.columns:
        df[date_column] = pd.to_datetime(df[date_column])
        df = df.sort_values((sort_columns or []) + [date_column]).reset_index(drop=True)

    return df
