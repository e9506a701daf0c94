"""Residual diagnostics for fitted mean models."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from statsmodels.stats.diagnostic import acorr_ljungbox
from statsmodels.stats.stattools import jarque_bera

from mean_forecast.forecasting.types import FittedModel

logger = logging.getLogger(__name__)


def residual_diagnostics(model: FittedModel, lags: Optional[int] = None) -> Dict[str, object]:
    """Test the in-sample residuals for autocorrelation and normality.

    A well-specified mean model leaves residuals that look like white noise.
    The Ljung-Box test needs more than 10 residuals and the Jarque-Bera test
    more than 5; otherwise the corresponding p-value is None.

    Args:
        model: Fitted mean model
        lags: Ljung-Box lag (default: min(10, n // 4))

    Returns:
        Dictionary with residual_count, residual_mean, ljung_box_lag,
        ljung_box_pvalue and jarque_bera_pvalue
    """
    residuals = model.residuals.dropna()
    count = len(residuals)

    diagnostics: Dict[str, object] = {
        "residual_count": count,
        "residual_mean": float(residuals.mean()) if count else None,
        "ljung_box_lag": None,
        "ljung_box_pvalue": None,
        "jarque_bera_pvalue": None,
    }

    if count > 10:
        lag = lags if lags is not None else min(10, count // 4)
        lb_df = acorr_ljungbox(residuals.to_numpy(), lags=[lag], return_df=True)
        diagnostics["ljung_box_lag"] = lag
        diagnostics["ljung_box_pvalue"] = float(lb_df["lb_pvalue"].iloc[-1])
    else:
        logger.debug(f"Skipping Ljung-Box test: only {count} residuals")

    if count > 5:
        _, jb_pvalue, _, _ = jarque_bera(residuals.to_numpy())
        diagnostics["jarque_bera_pvalue"] = float(jb_pvalue)

    return diagnostics
