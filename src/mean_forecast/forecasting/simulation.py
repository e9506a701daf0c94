"""Sample path generation for the mean model.

Future values are simulated as the fitted estimate plus an innovation.
Innovations are either Gaussian with the fitted residual variance, or
resampled (with replacement) from the centred in-sample residuals.

No random state is kept here. Pass a seeded numpy Generator for
reproducible draws; without one a fresh unseeded Generator is used.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from mean_forecast.exceptions import InvalidInputError
from mean_forecast.forecasting.types import FittedModel

logger = logging.getLogger(__name__)


def centred_residuals(model: FittedModel) -> np.ndarray:
    """Non-missing residuals with their mean removed."""
    res = model.residuals.dropna().to_numpy(dtype=float)
    return res - res.mean()


def draw_innovations(
    model: FittedModel,
    size: int,
    bootstrap: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Draw `size` innovations for the fitted model.

    Args:
        model: Fitted mean model
        size: Number of innovations to draw
        bootstrap: If True, resample centred residuals; otherwise draw from
            Normal(0, sigma2)
        rng: Random generator (default: a new unseeded generator)

    Returns:
        Array of length `size`
    """
    if rng is None:
        rng = np.random.default_rng()

    if bootstrap:
        pool = centred_residuals(model)
        if len(pool) == 0:
            raise InvalidInputError("No residuals available to bootstrap from")
        return rng.choice(pool, size=size, replace=True)

    return rng.normal(loc=0.0, scale=np.sqrt(model.sigma2), size=size)


def simulate_path(
    model: FittedModel,
    index: pd.Index,
    bootstrap: bool = False,
    innovations: Optional[np.ndarray] = None,
    rng: Optional[np.random.Generator] = None,
) -> pd.Series:
    """Simulate one future sample path.

    Args:
        model: Fitted mean model
        index: Index of the simulated period; its length is the path length
        bootstrap: Resample residuals instead of drawing Gaussian innovations
        innovations: Optional innovations used as-is instead of random draws
        rng: Random generator used when innovations are drawn

    Returns:
        Series named "sim" with estimate + innovation at each position

    Raises:
        InvalidInputError: If supplied innovations do not match the index length
    """
    size = len(index)
    if innovations is None:
        innov = draw_innovations(model, size, bootstrap=bootstrap, rng=rng)
    else:
        innov = np.asarray(innovations, dtype=float)
        if innov.shape != (size,):
            raise InvalidInputError(
                f"Expected {size} innovations, got array of shape {innov.shape}"
            )

    return pd.Series(model.estimate + innov, index=index, name="sim", dtype=float)


def simulate_paths(
    model: FittedModel,
    index: pd.Index,
    times: int,
    bootstrap: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Simulate `times` independent paths and return them per horizon step.

    Args:
        model: Fitted mean model
        index: Index of the simulated period
        times: Number of paths
        bootstrap: Resample residuals instead of drawing Gaussian innovations
        rng: Random generator shared by all paths

    Returns:
        Array of shape (len(index), times); column j is path j
    """
    if rng is None:
        rng = np.random.default_rng()

    logger.debug(f"Simulating {times} paths of length {len(index)} (bootstrap={bootstrap})")
    paths = [
        simulate_path(model, index, bootstrap=bootstrap, rng=rng).to_numpy()
        for _ in range(times)
    ]
    return np.stack(paths, axis=1)
