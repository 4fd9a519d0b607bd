# ipt/regression.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import DECIMALS_REGRESSION, MIN_POINTS_REGRESSION
from .errors import DegenerateModel, InsufficientData, InvalidInput
from .utils import round_half_away

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r2: float


def fit(xs: Sequence[float], ys: Sequence[float]) -> RegressionResult:
    """
    Ordinary least squares y = intercept + slope * x.

    Uses the five-sum formulas. R² is 1 by convention when every y is the
    same (zero total sum of squares). Outputs are rounded to 6 decimals.
    """
    if len(xs) != len(ys):
        raise InvalidInput(
            f"Regression: x and y must have the same length ({len(xs)} != {len(ys)})"
        )
    if len(xs) < MIN_POINTS_REGRESSION:
        raise InsufficientData("Regression", len(xs), MIN_POINTS_REGRESSION)

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    n = len(x)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise DegenerateModel("Regression: all x values are identical, slope is undefined")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_total = float(np.sum((y - y_mean) ** 2))
    ss_residual = float(np.sum((y - (intercept + slope * x)) ** 2))
    r2 = 1.0 if ss_total == 0 else 1.0 - ss_residual / ss_total

    logger.debug("OLS n=%d slope=%.6f intercept=%.6f r2=%.6f", n, slope, intercept, r2)
    return RegressionResult(
        slope=round_half_away(slope, DECIMALS_REGRESSION),
        intercept=round_half_away(intercept, DECIMALS_REGRESSION),
        r2=round_half_away(r2, DECIMALS_REGRESSION),
    )
