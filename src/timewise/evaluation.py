"""Goodness-of-fit metrics for fitted trends."""

import numpy as np
from typing import Sequence

from .errors import InvalidInputError
from .validation import validate_pair

# Relative/absolute tolerance for "predictions equal the actuals" when the
# actual values have zero variance.
PERFECT_FIT_RTOL = 1e-9
PERFECT_FIT_ATOL = 1e-12


def _scaled(actual: np.ndarray, predicted: np.ndarray):
    """
    Divide both arrays by max(|actual|, |predicted|) so squares of their
    differences neither overflow nor underflow. Returns (actual, predicted,
    scale); scale is 0.0 when every value is zero.
    """
    scale = float(max(np.max(np.abs(actual)), np.max(np.abs(predicted))))
    if scale == 0.0:
        return actual, predicted, scale
    return actual / scale, predicted / scale, scale


def r_squared(actual: Sequence[float], predicted: Sequence[float]) -> float:
    """
    Coefficient of determination.

    R² = 1 - SS_res / SS_tot, where
        SS_res = Σ(actual - predicted)²
        SS_tot = Σ(actual - mean(actual))²

    Both sums are taken on values divided by the largest magnitude, which
    leaves the ratio unchanged. The value is not clamped: predictions worse
    than the mean give R² < 0.

    When SS_tot is zero (every actual value identical) the ratio is
    undefined. The policy is then:
        - 1.0 if the predictions reproduce the actuals (a constant series
          fitted perfectly)
        - 0.0 otherwise (no explanatory power beyond a constant)
    so the metric is always finite.

    Args:
        actual: Observed values
        predicted: Predicted values, same length as `actual`

    Raises:
        InvalidInputError: If inputs are empty, mismatched or non-finite
    """
    actual, predicted = validate_pair(actual, predicted)

    scaled_actual, scaled_predicted, _ = _scaled(actual, predicted)
    ss_tot = np.sum((scaled_actual - np.mean(scaled_actual)) ** 2)

    if ss_tot == 0.0 or np.all(actual == actual[0]):
        perfect = np.allclose(
            scaled_predicted,
            scaled_actual,
            rtol=PERFECT_FIT_RTOL,
            atol=PERFECT_FIT_ATOL,
        )
        return 1.0 if perfect else 0.0

    ss_res = np.sum((scaled_actual - scaled_predicted) ** 2)
    return float(1.0 - ss_res / ss_tot)


def mse(actual: Sequence[float], predicted: Sequence[float]) -> float:
    """
    Mean squared error.

    Args:
        actual: Observed values
        predicted: Predicted values, same length as `actual`

    Returns:
        mse: Σ(actual - predicted)² / n

    Raises:
        InvalidInputError: If inputs are empty, mismatched or non-finite,
            or the error is too large to represent in float64
    """
    actual, predicted = validate_pair(actual, predicted)

    scaled_actual, scaled_predicted, scale = _scaled(actual, predicted)
    with np.errstate(over="ignore"):
        result = np.mean((scaled_actual - scaled_predicted) ** 2) * scale * scale

    if not np.isfinite(result):
        raise InvalidInputError(
            f"Mean squared error overflows float64 (largest magnitude {scale})."
        )
    return float(result)
