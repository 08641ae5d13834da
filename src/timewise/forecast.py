"""Extrapolation of a fitted trend beyond the observed range."""

import numbers

import numpy as np
from typing import Optional, Union

from .regressors import Coefficients, RegressionResult


def forecast(
    coefficients: Union[Coefficients, RegressionResult],
    periods: int,
    n_observations: Optional[int] = None,
) -> np.ndarray:
    """
    Forecast future values along a fitted line.

    Forecasts continue the time index of the fitted series: the first value
    is at index `n_observations` (the step after the last observation), the
    k-th at `n_observations + k - 1`.

    Args:
        coefficients: `Coefficients`, or a `RegressionResult` from `fit`
        periods: Number of future steps. 0 gives an empty array.
        n_observations: Number of observations the coefficients were fitted
            on. Required with `Coefficients`; defaults to
            `result.n_observations` with a `RegressionResult`.

    Returns:
        predictions: Forecasted values of shape (periods,)

    Example:
        >>> result = fit([100.0, 120.0, 130.0, 145.0, 160.0])
        >>> forecast(result.coefficients, 3, n_observations=5)
        array([174.5, 189. , 203.5])
    """
    if isinstance(coefficients, RegressionResult):
        if n_observations is None:
            n_observations = coefficients.n_observations
        coefficients = coefficients.coefficients

    if n_observations is None:
        raise ValueError(
            "n_observations is required to place the forecast after the "
            "fitted series."
        )

    for name, value in (("periods", periods), ("n_observations", n_observations)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"{name} must be an integer, got {value!r}.")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}.")

    x = np.arange(n_observations, n_observations + periods, dtype=np.float64)
    return coefficients.slope * x + coefficients.intercept
