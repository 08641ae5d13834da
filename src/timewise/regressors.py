"""Ordinary least-squares trend fitting over the implicit time index."""

import numpy as np
from dataclasses import dataclass, field
from typing import Sequence

from .errors import InvalidInputError
from .evaluation import mse, r_squared
from .validation import as_float_array, validate_series


@dataclass(frozen=True)
class Coefficients:
    """
    Parameters of the fitted line `y = slope * x + intercept`.

    Attributes:
        slope: Change in y per time step
        intercept: Value of the line at index 0
    """

    slope: float
    intercept: float


@dataclass(frozen=True)
class RegressionResult:
    """
    Outcome of `fit`.

    Attributes:
        coefficients: Fitted slope and intercept
        r_squared: Coefficient of determination. Not clamped to [0, 1].
        mse: Mean squared error of the fitted values
        n_observations: Length of the fitted series. Forecasts start at
            this index.
        predictions: Fitted values at indices 0..n_observations-1 (read-only)
    """

    coefficients: Coefficients
    r_squared: float
    mse: float
    n_observations: int
    predictions: np.ndarray = field(repr=False, compare=False)

    @property
    def slope(self) -> float:
        return self.coefficients.slope

    @property
    def intercept(self) -> float:
        return self.coefficients.intercept

    def to_dict(self) -> dict:
        """Return the headline values as plain Python numbers."""
        return {
            "slope": self.coefficients.slope,
            "intercept": self.coefficients.intercept,
            "r_squared": self.r_squared,
            "mse": self.mse,
            "n_observations": self.n_observations,
        }


def _least_squares(y: np.ndarray) -> Coefficients:
    """
    Closed-form OLS with x = 0..n-1.

    slope = (n Σxy - Σx Σy) / (n Σx² - (Σx)²)
    intercept = (Σy - slope Σx) / n
    """
    n = float(len(y))
    x = np.arange(len(y), dtype=np.float64)

    with np.errstate(over="ignore", invalid="ignore"):
        sum_x = x.sum()
        sum_y = y.sum()
        sum_xy = x @ y
        sum_x2 = x @ x

        denominator = n * sum_x2 - sum_x * sum_x

        # Distinct integer x makes this positive in exact arithmetic
        if not np.isfinite(denominator) or denominator <= 0.0:
            raise InvalidInputError(
                f"Degenerate least-squares denominator ({denominator}) "
                f"for {len(y)} observations."
            )

        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n

    if not (np.isfinite(slope) and np.isfinite(intercept)):
        raise InvalidInputError(
            f"Fitted coefficients are not finite (slope={slope}, "
            f"intercept={intercept}); the data magnitude overflows float64."
        )

    return Coefficients(slope=float(slope), intercept=float(intercept))


def predict(coefficients: Coefficients, indices: Sequence[float]) -> np.ndarray:
    """
    Evaluate the fitted line at the given time indices.

    Args:
        coefficients: Fitted `Coefficients`
        indices: Time indices (need not be integers or in range)

    Returns:
        predictions: Array with one value per index
    """
    x = as_float_array(indices, name="indices")
    return coefficients.slope * x + coefficients.intercept


def fit(data: Sequence[float]) -> RegressionResult:
    """
    Fit a straight line to an equally-spaced series by least squares.

    The independent variable is the position of each observation
    (0, 1, ..., n-1).

    Args:
        data: Observations in time order. At least two finite values.

    Returns:
        result: `RegressionResult` with coefficients, R², MSE and fitted values

    Raises:
        EmptyDataError: If `data` is empty
        InsufficientDataError: If `data` has a single value
        InvalidInputError: If `data` has non-finite values, or the fit
            overflows float64

    Example:
        >>> result = fit([1.0, 3.0, 5.0, 7.0, 9.0])
        >>> result.coefficients
        Coefficients(slope=2.0, intercept=1.0)
    """
    y = validate_series(data)
    coefficients = _least_squares(y)

    with np.errstate(over="ignore", invalid="ignore"):
        predictions = predict(coefficients, np.arange(len(y)))
    predictions.setflags(write=False)

    if not np.all(np.isfinite(predictions)):
        raise InvalidInputError("Fitted values overflow float64.")

    # mse raises InvalidInputError if the residuals are too large for float64
    fit_r_squared = r_squared(y, predictions)
    fit_mse = mse(y, predictions)

    return RegressionResult(
        coefficients=coefficients,
        r_squared=fit_r_squared,
        mse=fit_mse,
        n_observations=len(y),
        predictions=predictions,
    )
