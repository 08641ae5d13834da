"""Linear trend estimation and forecasting for equally-spaced time series."""

__version__ = "0.1.0"

from .errors import (
    RegressionError,
    EmptyDataError,
    InsufficientDataError,
    InvalidInputError,
)

from .regressors import Coefficients, RegressionResult, fit, predict

from .evaluation import r_squared, mse

from .forecast import forecast

from .models import ForecastModel, LinearTrendModel

from .batch import fit_columns

__all__ = [
    # Errors
    "RegressionError",
    "EmptyDataError",
    "InsufficientDataError",
    "InvalidInputError",

    # Fitting
    "Coefficients",
    "RegressionResult",
    "fit",
    "predict",

    # Evaluation metrics
    "r_squared",
    "mse",

    # Forecasting
    "forecast",
    "ForecastModel",
    "LinearTrendModel",

    # Batch
    "fit_columns",
]
