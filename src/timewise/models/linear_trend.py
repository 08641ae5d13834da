"""Linear trend model over the implicit time index."""

import numpy as np
import pandas as pd
from typing import Optional, Sequence, Tuple, Union

from .base import ForecastModel
from ..forecast import forecast
from ..regressors import RegressionResult, fit


class LinearTrendModel(ForecastModel):
    """
    Straight-line trend fitted by ordinary least squares.

    The independent variable is the position of each observation, so the
    series is assumed to be equally spaced.

    Attributes:
        result: `RegressionResult` from the last call to `fit`
    """

    def __init__(self):
        self.result: Optional[RegressionResult] = None
        self._index: Optional[pd.Index] = None

    def fit(self, endog: Union[pd.Series, Sequence[float]]) -> "LinearTrendModel":
        """
        Fit the trend to observed data.
        Returns the fitted model.

        Args:
            endog: Observed series. If a `pandas.Series`, its index is kept
                so `forecast_series` can label future steps.
        """
        if isinstance(endog, pd.Series):
            self._index = endog.index
            values = endog.to_numpy(dtype=np.float64)
        else:
            self._index = None
            values = endog

        self.result = fit(values)
        return self

    def _check_fitted(self, method: str):
        if self.result is None:
            raise ValueError(
                f"Model must be fitted before calling {method}(). Call fit() first."
            )

    def forecast(self, steps: int) -> np.ndarray:
        """
        Forecast `steps` values following the end of the fitted series.

        Args:
            steps: Number of steps to forecast ahead

        Returns:
            predictions: Forecasted values of shape (steps,)
        """
        self._check_fitted("forecast")
        return forecast(
            self.result.coefficients, steps, self.result.n_observations
        )

    def forecast_series(self, steps: int) -> pd.Series:
        """
        Forecast as a `pandas.Series` labelled with future index values.

        A fitted `DatetimeIndex` with a regular frequency is extended by
        `steps` periods. With two timestamps and no frequency, the gap
        between them is the step. Any other index is replaced by integer
        positions continuing from the number of observations.
        """
        predictions = self.forecast(steps)
        n = self.result.n_observations

        freq = None
        if isinstance(self._index, pd.DatetimeIndex):
            freq = self._index.freq
            if freq is None and n >= 3:  # infer_freq needs 3 timestamps
                freq = pd.infer_freq(self._index)
            elif freq is None and n == 2:
                step = self._index[-1] - self._index[-2]
                if step > pd.Timedelta(0):
                    freq = step

        if freq is not None:
            index = pd.date_range(
                self._index[-1], periods=steps + 1, freq=freq
            )[1:]
        else:
            index = pd.RangeIndex(n, n + steps)

        return pd.Series(predictions, index=index, name="forecast")

    def get_params(self) -> Tuple[float, float]:
        """
        Get fitted parameters.

        Returns:
            slope: Change per time step
            intercept: Trend value at the first observation
        """
        self._check_fitted("get_params")
        return self.result.slope, self.result.intercept

    def __repr__(self):
        if self.result is None:
            return "LinearTrendModel()"
        return (
            f"LinearTrendModel(slope={self.result.slope}, "
            f"intercept={self.result.intercept})"
        )
