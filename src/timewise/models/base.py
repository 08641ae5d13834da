"""Base interface for forecasting models."""

from abc import ABC, abstractmethod
import numpy as np
import pandas as pd
from typing import Sequence, Union


class ForecastModel(ABC):
    """
    Base class for forecasting models.
    """

    @abstractmethod
    def fit(self, endog: Union[pd.Series, Sequence[float]]) -> "ForecastModel":
        """
        Fit model parameters to observed data.

        Args:
            endog: Observed series in time order. `pandas.Series` or any
                1-D sequence of numbers.

        Returns:
            self: The fitted model
        """
        pass

    @abstractmethod
    def forecast(self, steps: int) -> np.ndarray:
        """
        Make a forecast.

        Args:
            steps: Number of steps to forecast ahead of the fitted data

        Returns:
            predictions: Forecasted values of shape (steps,)

        Example:
            model.fit(y_train)
            forecast = model.forecast(steps=12)
        """
        pass
