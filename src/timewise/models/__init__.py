"""Time series forecasting models."""

from .base import ForecastModel
from .linear_trend import LinearTrendModel

__all__ = ["ForecastModel", "LinearTrendModel"]
