"""
Trend fitting over many independent series.

Each column of a `pandas.DataFrame` is treated as its own equally-spaced
series and fitted separately.
"""

import numpy as np
import pandas as pd

from .errors import RegressionError
from .forecast import forecast
from .regressors import fit


def fit_columns(
    df: pd.DataFrame,
    periods: int = 0,
    errors: str = "raise",
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Fit a linear trend to every numeric column of a dataframe.

    Missing values are dropped per column before fitting, so the time index
    of each series is its position among the remaining rows.

    Args:
        df: `pandas.DataFrame` with one series per column
        periods: Number of forecast steps to add per column. Default: 0.
        errors: 'raise' to propagate the first `RegressionError`, or
            'coerce' to record the error name and continue. Default: 'raise'.
        verbose: If True, print progress messages

    Returns:
        `pandas.DataFrame` indexed by column name with columns
        slope, intercept, r_squared, mse, n_observations, error and
        forecast_1..forecast_<periods>
    """
    if errors not in ("raise", "coerce"):
        raise ValueError(f"errors must be 'raise' or 'coerce', got {errors!r}.")

    numeric_cols = df.select_dtypes(include=[np.number]).columns
    if verbose:
        skipped = len(df.columns) - len(numeric_cols)
        print(f"Fitting {len(numeric_cols)} series ({skipped} non-numeric columns skipped)")

    forecast_cols = [f"forecast_{k}" for k in range(1, periods + 1)]
    rows = []
    for col in numeric_cols:
        series = df[col].dropna()
        row = {"series": col}
        try:
            result = fit(series.to_numpy(dtype=np.float64))
        except RegressionError as e:
            if errors == "raise":
                raise
            if verbose:
                print(f"  {col}: {e.kind} ({e})")
            row["error"] = e.kind
            rows.append(row)
            continue

        row.update(result.to_dict())
        row["error"] = None
        row.update(zip(forecast_cols, forecast(result, periods)))
        rows.append(row)

        if verbose:
            print(f"  {col}: slope={result.slope:.4g}, R²={result.r_squared:.4f}")

    columns = ["series", "slope", "intercept", "r_squared", "mse",
               "n_observations", "error"] + forecast_cols
    df_summary = pd.DataFrame(rows, columns=columns).set_index("series")
    df_summary["n_observations"] = df_summary["n_observations"].astype("Int64")
    return df_summary
