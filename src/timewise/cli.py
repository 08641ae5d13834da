"""
Command-line front end for linear trend fitting.

Fit values given on the command line:

```bash
timewise 100 120 130 145 160 --periods 3
```

or a column of a CSV file:

```bash
timewise --csv data/sales.csv --column revenue --periods 6 --json
```
"""

import argparse
import json
import sys

import pandas as pd

from .errors import EmptyDataError, InsufficientDataError, RegressionError
from .forecast import forecast
from .regressors import fit

DEMO_EXAMPLES = [
    ("Monthly sales", [100.0, 120.0, 130.0, 145.0, 160.0], 3),
    ("Decreasing trend", [50.0, 45.0, 40.0, 35.0, 30.0], 2),
    ("Perfect linear data (y = 2x + 1)", [1.0, 3.0, 5.0, 7.0, 9.0], 0),
]


def format_report(data, periods: int) -> str:
    """Fit `data` and format coefficients, metrics and forecast as text."""
    result = fit(data)
    lines = [
        f"Slope: {result.slope:.2f}",
        f"Intercept: {result.intercept:.2f}",
        f"R²: {result.r_squared:.4f}",
        f"MSE: {result.mse:.4f}",
    ]
    if periods > 0:
        lines.append(f"\nForecast for the next {periods} periods:")
        for k, value in enumerate(forecast(result, periods), start=1):
            lines.append(f"Period {result.n_observations + k}: {value:.2f}")
    return "\n".join(lines)


def format_json(data, periods: int) -> str:
    """Fit `data` and return the result as a JSON document."""
    result = fit(data)
    payload = result.to_dict()
    payload["forecast"] = forecast(result, periods).tolist()
    return json.dumps(payload, indent=2)


def run_demo():
    """Run the worked examples and the error checks."""
    for title, data, periods in DEMO_EXAMPLES:
        print(f"\n=== {title} ===")
        print(f"Data: {data}")
        print(format_report(data, periods))

    print("\n=== Error handling ===")
    for data, expected in (([], EmptyDataError), ([42.0], InsufficientDataError)):
        try:
            fit(data)
        except expected as e:
            print(f"OK: fit({data}) raised {e.kind}: {e}")
        else:
            print(f"FAILED: fit({data}) did not raise {expected.__name__}")


def load_column(path: str, column: str = None, verbose: bool = False) -> pd.Series:
    """
    Load one numeric column from a CSV file.

    Args:
        path: Path to CSV file
        column: Column name. Defaults to the first numeric column.
        verbose: Print progress messages. Default: False.

    Returns:
        `pandas.Series` of observations in file order
    """
    if verbose:
        print(f"Loading {path}...")

    df = pd.read_csv(path)

    if column is None:
        numeric = df.select_dtypes(include="number").columns
        if len(numeric) == 0:
            raise ValueError(f"No numeric columns found in {path}")
        column = numeric[0]
    elif column not in df.columns:
        raise ValueError(
            f"Column {column!r} not found in {path}; "
            f"available: {', '.join(map(str, df.columns))}"
        )

    series = pd.to_numeric(df[column], errors="raise")
    if verbose:
        print(f"Using column {column!r} ({len(series)} rows)")
    return series


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timewise",
        description="Fit a linear trend to an equally-spaced series and forecast it",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="Observations in time order",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Read observations from a CSV file instead",
    )
    parser.add_argument(
        "--column",
        type=str,
        default=None,
        help="CSV column to use (default: first numeric column)",
    )
    parser.add_argument(
        "--periods",
        type=int,
        default=0,
        help="Number of future periods to forecast (default: 0)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the built-in examples",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.periods < 0:
        parser.error("--periods must be non-negative")

    if args.demo:
        run_demo()
        return 0

    if args.csv is not None:
        if args.values:
            parser.error("give either values or --csv, not both")
        try:
            series = load_column(args.csv, args.column, verbose=args.verbose)
        except (ValueError, OSError) as e:
            parser.error(str(e))
        data = series.to_numpy()
    else:
        data = args.values

    if args.verbose:
        print(f"Fitting {len(data)} observations...")

    try:
        if args.json:
            print(format_json(data, args.periods))
        else:
            print(format_report(data, args.periods))
    except RegressionError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
