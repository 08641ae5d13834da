import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import LinearRegression

from timewise import (
    Coefficients,
    EmptyDataError,
    InsufficientDataError,
    InvalidInputError,
    RegressionError,
    fit,
    predict,
)


class TestFit:
    def test_monthly_sales(self):
        result = fit([100.0, 120.0, 130.0, 145.0, 160.0])

        assert result.slope == pytest.approx(14.5, rel=1e-12)
        assert result.intercept == pytest.approx(102.0, rel=1e-12)
        # SS_res = 17.5, SS_tot = 2120
        assert result.r_squared == pytest.approx(1.0 - 17.5 / 2120.0, rel=1e-12)
        assert round(result.r_squared, 4) == 0.9917
        assert result.mse == pytest.approx(3.5, rel=1e-12)
        assert result.n_observations == 5

    def test_perfect_increasing(self):
        result = fit([1.0, 3.0, 5.0, 7.0, 9.0])

        assert result.coefficients == Coefficients(slope=2.0, intercept=1.0)
        assert result.r_squared == pytest.approx(1.0, abs=1e-12)
        assert result.mse == pytest.approx(0.0, abs=1e-12)

    def test_perfect_decreasing(self):
        result = fit([50.0, 45.0, 40.0, 35.0, 30.0])

        assert result.slope == pytest.approx(-5.0, rel=1e-12)
        assert result.intercept == pytest.approx(50.0, rel=1e-12)
        assert result.r_squared == pytest.approx(1.0, abs=1e-12)
        assert result.mse == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize(
        "value, n",
        [(5.0, 5), (0.1, 7), (-3.25, 2), (0.0, 4), (1e6, 100)],
    )
    def test_constant_series(self, value, n):
        data = [value] * n
        result = fit(data)

        assert result.slope == pytest.approx(0.0, abs=1e-9)
        assert result.intercept == pytest.approx(value, rel=1e-9, abs=1e-12)
        assert result.r_squared == 1.0
        assert result.mse == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize(
        "a, b, n",
        [(2.0, 1.0, 5), (-5.0, 50.0, 5), (0.5, -3.0, 20), (1e-3, 1e3, 1000), (7.25, 0.0, 2)],
    )
    def test_recovers_exact_line(self, a, b, n):
        x = np.arange(n)
        result = fit(a * x + b)

        assert result.slope == pytest.approx(a, rel=1e-9)
        assert result.intercept == pytest.approx(b, rel=1e-9, abs=1e-9)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)
        assert result.mse == pytest.approx(0.0, abs=1e-9)

    def test_tiny_magnitude_line(self):
        result = fit([0.0, 1e-200, 2e-200])

        assert result.slope == pytest.approx(1e-200, rel=1e-9)
        assert result.intercept == pytest.approx(0.0, abs=1e-208)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)
        assert result.mse == pytest.approx(0.0, abs=1e-300)

    def test_huge_magnitude_line(self):
        result = fit([-1e200, 0.0, 1e200])

        assert result.slope == pytest.approx(1e200, rel=1e-9)
        assert result.r_squared == pytest.approx(1.0, abs=1e-9)

    def test_matches_sklearn(self):
        """Coefficients agree with scikit-learn on noisy data."""
        rng = np.random.default_rng(seed=1)
        n_obs = 50
        y = 3.0 * np.arange(n_obs) - 20.0 + rng.normal(scale=5.0, size=n_obs)

        result = fit(y)

        regressor = LinearRegression(fit_intercept=True)
        regressor.fit(np.arange(n_obs).reshape(-1, 1), y)

        np.testing.assert_allclose(result.slope, regressor.coef_[0], rtol=1e-10)
        np.testing.assert_allclose(result.intercept, regressor.intercept_, rtol=1e-10)
        np.testing.assert_allclose(
            result.r_squared,
            regressor.score(np.arange(n_obs).reshape(-1, 1), y),
            rtol=1e-10,
        )

    def test_idempotent(self):
        data = [3.2, 1.7, 4.4, 4.0, 6.1, 5.9]
        first = fit(data)
        second = fit(data)

        assert first == second
        assert first.coefficients == second.coefficients
        assert first.r_squared == second.r_squared
        assert first.mse == second.mse
        np.testing.assert_array_equal(first.predictions, second.predictions)

    def test_predictions(self):
        result = fit([100.0, 120.0, 130.0, 145.0, 160.0])

        np.testing.assert_allclose(
            result.predictions, [102.0, 116.5, 131.0, 145.5, 160.0], rtol=1e-12
        )
        assert not result.predictions.flags.writeable

    def test_accepts_array_like(self):
        data = [1.0, 3.0, 5.0, 7.0, 9.0]
        expected = fit(data)

        assert fit(tuple(data)) == expected
        assert fit(np.array(data)) == expected
        assert fit(pd.Series(data, index=list("abcde"))) == expected

    def test_result_is_frozen(self):
        result = fit([1.0, 2.0])
        with pytest.raises(AttributeError):
            result.mse = 1.0
        with pytest.raises(AttributeError):
            result.coefficients.slope = 0.0

    def test_to_dict(self):
        result = fit([1.0, 3.0, 5.0, 7.0, 9.0])
        assert result.to_dict() == {
            "slope": 2.0,
            "intercept": 1.0,
            "r_squared": result.r_squared,
            "mse": result.mse,
            "n_observations": 5,
        }


class TestFitErrors:
    def test_empty(self):
        with pytest.raises(EmptyDataError) as excinfo:
            fit([])
        assert excinfo.value.kind == "EmptyData"

    @pytest.mark.parametrize("value", [42.0, 0.0, -1.5, np.nan, np.inf])
    def test_single_value(self, value):
        with pytest.raises(InsufficientDataError) as excinfo:
            fit([value])
        assert excinfo.value.kind == "InsufficientData"

    @pytest.mark.parametrize(
        "data",
        [[1.0, np.nan, 3.0], [1.0, np.inf], [-np.inf, 2.0, 3.0], [np.nan, np.nan]],
    )
    def test_non_finite(self, data):
        with pytest.raises(InvalidInputError, match="non-finite"):
            fit(data)

    def test_not_numeric(self):
        with pytest.raises(InvalidInputError):
            fit(["a", "b", "c"])

    def test_not_one_dimensional(self):
        with pytest.raises(InvalidInputError, match="one-dimensional"):
            fit([[1.0, 2.0], [3.0, 4.0]])

    @pytest.mark.parametrize(
        "data", [[1e308, 1e308, 1e308], [1e200, -1e200, 1e200]]
    )
    def test_overflow(self, data):
        with pytest.raises(InvalidInputError):
            fit(data)

    def test_errors_are_value_errors(self):
        for exc in (EmptyDataError, InsufficientDataError, InvalidInputError):
            assert issubclass(exc, RegressionError)
            assert issubclass(exc, ValueError)

    def test_default_messages(self):
        assert str(EmptyDataError()) == "Empty data provided"
        assert str(InsufficientDataError()) == "Insufficient data for analysis"
        assert str(InvalidInputError()) == "Invalid input"


class TestPredict:
    def test_predict_range(self):
        coefficients = Coefficients(slope=2.0, intercept=1.0)
        predictions = predict(coefficients, [0, 1, 2])
        np.testing.assert_allclose(predictions, [1.0, 3.0, 5.0], rtol=1e-12)

    def test_fractional_indices(self):
        coefficients = Coefficients(slope=-4.0, intercept=10.0)
        predictions = predict(coefficients, np.array([0.5, 2.25]))
        np.testing.assert_allclose(predictions, [8.0, 1.0], rtol=1e-12)
