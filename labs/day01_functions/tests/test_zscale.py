"""
Tests for the zscale helper and the random table.
"""

import math

import polars as pl
import pytest

from labs.day01_functions.config import generate_random_frame
from labs.day01_functions.zscale import standardize, zscale, zscale_as_written


class TestZscale:
    """Test the fixed, guarded zscale"""

    def test_zero_mean_unit_sd(self):
        """Output has mean 0 and sample sd 1"""
        result = zscale(pl.Series("x", [1.0, 2.0, 3.0, 4.0, 10.0]))
        assert result.mean() == pytest.approx(0.0, abs=1e-12)
        assert result.std() == pytest.approx(1.0)

    def test_known_values(self):
        """Values match (x - mean) / sd by hand"""
        result = zscale([1, 2, 3])
        assert result.to_list() == pytest.approx([-1.0, 0.0, 1.0])

    def test_integer_input_returns_floats(self):
        """Integer columns come back as Float64"""
        result = zscale(pl.Series("n", [2, 4, 6], dtype=pl.Int32))
        assert result.dtype == pl.Float64

    def test_keeps_series_name(self):
        """The input name survives"""
        assert zscale(pl.Series("height", [1.0, 2.0])).name == "height"

    def test_missing_values_stay_missing(self):
        """Nulls are skipped for mean/sd and remain null"""
        result = zscale(pl.Series("x", [1.0, None, 3.0]))
        assert result[1] is None
        assert result[0] == pytest.approx(-1 / math.sqrt(2))
        assert result[2] == pytest.approx(1 / math.sqrt(2))

    def test_single_value_does_not_raise(self):
        """One observation has no sd, so the result is missing"""
        result = zscale([5.0])
        assert result.len() == 1
        assert result[0] is None

    def test_constant_input_gives_nan(self):
        """sd of a constant is 0, so 0 / 0 is NaN"""
        result = zscale([3.0, 3.0, 3.0])
        assert all(math.isnan(v) for v in result.to_list())

    def test_text_input_raises(self):
        """Strings are rejected by the numeric guard"""
        with pytest.raises(TypeError):
            zscale(pl.Series("letters", ["a", "b", "c"]))

    def test_boolean_input_raises(self):
        """Booleans are not numeric"""
        with pytest.raises(TypeError):
            zscale([True, False, True])


class TestZscaleAsWritten:
    """Test the first draft with the precedence bug"""

    def test_subtracts_mean_over_sd(self):
        """Computes x - mean(x) / sd(x), not (x - mean(x)) / sd(x)"""
        x = pl.Series("x", [1.0, 2.0, 3.0, 4.0, 10.0])
        shift = x.mean() / x.std()
        result = zscale_as_written(x)
        assert result.to_list() == pytest.approx([v - shift for v in x.to_list()])

    def test_does_not_standardize(self):
        """The spread of x is left unchanged"""
        x = pl.Series("x", [1.0, 2.0, 3.0, 4.0, 10.0])
        result = zscale_as_written(x)
        assert result.std() == pytest.approx(x.std())
        assert result.std() != pytest.approx(1.0)


class TestStandardizeExpression:
    """Test the expression form used inside with_columns"""

    def test_matches_zscale(self):
        """Expression and function agree"""
        df = pl.DataFrame({"a": [1.0, 5.0, 9.0, 2.0]})
        via_expr = df.select(standardize(pl.col("a"))).to_series()
        assert via_expr.to_list() == pytest.approx(zscale(df.get_column("a")).to_list())


class TestRandomFrame:
    """Test the random table generator"""

    def test_shape_and_columns(self):
        """Default table is 10 x [a, b, c, d]"""
        df = generate_random_frame()
        assert df.shape == (10, 4)
        assert df.columns == ["a", "b", "c", "d"]
        assert all(dtype == pl.Float64 for dtype in df.dtypes)

    def test_seed_is_reproducible(self):
        """Same seed, same table"""
        assert generate_random_frame(seed=7).equals(generate_random_frame(seed=7))

    def test_custom_columns(self):
        """Column names and row count are configurable"""
        df = generate_random_frame(n_rows=3, columns=["x", "y"])
        assert df.shape == (3, 2)
        assert df.columns == ["x", "y"]
