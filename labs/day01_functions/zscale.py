"""
The zscale helper: standardize a numeric sequence to zero mean and unit variance.
"""

from collections.abc import Sequence

import polars as pl

from labs.common.logging_config import get_logger

logger = get_logger(__name__)

_TMP = "__zscale__"


def standardize(column: pl.Expr) -> pl.Expr:
    """(x - mean) / sd as an expression, for use inside select/with_columns."""
    return (column - column.mean()) / column.std()


def zscale(x: pl.Series | Sequence[float]) -> pl.Series:
    """
    Standardize a numeric sequence: (x - mean(x)) / sd(x).

    Missing values are skipped when computing mean and sd and stay missing.
    sd is the sample standard deviation (n - 1).

    Args:
        x: Polars Series or sequence of numbers

    Returns:
        Float Series with the same name as the input

    Raises:
        TypeError: if the input is not numeric
    """
    series = _as_series(x)
    if not series.dtype.is_numeric():
        raise TypeError(f"zscale() needs numeric input, got {series.dtype}")

    return _apply(series, standardize(pl.col(_TMP)))


def zscale_as_written(x: pl.Series | Sequence[float]) -> pl.Series:
    """
    The first draft of zscale, exactly as it appears in the lab handout:

        x - mean(x) / sd(x)

    Division binds tighter than subtraction, so this subtracts the scalar
    mean/sd from every value and never rescales x. The result is NOT a z-score.
    Kept so the lab can show the bug; use zscale() for real work.
    """
    series = _as_series(x)
    logger.warning(
        "zscale_precedence_bug",
        message="x - mean(x) / sd(x) does not standardize x; use zscale()",
    )
    col = pl.col(_TMP)
    return _apply(series, col - col.mean() / col.std())


def _as_series(x: pl.Series | Sequence[float]) -> pl.Series:
    if isinstance(x, pl.Series):
        return x
    return pl.Series(values=list(x))


def _apply(series: pl.Series, expr: pl.Expr) -> pl.Series:
    result = pl.DataFrame({_TMP: series}).select(expr.cast(pl.Float64)).to_series()
    return result.rename(series.name)
