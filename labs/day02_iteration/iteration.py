"""
Column-wise iteration helpers, from explicit loops to map-style functions.
"""

import numbers
from collections.abc import Callable
from typing import Any

import polars as pl
import polars.selectors as cs

from labs.day01_functions.zscale import standardize


def column_medians_loop(df: pl.DataFrame) -> list[float | None]:
    """
    Median of every column with a plain for-loop.

    The output list is allocated up front and filled by position, which is
    the pattern every map helper below hides.
    """
    output: list[float | None] = [None] * df.width
    for i in range(df.width):
        output[i] = df.to_series(i).median()
    return output


def map_columns(df: pl.DataFrame, fn: Callable[[pl.Series], Any]) -> dict[str, Any]:
    """Apply fn to each column; results keyed by column name."""
    return {name: fn(df.get_column(name)) for name in df.columns}


def map_dbl(df: pl.DataFrame, fn: Callable[[pl.Series], Any]) -> dict[str, float]:
    """
    Like map_columns, but every result must be a single real number.

    Raises:
        TypeError: if fn returns anything else for some column
    """
    results = {}
    for name, value in map_columns(df, fn).items():
        if value is None:
            results[name] = float("nan")
            continue
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"Result for column '{name}' must be a single number, got {type(value).__name__}"
            )
        results[name] = float(value)
    return results


def map_frame(df: pl.DataFrame, fn: Callable[[pl.Series], pl.Series]) -> pl.DataFrame:
    """Apply a Series -> Series function to every column and rebuild the table."""
    columns = []
    for name, result in map_columns(df, fn).items():
        if not isinstance(result, pl.Series):
            raise TypeError(
                f"Result for column '{name}' must be a Series, got {type(result).__name__}"
            )
        columns.append(result.rename(name))
    return pl.DataFrame(columns)


def col_summary(df: pl.DataFrame, fn: Callable[[pl.Series], Any]) -> pl.DataFrame:
    """
    Summarise every numeric column with fn.

    Returns:
        Two-column table: column name and fn's value. Non-numeric columns are skipped.
    """
    numeric = df.select(cs.numeric())
    summary = map_dbl(numeric, fn)
    return pl.DataFrame(
        {"column": list(summary.keys()), "value": list(summary.values())},
        schema={"column": pl.Utf8, "value": pl.Float64},
    )


def rescale_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Standardize every numeric column in one vectorised with_columns call."""
    numeric = df.select(cs.numeric()).columns
    return df.with_columns([standardize(pl.col(name)).alias(name) for name in numeric])
