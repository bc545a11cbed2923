"""
The nycflights13 sample tables as polars DataFrames.

All flights that departed New York City (JFK, LGA, EWR) in 2013, plus
metadata about planes, airlines, airports and hourly weather.
"""

from functools import lru_cache

import nycflights13
import polars as pl

from .logging_config import get_logger

logger = get_logger(__name__)

SAMPLE_TABLES = ("airlines", "airports", "flights", "planes", "weather")


@lru_cache(maxsize=None)
def load_sample_table(name: str) -> pl.DataFrame:
    """
    Load one sample table.

    Args:
        name: One of SAMPLE_TABLES

    Returns:
        Polars DataFrame (cached; do not mutate)
    """
    if name not in SAMPLE_TABLES:
        available = ", ".join(SAMPLE_TABLES)
        raise ValueError(f"Unknown sample table: {name}. Available: {available}")

    df = pl.from_pandas(getattr(nycflights13, name))
    logger.debug("sample_table_loaded", table=name, rows=df.height, columns=df.width)
    return df


def load_sample_tables(names: list[str] | None = None) -> dict[str, pl.DataFrame]:
    """Load several sample tables, keyed by name (all of them by default)."""
    return {name: load_sample_table(name) for name in (names or SAMPLE_TABLES)}
