"""
Data-manipulation verbs on the flights tables, eager polars versions.

Each function is one verb (or a short chain) so the same question can be
asked again in Day 04 against the database and the answers compared.
"""

import polars as pl

SCHEDULE_COLUMNS = [
    "year",
    "month",
    "day",
    "dep_time",
    "sched_dep_time",
    "arr_time",
    "sched_arr_time",
]


def filter_delayed(flights: pl.DataFrame, minutes: float = 240.0) -> pl.DataFrame:
    """Flights whose departure delay exceeds `minutes`."""
    return flights.filter(pl.col("dep_delay") > minutes)


def arrange_by_delay(flights: pl.DataFrame) -> pl.DataFrame:
    """Longest departure delays first; missing delays sort last."""
    return flights.sort("dep_delay", descending=True, nulls_last=True)


def select_schedule(flights: pl.DataFrame) -> pl.DataFrame:
    """Keep the date and the scheduled/actual times only."""
    return flights.select(SCHEDULE_COLUMNS)


def add_gain_and_speed(flights: pl.DataFrame) -> pl.DataFrame:
    """
    Add derived columns:
    - gain: minutes made up in the air (dep_delay - arr_delay)
    - speed: miles per hour (distance / air_time * 60)
    """
    return flights.with_columns(
        gain=pl.col("dep_delay") - pl.col("arr_delay"),
        speed=pl.col("distance") / pl.col("air_time") * 60,
    )


def summarise_delays_by_dest(flights: pl.DataFrame, min_flights: int = 20) -> pl.DataFrame:
    """
    Flight count, mean distance and mean arrival delay per destination.

    Destinations with `min_flights` or fewer flights are noise and Honolulu
    (HNL) is an outlier on distance, so both are dropped.
    """
    return (
        flights.group_by("dest")
        .agg(
            count=pl.len(),
            dist=pl.col("distance").mean(),
            delay=pl.col("arr_delay").mean(),
        )
        .filter((pl.col("count") > min_flights) & (pl.col("dest") != "HNL"))
        .sort("dest")
    )


def count_by_carrier(flights: pl.DataFrame) -> pl.DataFrame:
    """Number of flights per carrier, busiest first."""
    return (
        flights.group_by("carrier")
        .agg(n=pl.len())
        .sort(["n", "carrier"], descending=[True, False])
    )


def carrier_delays(flights: pl.DataFrame, airlines: pl.DataFrame) -> pl.DataFrame:
    """Mean departure delay per carrier with the airline's full name, worst first."""
    return (
        flights.group_by("carrier")
        .agg(mean_dep_delay=pl.col("dep_delay").mean())
        .join(airlines, on="carrier", how="left")
        .sort("mean_dep_delay", descending=True, nulls_last=True)
    )
