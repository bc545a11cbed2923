"""
Experiment 1: Iteration

Same table as Day 01, now asking "do this to every column":

Step 1: for-loop with a pre-allocated output
Step 2: map helpers that hide the loop
Step 3: map zscale over the table, then the vectorised with_columns version
"""

import polars as pl

from labs.common.config_loader import FunctionsConfig
from labs.common.console import (
    console,
    print_frame,
    print_metric,
    print_note,
    print_section_header,
    print_step,
)
from labs.day01_functions.config import generate_random_frame
from labs.day01_functions.zscale import zscale

from .iteration import (
    col_summary,
    column_medians_loop,
    map_dbl,
    map_frame,
    rescale_columns,
)


def _loop_version(df: pl.DataFrame):
    print_step("for i in range(df.width): output[i] = df.to_series(i).median()")
    medians = column_medians_loop(df)
    for name, value in zip(df.columns, medians):
        print_metric(f"median({name})", f"{value:.3f}")
    print_note("Allocate the output before the loop; growing it inside is slow.")


def _map_version(df: pl.DataFrame):
    print_step("map_dbl(df, lambda s: s.mean())")
    for name, value in map_dbl(df, lambda s: s.mean()).items():
        print_metric(f"mean({name})", f"{value:.3f}")

    print_step("col_summary(df, lambda s: s.std())")
    print_frame(col_summary(df, lambda s: s.std()), title="col_summary(df, sd)")

    print_step("map_dbl insists on one number per column...")
    try:
        map_dbl(df, lambda s: s.head(2))
    except TypeError as e:
        print_metric("Raised TypeError", str(e), color="yellow")


def _rescale(df: pl.DataFrame):
    print_step("map_frame(df, zscale)")
    mapped = map_frame(df, zscale)
    print_frame(mapped, title="map_frame(df, zscale)")

    print_step("df.with_columns(standardize(col) for each numeric column)")
    vectorised = rescale_columns(df)
    print_metric("Same result", str(mapped.equals(vectorised)))
    print_note("Polars runs the with_columns version in one pass over the table.")


def run(config: FunctionsConfig | None = None):
    config = config or FunctionsConfig()
    print_section_header("Experiment 2: Iteration")

    df = generate_random_frame(config.n_rows, config.columns, config.seed)
    print_metric("Table", f"{df.height} rows x {df.width} columns")

    _loop_version(df)
    _map_version(df)
    _rescale(df)

    console.print("\n[bold green]Key Insights:[/bold green]")
    console.print("  • A loop needs an output, a sequence, and a body")
    console.print("  • map helpers remove the bookkeeping and state the intent")
    console.print("  • When the library can do it column-wise, let it")


if __name__ == "__main__":
    run()
