"""
Experiment 1: Data Transformation Verbs

One verb per question, on 336k NYC flights from 2013:

- Which flights left more than four hours late?        filter
- Which were the worst?                                 sort
- Only the schedule columns, please.                    select
- How much time did each flight make up in the air?     with_columns
- Does distance explain arrival delay?                  group_by + agg
- Which airline is the worst offender?                  join
"""

import time

from labs.common.config_loader import TransformConfig
from labs.common.console import (
    console,
    format_time,
    print_frame,
    print_metric,
    print_note,
    print_section_header,
    print_step,
)
from labs.common.sample_data import load_sample_table

from .verbs import (
    add_gain_and_speed,
    arrange_by_delay,
    carrier_delays,
    filter_delayed,
    select_schedule,
    summarise_delays_by_dest,
)


def run(config: TransformConfig | None = None):
    config = config or TransformConfig()
    print_section_header("Experiment 3: Data Transformation Verbs")

    print_step("Loading the nycflights13 tables...")
    start = time.perf_counter()
    flights = load_sample_table("flights")
    airlines = load_sample_table("airlines")
    print_metric("Load time", format_time(time.perf_counter() - start))
    print_metric("flights", f"{flights.height:,} rows x {flights.width} columns")

    print_step(f"filter: dep_delay > {config.delay_threshold}")
    delayed = filter_delayed(flights, config.delay_threshold)
    print_metric("Rows kept", f"{delayed.height:,}")

    print_step("sort: longest departure delay first")
    print_frame(select_schedule(arrange_by_delay(flights)), title="Worst delays", max_rows=5)

    print_step("with_columns: gain and speed")
    gained = add_gain_and_speed(flights).select(
        "carrier", "dep_delay", "arr_delay", "gain", "speed"
    )
    print_frame(gained, max_rows=5)

    print_step(f"group_by(dest) + agg, keeping destinations with > {config.min_flights} flights")
    by_dest = summarise_delays_by_dest(flights, config.min_flights)
    print_frame(by_dest, title="Delay by destination", max_rows=8)
    print_note("Missing arr_delay values are skipped by mean(); cancelled flights have none.")

    print_step("join: carrier codes to airline names")
    print_frame(carrier_delays(flights, airlines), title="Mean departure delay", max_rows=5)

    console.print("\n[bold green]Key Insights:[/bold green]")
    console.print("  • Every verb takes a table and returns a new table")
    console.print("  • Chains read top to bottom like the question they answer")
    console.print("  • Lookup tables stay small and tidy; join when you need names")


if __name__ == "__main__":
    run()
