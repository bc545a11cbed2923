"""
Experiment 1: Database Session

Same flights data as Day 03, but now it lives in a database:

Step 1: Connect to an in-memory DuckDB and copy the tables in, with indexes
Step 2: Lazy queries: build the question, read the SQL, then collect
Step 3: What a lazy query cannot tell you (row count, last rows)
Step 4: Literal SQL
Step 5: Disconnect

Cost: every collect() is a round trip to the engine.
Benefit: the engine does the filtering; only the answer comes back.
"""

import time

import ibis
from ibis import _

from labs.common.config_loader import DatabaseConfig
from labs.common.console import (
    console,
    format_time,
    print_frame,
    print_metric,
    print_note,
    print_section_header,
    print_step,
)

from .config import DELAYED_FLIGHTS_SQL
from .lazy import UnmaterializedQueryError
from .session import DatabaseSession


def _load(session: DatabaseSession, config: DatabaseConfig):
    print_step(f"Copying {', '.join(config.tables)} into DuckDB...")
    start = time.perf_counter()
    session.copy_sample_tables(config.tables, create_indexes=config.create_indexes)
    print_metric("Copy time", format_time(time.perf_counter() - start))
    print_metric("Tables", ", ".join(session.list_tables()))
    print_metric("Indexes", str(len(session.list_indexes())))


def _lazy_queries(session: DatabaseSession, config: DatabaseConfig):
    flights = session.table("flights")
    console.print(f"  [dim]{flights!r}[/dim]")
    print_note("?? rows: the database has not been asked yet.")

    print_step("flights.filter(_.dep_delay > 240)")
    delayed = flights.filter(_.dep_delay > 240)
    console.print(f"[dim]{delayed.show_query()}[/dim]")
    print_frame(delayed.preview(config.preview_rows), max_rows=config.preview_rows)

    print_step("flights.group_by('dest').summarise(delay=_.arr_delay.mean())")
    by_dest = (
        flights.group_by("dest")
        .summarise(n=_.count(), delay=_.arr_delay.mean())
        .arrange(ibis.desc("delay"))
    )
    console.print(f"[dim]{by_dest.show_query()}[/dim]")
    by_dest_df = by_dest.collect()
    print_frame(by_dest_df, title="Arrival delay by destination", max_rows=config.preview_rows)

    if "airlines" in config.tables:
        print_step("flights.count('carrier').left_join(airlines, 'carrier').arrange(desc(n))")
        by_carrier = (
            flights.count("carrier")
            .left_join(session.table("airlines"), "carrier")
            .arrange(ibis.desc("n"))
        )
        print_frame(by_carrier.collect(), title="Flights per airline", max_rows=config.preview_rows)

    return delayed


def _unknowns(delayed):
    print_step("delayed.nrow")
    print_metric("nrow", str(delayed.nrow), color="yellow")
    print_metric("row_count() (runs COUNT(*))", f"{delayed.row_count():,}")

    print_step("delayed.tail()")
    try:
        delayed.tail()
    except UnmaterializedQueryError as e:
        print_metric("Raised", str(e), color="yellow")
    print_metric("collect().tail(1) works", str(delayed.collect().tail(1).height == 1))


def _literal_sql(session: DatabaseSession, config: DatabaseConfig):
    print_step(DELAYED_FLIGHTS_SQL)
    print_frame(session.run_sql(DELAYED_FLIGHTS_SQL), max_rows=config.preview_rows)
    print_note("Same question as the filter above, written by hand.")


def run(config: DatabaseConfig | None = None):
    config = config or DatabaseConfig()
    print_section_header("Experiment 4: Database Session")

    session = DatabaseSession(config.database).connect()
    try:
        _load(session, config)
        if "flights" in config.tables:
            delayed = _lazy_queries(session, config)
            _unknowns(delayed)
            _literal_sql(session, config)
    finally:
        print_step("Disconnecting...")
        session.disconnect()

    console.print("\n[bold green]Key Insights:[/bold green]")
    console.print("  • Verbs on a database table build SQL; collect() runs it")
    console.print("  • show_query() is the fastest way to check what will run")
    console.print("  • Until a query runs, its size and its last rows are unknown")
    console.print("  • Close the connection when you are done")


if __name__ == "__main__":
    run()
