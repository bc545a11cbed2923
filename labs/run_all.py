#!/usr/bin/env python3
"""
Run all labs.

Usage:
    python -m labs.run_all
    python -m labs.run_all --labs 1,4
    python -m labs.run_all --config my_labs.yaml --flow
"""

import argparse
import time

from rich.console import Console
from rich.panel import Panel

from labs.common.config_loader import load_config
from labs.common.logging_config import setup_logging
from labs.registry import LABS, parse_lab_selection, run_lab

console = Console()


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the data wrangling labs")
    parser.add_argument(
        "--labs",
        "-l",
        type=str,
        help="Comma-separated list of lab numbers to run (e.g., '1,3'). Defaults to all.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to labs.yaml (default: uses $LABS_CONFIG, then the bundled file)",
    )
    parser.add_argument(
        "--flow",
        action="store_true",
        help="Run the labs as a Prefect flow",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)

    try:
        to_run = parse_lab_selection(args.labs)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    setup_logging(config.logging.level)

    console.print(
        Panel.fit(
            f"[bold magenta]{config.labs.name} v{config.labs.version}[/bold magenta]\n"
            "[dim]Functions, iteration, transformation verbs and databases[/dim]",
            border_style="magenta",
        )
    )

    console.print(f"\n[cyan]Running {len(to_run)} lab(s):[/cyan]")
    for number in to_run:
        console.print(f"  • Lab {number}: {LABS[number][0]}")

    if args.flow:
        from labs.flows import labs_flow

        labs_flow(to_run, args.config)
        console.print("\n[bold green]✓ Flow complete[/bold green]")
        return 0

    results = []
    total_start = time.perf_counter()

    for number in to_run:
        name = LABS[number][0]
        console.print(f"\n{'=' * 80}")
        start = time.perf_counter()

        try:
            duration = run_lab(number, config)
            results.append((number, name, duration, "✅"))
        except Exception as e:
            duration = time.perf_counter() - start
            results.append((number, name, duration, "❌"))
            console.print(f"\n[red]Error in Lab {number}:[/red]")
            console.print(f"[red]{e}[/red]")

    total_duration = time.perf_counter() - total_start

    console.print(f"\n{'=' * 80}")
    console.print("\n[bold green]Lab Summary:[/bold green]\n")
    for number, name, duration, status in results:
        console.print(f"  {status} Lab {number}: {name} ({duration:.2f}s)")
    console.print(f"\n[bold]Total time:[/bold] {total_duration:.2f}s")

    failed = [r for r in results if r[3] == "❌"]
    if failed:
        return 1

    console.print("\n[bold green]✓ All labs complete[/bold green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
