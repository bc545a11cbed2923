"""
Experiment 1: Writing Functions

Copy-paste the same calculation over every column and you will eventually get
one of them wrong. Wrap it in a function instead.

Step 1: the repeated code we want to replace
Step 2: first draft of zscale (has an operator precedence bug)
Step 3: fixed zscale with a numeric guard
"""

import polars as pl
from rich.table import Table

from labs.common.console import (
    console,
    print_frame,
    print_metric,
    print_note,
    print_section_header,
    print_step,
)
from labs.common.config_loader import FunctionsConfig

from .config import generate_random_frame
from .zscale import zscale, zscale_as_written


def _show_repetition(df: pl.DataFrame):
    """The copy-paste version, one expression per column."""
    print_step("Standardizing each column by hand (copy-paste)...")
    first = df.columns[0]
    console.print(
        f"  [dim]df.with_columns((pl.col('{first}') - pl.col('{first}').mean()) "
        f"/ pl.col('{first}').std())[/dim]"
    )
    print_note("Change one column name and forget another: the classic copy-paste bug.")


def _compare_drafts(x: pl.Series):
    """Show that the first draft does not produce z-scores."""
    draft = zscale_as_written(x)
    fixed = zscale(x)

    comparison = Table(title=f"Column '{x.name}'")
    comparison.add_column("Statistic", style="cyan")
    comparison.add_column("x - mean(x) / sd(x)", style="red")
    comparison.add_column("(x - mean(x)) / sd(x)", style="green")
    comparison.add_row("mean", f"{draft.mean():.3f}", f"{fixed.mean():.3f}")
    comparison.add_row("sd", f"{draft.std():.3f}", f"{fixed.std():.3f}")
    console.print(comparison)

    print_note("Division binds tighter than subtraction: add parentheses around x - mean(x).")


def _show_guard():
    """Non-numeric input is rejected before any arithmetic happens."""
    print_step("Calling zscale on a text column...")
    try:
        zscale(pl.Series("letters", ["a", "b", "c"]))
    except TypeError as e:
        print_metric("Raised TypeError", str(e), color="yellow")


def run(config: FunctionsConfig | None = None):
    config = config or FunctionsConfig()
    print_section_header("Experiment 1: Writing Functions")

    print_step(f"Generating random table ({config.n_rows} rows)...")
    df = generate_random_frame(config.n_rows, config.columns, config.seed)
    print_frame(df, title="df")

    _show_repetition(df)

    print_step("First draft of zscale...")
    _compare_drafts(df.get_column(config.columns[0]))

    print_step("Applying the fixed zscale to every column...")
    scaled = pl.DataFrame([zscale(df.get_column(name)) for name in df.columns])
    print_frame(scaled, title="zscale(df)")

    _show_guard()

    console.print("\n[bold green]Key Insights:[/bold green]")
    console.print("  • A function gives the calculation one name and one place to fix bugs")
    console.print("  • Check operator precedence in formulas, then check the output")
    console.print("  • Fail early on input you cannot handle")


if __name__ == "__main__":
    run()
