"""
Shared rich console and print helpers for the lab walkthroughs.
"""

import polars as pl
from rich.console import Console
from rich.table import Table

console = Console()


def print_section_header(title: str):
    """Print a formatted section header."""
    console.print(f"\n[bold cyan]{title}[/bold cyan]")


def print_step(step: str):
    """Print a verbose step description."""
    console.print(f"  [dim]→[/dim] {step}")


def print_metric(label: str, value: str, color: str = "green"):
    """Print a formatted metric."""
    console.print(f"  [{color}]✓ {label}:[/{color}] {value}")


def print_note(note: str):
    """Print a teaching note."""
    console.print(f"  [yellow]💡 {note}[/yellow]")


def print_frame(df: pl.DataFrame, title: str | None = None, max_rows: int = 10):
    """Render the head of a DataFrame as a rich table."""
    table = Table(title=title, show_lines=False)
    for name, dtype in df.schema.items():
        table.add_column(f"{name}\n[dim]{dtype}[/dim]")
    for row in df.head(max_rows).iter_rows():
        table.add_row(*("NA" if v is None else _format_value(v) for v in row))
    console.print(table)
    if df.height > max_rows:
        console.print(f"  [dim]… {df.height - max_rows:,} more rows[/dim]")


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.3f}s"


def _format_value(value) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)
