"""Rich renderer for compensation reports.

Transforms CompensationResult objects into formatted Rich tables.
"""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from empcomp.sdk import (
    Classification,
    CompensationResult,
    capabilities,
    get_strategy,
    tokens_for,
)
from empcomp.sdk.operations import format_hours


def render_report(console: Console, result: CompensationResult, summary: str) -> None:
    """Render a single employee report.

    Args:
        console: Rich Console instance
        result: Output of calculate()
        summary: Hours status line from report_hours()
    """
    if result.fallback:
        console.print(Panel(
            f"[yellow]Unknown type '{escape(result.classification)}'. "
            f"Defaulting to {result.resolved}.[/yellow]",
            title="Note",
            border_style="yellow"
        ))

    table = Table(title="Employee Report", box=box.ROUNDED, show_header=False)
    table.add_column("", style="bold", min_width=20)
    table.add_column("", justify="right", min_width=12)

    table.add_row("Name", escape(result.display_name))
    table.add_row("Type", escape(result.classification))
    table.add_row("Hours Worked", _fmt_hours(result.hours_worked))
    table.add_row("Pay", _fmt(result.pay))
    table.add_row("Rewards", _fmt(result.rewards))
    if result.stock_options > 0:
        table.add_row("Stock Options", _fmt(result.stock_options))

    console.print(table)
    console.print(f"\n[cyan]Performance Summary -> {escape(summary)}[/cyan]")


def render_roster(console: Console, results: List[CompensationResult]) -> None:
    """Render one row per employee."""
    table = Table(title="Roster", box=box.ROUNDED)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Hours", justify="right")
    table.add_column("Pay", justify="right")
    table.add_column("Rewards", justify="right")
    table.add_column("Stock Options", justify="right")

    for result in results:
        type_label = escape(result.classification)
        if result.fallback:
            type_label = f"[yellow]{escape(result.classification)} -> {result.resolved}[/yellow]"
        table.add_row(
            escape(result.display_name),
            type_label,
            _fmt_hours(result.hours_worked),
            _fmt(result.pay),
            _fmt(result.rewards),
            _fmt(result.stock_options) if result.stock_options > 0 else "-",
        )

    console.print(table)


def render_types(console: Console) -> None:
    """Render classifications, accepted tokens and capabilities."""
    table = Table(title="Employee Types", box=box.ROUNDED)
    table.add_column("Classification", style="bold")
    table.add_column("Accepted input")
    table.add_column("Capabilities")

    for classification in Classification:
        caps = capabilities(get_strategy(classification))
        table.add_row(
            str(classification),
            ", ".join(tokens_for(classification)),
            ", ".join(sorted(str(c) for c in caps)),
        )

    console.print(table)
    console.print("[dim]Unrecognized input falls back to PartTime.[/dim]")


def _fmt(amount: float | None) -> str:
    """Format currency amount."""
    if amount is None:
        return "n/a"
    return f"${amount:,.2f}"


def _fmt_hours(hours: float) -> str:
    return format_hours(hours)
