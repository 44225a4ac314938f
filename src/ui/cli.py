"""Typer-based command line interface for rendering bankroll charts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.config import CHART_THEME, LOG_LEVEL, OUTPUT_PATH
from src.core.data_loader import SeriesLoader
from src.core.domain import compute_domain
from src.core.extrema import shown_labels
from src.core.split_point import compute_split_fraction
from src.core.validator import InvalidInput
from src.visualization import THEME_MAP, build_split_area_chart, resolve_theme
from src.visualization.figure_utils import format_currency

app = typer.Typer(help="Render simulation bankroll series as split profit/loss charts")
console = Console()


def _check_theme(value: str) -> str:
    if value.lower() not in THEME_MAP:
        raise typer.BadParameter(
            f"Unknown theme {value!r}; choose from {', '.join(sorted(THEME_MAP))}"
        )
    return value.lower()


@app.callback()
def configure(
    log_level: str = typer.Option(LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING...)"),
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(input_path: Path):
    try:
        return SeriesLoader().load(input_path).steps
    except InvalidInput as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.command()
def render(
    input_path: Path = typer.Argument(..., help="CSV or JSON file with the series"),
    reference: float = typer.Option(..., "--reference", "-r", help="Starting bankroll"),
    max_steps: Optional[int] = typer.Option(None, help="Stretch the x axis to this many steps"),
    theme: str = typer.Option(
        CHART_THEME, callback=_check_theme, help="Chart theme (dark/light)"
    ),
    output: Path = typer.Option(OUTPUT_PATH, help="Destination HTML file"),
    title: Optional[str] = typer.Option(None, help="Optional chart title"),
) -> None:
    """Render the chart to a standalone HTML file."""
    steps = _load(input_path)
    domain = compute_domain(steps, reference)
    fraction = compute_split_fraction(domain, reference)

    figure = build_split_area_chart(
        steps,
        reference,
        max_steps=max_steps,
        theme=resolve_theme(theme),
        title=title,
    )
    output.parent.mkdir(parents=True, exist_ok=True)
    figure.write_html(output, include_plotlyjs="cdn")

    console.print(f"Domain: {domain.min:,.2f} to {domain.max:,.2f}")
    console.print(f"Split fraction: {fraction:.4f}")
    console.print(f"[bold green]Chart written to:[/bold green] {output}")


@app.command()
def labels(
    input_path: Path = typer.Argument(..., help="CSV or JSON file with the series"),
    reference: float = typer.Option(..., "--reference", "-r", help="Starting bankroll"),
) -> None:
    """List the points that receive value labels."""
    steps = _load(input_path)
    table = Table(title="Labelled Points", show_lines=False)
    table.add_column("Step", justify="right")
    table.add_column("Bankroll", justify="right")
    table.add_column("Position")
    table.add_column("Side")
    for decision in shown_labels(steps, reference):
        side = "[green]above[/green]" if decision.is_above_reference else "[red]below[/red]"
        table.add_row(
            str(decision.index),
            format_currency(decision.value),
            decision.position.value,
            side,
        )
    console.print(table)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
