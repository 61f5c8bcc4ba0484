"""Typer CLI interface for vehicletax."""

import logging

import typer

from vehicletax.exceptions import VehicleTaxError
from vehicletax.formatting import DEFAULT_LOCALE, NumberFormatter

app = typer.Typer(
    name="vehicletax",
    help="Monthly engine-related vehicle insurance tax calculator.",
)

LOCALE_OPTION = typer.Option(
    DEFAULT_LOCALE,
    "--locale",
    "-l",
    envvar="VEHICLETAX_LOCALE",
    help="Locale for number and currency formatting (de-AT, de-DE, en-US, en-GB)",
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Monthly engine-related vehicle insurance tax calculator."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _formatter(locale: str) -> NumberFormatter:
    try:
        return NumberFormatter(locale)
    except VehicleTaxError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def calculate(
    power: float = typer.Argument(..., help="Engine power in kW"),
    weight: float = typer.Argument(..., help="Vehicle weight in kg"),
    locale: str = LOCALE_OPTION,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the full result as JSON instead of the text breakdown",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log computation details to stderr",
    ),
) -> None:
    """Compute the monthly tax for a vehicle and print the breakdown."""
    from vehicletax.engines.aggregator import TaxResultAggregator
    from vehicletax.reports.breakdown import BreakdownReportGenerator

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    formatter = _formatter(locale)
    try:
        result = TaxResultAggregator(formatter).compute_combined(power, weight)
    except VehicleTaxError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    typer.echo(BreakdownReportGenerator().render(result, formatter))


@app.command()
def schedule(locale: str = LOCALE_OPTION) -> None:
    """Show the configured power and weight brackets."""
    from rich.console import Console
    from rich.table import Table

    from vehicletax.engines.brackets import SCHEDULES

    formatter = _formatter(locale)
    console = Console()
    for dimension, sched in SCHEDULES.items():
        tbl = Table(
            title=f"{dimension.value.title()} ({sched.unit})",
            caption=(
                f"Reduction {formatter.format_number(sched.reduction)} {sched.unit}, "
                f"minimum {formatter.format_number(sched.floor)} {sched.unit}"
            ),
            show_header=True,
        )
        tbl.add_column("Bracket", style="cyan")
        tbl.add_column("From", justify="right")
        tbl.add_column("To", justify="right")
        tbl.add_column("Rate", justify="right", style="green")
        for bracket in sched.brackets:
            tbl.add_row(
                bracket.label,
                formatter.format_number(bracket.start),
                "∞" if bracket.end is None else formatter.format_number(bracket.end),
                bracket.format_rate(),
            )
        console.print(tbl)


if __name__ == "__main__":
    app()
