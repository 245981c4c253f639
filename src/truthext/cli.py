from __future__ import annotations

import logging
from calendar import Month
from datetime import datetime, timedelta, timezone
from pathlib import Path

import typer

logger = logging.getLogger(__name__)

app = typer.Typer(name="truthext", help="Inspect the calendar values truthext asserts about")
config_app = typer.Typer(name="config", help="Validate config files and export their schema")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    debug_file: str | None = typer.Option(
        None, "--debug-file", help="Append derivation and failure logs to this file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Write derivation and failure logs to stderr"
    ),
):
    if debug_file is None and not verbose:
        return

    from truthext.verbose import setup_logger

    setup_logger(Path(debug_file) if debug_file else None, verbose=verbose)


@app.command()
def months(
    leap: bool = typer.Option(False, "--leap", help="Show lengths for a leap year"),
):
    """Print month lengths, year offsets and quarter starts."""
    from truthext import arithmetic

    typer.echo("month      min  max  length  first_day  quarter_start")
    for month in Month:
        typer.echo(
            f"{month.name:<10} {arithmetic.month_min_length(month):>3}  "
            f"{arithmetic.month_max_length(month):>3}  "
            f"{arithmetic.month_length(month, leap):>6}  "
            f"{arithmetic.first_day_of_year(month, leap):>9}  "
            f"{arithmetic.first_month_of_quarter(month).name}"
        )


@app.command()
def epoch(
    value: str = typer.Argument(help="ISO-8601 date-time"),
    offset: float | None = typer.Option(
        None, help="Offset in hours for values without one (default: UTC)"
    ),
):
    """Print the epoch second, millisecond and day of a date-time."""
    from truthext import arithmetic
    from truthext.subjects.instants import assert_that

    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            zone = timezone.utc if offset is None else timezone(timedelta(hours=offset))
            parsed = arithmetic.attach_zone(parsed, zone)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    logger.debug(f"Parsed {value!r} as {parsed.isoformat()}")

    instant = assert_that(parsed)
    try:
        millis = instant.epoch_milli().actual
    except OverflowError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"instant: {instant.at_utc().actual.isoformat()}")
    typer.echo(f"epoch_second: {instant.epoch_second().actual}")
    typer.echo(f"epoch_milli: {millis}")
    typer.echo(f"epoch_day: {instant.epoch_day().actual}")


@config_app.command("validate")
def config_validate(
    path: str = typer.Argument(help="Path to a truthext YAML config"),
):
    """Load a config file and report whether it is valid."""
    from pydantic import ValidationError

    from truthext.config import load_config

    config_path = Path(path)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {path}", err=True)
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
    except (ValidationError, ValueError) as e:
        logger.info(f"Rejected config {config_path}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.info(f"Loaded config {config_path}")
    typer.echo(f"Config OK: {config.model_dump()}")


@config_app.command("schema")
def config_schema(
    out: str = typer.Option("truthext.schema.json", help="Output path for JSON schema"),
):
    """Write the JSON schema of the config file format."""
    from truthext.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
