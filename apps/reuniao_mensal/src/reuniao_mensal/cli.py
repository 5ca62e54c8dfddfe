"""CLI bootstrap for reuniao-mensal."""

from datetime import datetime, time

import typer

from reuniao_mensal.core.settings import get_settings
from reuniao_mensal.domain.errors import DomainError, InvalidRequestError
from reuniao_mensal.reporting.occurrence_report import (
    format_occurrence,
    render_upcoming_lines,
)
from reuniao_mensal.services.occurrence_service import OccurrenceService, RuleInput

app = typer.Typer(help="CLI for monthly recurring event dates.")

ORDINAL_OPTION = typer.Option(None, "--ordinal", "-n", help="1st through 5th.")
WEEKDAY_OPTION = typer.Option(None, "--weekday", "-w", help="e.g. wednesday.")
TIME_OPTION = typer.Option(None, "--time", "-t", help="Time of day as HH:MM.")
COUNT_OPTION = typer.Option(3, "--count", "-c", min=1)
REFERENCE_DATE_OPTION = typer.Option(
    None,
    "--reference-date",
    formats=["%Y-%m-%d"],
    help="Date treated as today (YYYY-MM-DD).",
)


def _parse_time(value: str | None) -> time | None:
    if value is None:
        return None
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise InvalidRequestError(
            message=f"Invalid time of day: {value!r}. Use HH:MM.",
            details={"time_of_day": value},
        ) from exc


def _service() -> OccurrenceService:
    return OccurrenceService(settings=get_settings())


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("reuniao-mensal is ready")


@app.command("next")
def next_occurrences(
    ordinal: int | None = ORDINAL_OPTION,
    weekday: str | None = WEEKDAY_OPTION,
    time_of_day: str | None = TIME_OPTION,
    count: int = COUNT_OPTION,
    reference_date: datetime | None = REFERENCE_DATE_OPTION,
) -> None:
    """Print the next occurrences of a monthly rule."""
    try:
        projection = _service().list_upcoming_occurrences(
            RuleInput(
                ordinal=ordinal,
                weekday=weekday,
                time_of_day=_parse_time(time_of_day),
            ),
            count=count,
            reference_date=reference_date.date() if reference_date else None,
        )
    except DomainError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    for line in render_upcoming_lines(projection):
        typer.echo(line)


@app.command("month")
def month_occurrence(
    year: int = typer.Argument(..., min=1, max=9998),
    month: int = typer.Argument(..., min=1, max=12),
    ordinal: int | None = ORDINAL_OPTION,
    weekday: str | None = WEEKDAY_OPTION,
    time_of_day: str | None = TIME_OPTION,
) -> None:
    """Print the occurrence computed for one calendar month."""
    try:
        projection = _service().get_occurrence_for_month(
            RuleInput(
                ordinal=ordinal,
                weekday=weekday,
                time_of_day=_parse_time(time_of_day),
            ),
            year=year,
            month=month,
        )
    except DomainError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(format_occurrence(projection))


def main() -> None:
    """Run the reuniao-mensal CLI application."""
    app()


if __name__ == "__main__":
    main()
