"""Plain-text rendering shared by CLI and skill outputs."""

from __future__ import annotations

from reuniao_mensal.services.occurrence_service import (
    OccurrenceProjection,
    UpcomingOccurrencesProjection,
)


def format_occurrence(projection: OccurrenceProjection) -> str:
    """Render an occurrence as 'April 17, 2024 12:00'."""

    value = projection.local_datetime
    line = f"{value:%B} {value.day}, {value.year} {value:%H:%M}"
    if projection.rolled_over:
        line += " (rolled over)"
    return line


def render_upcoming_lines(projection: UpcomingOccurrencesProjection) -> list[str]:
    """Return header lines followed by one bullet per occurrence."""

    return [
        f"Regra: {projection.rule.describe()}",
        f"Referencia: {projection.reference_date.isoformat()}",
        *(f"* {format_occurrence(item)}" for item in projection.occurrences),
    ]
