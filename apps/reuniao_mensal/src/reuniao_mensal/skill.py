"""OpenClaw skill bootstrap for reuniao-mensal."""

from __future__ import annotations

from datetime import date, time

from reuniao_mensal.core.settings import get_settings
from reuniao_mensal.domain.errors import DomainError
from reuniao_mensal.reporting.occurrence_report import render_upcoming_lines
from reuniao_mensal.services.occurrence_service import OccurrenceService, RuleInput

COMMAND_PREFIX = "proxima "
USAGE = (
    "Unsupported command. Use: proxima <ordinal> <weekday> [count] [HH:MM], "
    "e.g. proxima 3 quarta 3 19:00."
)


def _parse_arguments(tokens: list[str]) -> tuple[RuleInput, int] | None:
    if len(tokens) < 2 or len(tokens) > 4:
        return None

    try:
        ordinal = int(tokens[0])
    except ValueError:
        return None

    count = 1
    time_of_day: time | None = None
    for token in tokens[2:]:
        try:
            if ":" in token:
                time_of_day = time.fromisoformat(token)
            else:
                count = int(token)
        except ValueError:
            return None

    return RuleInput(ordinal=ordinal, weekday=tokens[1], time_of_day=time_of_day), count


def handle_command(command_text: str, *, reference_date: date | None = None) -> str:
    """Handle skill commands and return a summary of upcoming occurrences."""
    normalized_command = command_text.strip()
    if not normalized_command:
        return "Provide a command to look up the next occurrences."

    if not normalized_command.startswith(COMMAND_PREFIX):
        return USAGE

    parsed = _parse_arguments(
        normalized_command.removeprefix(COMMAND_PREFIX).split()
    )
    if parsed is None:
        return USAGE

    rule_input, count = parsed
    service = OccurrenceService(settings=get_settings())
    try:
        projection = service.list_upcoming_occurrences(
            rule_input,
            count=count,
            reference_date=reference_date,
        )
    except DomainError as exc:
        return exc.message

    return "\n".join(render_upcoming_lines(projection))
