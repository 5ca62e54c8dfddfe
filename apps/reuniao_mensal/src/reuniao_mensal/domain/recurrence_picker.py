"""Pick the date a monthly recurring event falls on.

A rule such as "third Wednesday of every month" is expressed as an ordinal
(1..5) and a weekday. The picker resolves it against a fixed reference date:

    picker = RecurrencePicker(3, Weekday.WEDNESDAY, reference_date=date(2024, 3, 25))
    picker.next_occurrence_date()   # date(2024, 4, 17)
    picker.next_occurrence_date(1)  # date(2024, 5, 15)

Occurrences are never clamped to the requested month. When a month has fewer
than ``ordinal`` matching weekdays the result rolls into the following month.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from reuniao_mensal.domain.calendar_math import (
    add_months,
    first_weekday_on_or_after,
    month_start,
)
from reuniao_mensal.domain.errors import (
    InvalidConfigurationError,
    InvalidRequestError,
    InvalidStepsAheadError,
    compose_error_message,
)

MIN_ORDINAL = 1
MAX_ORDINAL = 5
NOON = time(12, 0)

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


class Weekday(enum.IntEnum):
    """Weekday values aligned with ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Weekday | int | str) -> Weekday:
        """Resolve a weekday from enum, index, English or PT-BR name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise _unknown_weekday(value) from exc

        normalized = value.strip().lower().removesuffix("-feira")
        try:
            return _WEEKDAY_ALIASES[normalized]
        except KeyError as exc:
            raise _unknown_weekday(value) from exc

    @property
    def label(self) -> str:
        return self.name.capitalize()


_WEEKDAY_ALIASES: dict[str, Weekday] = {
    **{day.name.lower(): day for day in Weekday},
    **{day.name.lower()[:3]: day for day in Weekday},
    "segunda": Weekday.MONDAY,
    "terca": Weekday.TUESDAY,
    "terça": Weekday.TUESDAY,
    "quarta": Weekday.WEDNESDAY,
    "quinta": Weekday.THURSDAY,
    "sexta": Weekday.FRIDAY,
    "sabado": Weekday.SATURDAY,
    "sábado": Weekday.SATURDAY,
    "domingo": Weekday.SUNDAY,
}


def _unknown_weekday(value: object) -> InvalidRequestError:
    return InvalidRequestError(
        message=compose_error_message(
            cause=f"Unknown weekday: {value!r}.",
            action="Use a weekday name such as 'wednesday' or 'quarta'.",
        ),
        details={"weekday": str(value)},
    )


def _out_of_calendar_range(**details: object) -> InvalidRequestError:
    return InvalidRequestError(
        message=compose_error_message(
            cause="Requested occurrence falls outside the supported calendar range.",
            action="Use an earlier reference_date or fewer steps_ahead.",
        ),
        details=details,
    )


def ordinal_label(ordinal: int) -> str:
    """Render 1 as '1st', 2 as '2nd' and so on."""

    return f"{ordinal}{_ORDINAL_SUFFIXES.get(ordinal, 'th')}"


@dataclass(frozen=True, slots=True)
class RecurrenceRule:
    """The Nth occurrence of a weekday within a calendar month."""

    ordinal: int
    weekday: Weekday
    time_of_day: time = NOON

    def __post_init__(self) -> None:
        if not MIN_ORDINAL <= self.ordinal <= MAX_ORDINAL:
            raise InvalidConfigurationError(
                message=compose_error_message(
                    cause=(
                        f"ordinal must be between {MIN_ORDINAL} and "
                        f"{MAX_ORDINAL}, got {self.ordinal}."
                    ),
                    action="Choose the 1st through 5th weekday of the month.",
                ),
                details={"ordinal": self.ordinal},
            )

    def describe(self) -> str:
        """Return a short label such as '3rd Wednesday'."""

        return f"{ordinal_label(self.ordinal)} {self.weekday.label}"

    def is_rolled_forward(self, occurrence: date) -> bool:
        """Return whether occurrence spilled over from the previous month.

        The Nth weekday of a month always falls on day 7*(N-1)+1 or later,
        so an earlier day means the month did not have N such weekdays.
        """

        return occurrence.day <= 7 * (self.ordinal - 1)


class RecurrencePicker:
    """Resolve occurrences of a monthly rule relative to a fixed reference date.

    The reference date is captured once at construction so repeated queries
    on the same picker are consistent. Build a new picker for a new "today".
    """

    __slots__ = ("_reference_date", "_rule")

    def __init__(
        self,
        ordinal: int,
        weekday: Weekday | int | str,
        time_of_day: time = NOON,
        *,
        reference_date: date | None = None,
    ) -> None:
        self._rule = RecurrenceRule(
            ordinal=ordinal,
            weekday=Weekday.parse(weekday),
            time_of_day=time_of_day,
        )
        self._reference_date = (
            reference_date if reference_date is not None else date.today()
        )

    @classmethod
    def from_rule(
        cls,
        rule: RecurrenceRule,
        *,
        reference_date: date | None = None,
    ) -> RecurrencePicker:
        return cls(
            rule.ordinal,
            rule.weekday,
            rule.time_of_day,
            reference_date=reference_date,
        )

    @property
    def rule(self) -> RecurrenceRule:
        return self._rule

    @property
    def reference_date(self) -> date:
        return self._reference_date

    def __repr__(self) -> str:
        return (
            f"RecurrencePicker(rule={self._rule!r}, "
            f"reference_date={self._reference_date!r})"
        )

    def occurrence_for_month(self, month_anchor: date) -> date:
        """Return the occurrence for the month containing month_anchor.

        May fall in the following month when the ordinal does not exist.
        """

        try:
            first_match = first_weekday_on_or_after(
                month_start(month_anchor), self._rule.weekday
            )
            return first_match + timedelta(weeks=self._rule.ordinal - 1)
        except OverflowError as exc:
            raise _out_of_calendar_range(
                month_anchor=month_anchor.isoformat()
            ) from exc

    def next_occurrence_date(self, steps_ahead: int = 0) -> date:
        """Return the occurrence ``steps_ahead`` cycles after the soonest one.

        ``steps_ahead=0`` is the soonest occurrence on or after the reference
        date. Each step moves one month from the resolved occurrence date.
        """

        if steps_ahead < 0:
            raise InvalidStepsAheadError(details={"steps_ahead": steps_ahead})

        occurrence = self.occurrence_for_month(self._reference_date)
        # this month's occurrence already happened
        if occurrence < self._reference_date:
            steps_ahead += 1
        if steps_ahead > 0:
            try:
                month_anchor = add_months(occurrence, steps_ahead)
            except (ValueError, OverflowError) as exc:
                raise _out_of_calendar_range(
                    reference_date=self._reference_date.isoformat(),
                    steps_ahead=steps_ahead,
                ) from exc
            occurrence = self.occurrence_for_month(month_anchor)
        return occurrence

    def next_occurrence_datetime(self, steps_ahead: int = 0) -> datetime:
        """Return the naive local date-time of the selected occurrence."""

        return datetime.combine(
            self.next_occurrence_date(steps_ahead), self._rule.time_of_day
        )

    def upcoming_occurrences(self, count: int) -> list[date]:
        """Return the next ``count`` occurrence dates, soonest first."""

        if count < 1:
            raise InvalidRequestError(
                message=compose_error_message(
                    cause="count must be at least 1.",
                    action="Request one or more upcoming occurrences.",
                ),
                details={"count": count},
            )
        return [self.next_occurrence_date(step) for step in range(count)]

    def upcoming_occurrence_datetimes(self, count: int) -> list[datetime]:
        return [
            datetime.combine(value, self._rule.time_of_day)
            for value in self.upcoming_occurrences(count)
        ]
