"""Business service resolving monthly occurrences for boundary layers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from reuniao_mensal.core.settings import Settings
from reuniao_mensal.domain.calendar_math import is_same_month
from reuniao_mensal.domain.errors import InvalidRequestError, compose_error_message
from reuniao_mensal.domain.recurrence_picker import (
    RecurrencePicker,
    RecurrenceRule,
    Weekday,
)
from reuniao_mensal.domain.zones import attach_zone, resolve_zone, today_in_zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleInput:
    """Optional rule fields; missing values default from settings."""

    ordinal: int | None = None
    weekday: Weekday | str | None = None
    time_of_day: time | None = None


@dataclass(frozen=True, slots=True)
class OccurrenceProjection:
    occurrence_date: date
    local_datetime: datetime
    zoned_datetime: datetime
    rolled_over: bool
    steps_ahead: int


@dataclass(frozen=True, slots=True)
class UpcomingOccurrencesProjection:
    rule: RecurrenceRule
    reference_date: date
    timezone: str
    occurrences: list[OccurrenceProjection]


@dataclass(slots=True)
class OccurrenceService:
    """Builds pickers from request input and projects their occurrences."""

    settings: Settings

    @property
    def zone(self) -> ZoneInfo:
        return resolve_zone(self.settings.app_timezone)

    def build_rule(self, rule_input: RuleInput) -> RecurrenceRule:
        """Combine explicit rule fields with configured defaults."""

        ordinal = (
            rule_input.ordinal
            if rule_input.ordinal is not None
            else self.settings.default_ordinal
        )
        weekday = Weekday.parse(
            rule_input.weekday
            if rule_input.weekday is not None
            else self.settings.default_weekday
        )
        time_of_day = (
            rule_input.time_of_day
            if rule_input.time_of_day is not None
            else self.settings.default_time_of_day
        )
        return RecurrenceRule(ordinal=ordinal, weekday=weekday, time_of_day=time_of_day)

    def build_picker(
        self,
        rule_input: RuleInput,
        reference_date: date | None = None,
    ) -> RecurrencePicker:
        resolved_reference = (
            reference_date if reference_date is not None else today_in_zone(self.zone)
        )
        return RecurrencePicker.from_rule(
            self.build_rule(rule_input),
            reference_date=resolved_reference,
        )

    def get_next_occurrence(
        self,
        rule_input: RuleInput,
        *,
        reference_date: date | None = None,
        steps_ahead: int = 0,
    ) -> OccurrenceProjection:
        """Return one occurrence ``steps_ahead`` cycles after the soonest."""

        picker = self.build_picker(rule_input, reference_date)
        occurrence = picker.next_occurrence_date(steps_ahead)
        logger.info(
            "occurrence_resolved",
            extra={
                "rule": picker.rule.describe(),
                "reference_date": picker.reference_date.isoformat(),
                "steps_ahead": steps_ahead,
                "occurrence": occurrence.isoformat(),
            },
        )
        return self._project(picker.rule, occurrence, steps_ahead)

    def list_upcoming_occurrences(
        self,
        rule_input: RuleInput,
        *,
        count: int,
        reference_date: date | None = None,
    ) -> UpcomingOccurrencesProjection:
        """Return the next ``count`` occurrences, soonest first."""

        if count > self.settings.max_occurrences:
            raise InvalidRequestError(
                message=compose_error_message(
                    cause=(
                        f"count must not exceed {self.settings.max_occurrences}."
                    ),
                    action="Request fewer upcoming occurrences.",
                ),
                details={"count": count},
            )

        picker = self.build_picker(rule_input, reference_date)
        occurrences = picker.upcoming_occurrences(count)
        logger.info(
            "occurrences_resolved",
            extra={
                "rule": picker.rule.describe(),
                "reference_date": picker.reference_date.isoformat(),
                "count": count,
            },
        )
        return UpcomingOccurrencesProjection(
            rule=picker.rule,
            reference_date=picker.reference_date,
            timezone=self.settings.app_timezone,
            occurrences=[
                self._project(picker.rule, occurrence, step)
                for step, occurrence in enumerate(occurrences)
            ],
        )

    def get_occurrence_for_month(
        self,
        rule_input: RuleInput,
        *,
        year: int,
        month: int,
    ) -> OccurrenceProjection:
        """Return the occurrence computed for a given calendar month."""

        month_anchor = date(year=year, month=month, day=1)
        picker = self.build_picker(rule_input, month_anchor)
        occurrence = picker.occurrence_for_month(month_anchor)
        if not is_same_month(occurrence, month_anchor):
            logger.warning(
                "occurrence_rolled_forward",
                extra={
                    "rule": picker.rule.describe(),
                    "requested_month": f"{year:04d}-{month:02d}",
                    "occurrence": occurrence.isoformat(),
                },
            )
        return self._project(picker.rule, occurrence, 0)

    def _project(
        self,
        rule: RecurrenceRule,
        occurrence: date,
        steps_ahead: int,
    ) -> OccurrenceProjection:
        local_datetime = datetime.combine(occurrence, rule.time_of_day)
        return OccurrenceProjection(
            occurrence_date=occurrence,
            local_datetime=local_datetime,
            zoned_datetime=attach_zone(local_datetime, self.zone),
            rolled_over=rule.is_rolled_forward(occurrence),
            steps_ahead=steps_ahead,
        )
