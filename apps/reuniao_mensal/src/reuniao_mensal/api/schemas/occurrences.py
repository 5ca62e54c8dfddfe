"""Occurrence API schemas."""

from __future__ import annotations

from datetime import date, datetime, time

from pydantic import BaseModel, Field

from reuniao_mensal.domain.recurrence_picker import RecurrenceRule, Weekday
from reuniao_mensal.services.occurrence_service import (
    OccurrenceProjection,
    UpcomingOccurrencesProjection,
)


class RecurrenceRuleResponse(BaseModel):
    """Serialized recurrence rule used to compute occurrences."""

    ordinal: int = Field(ge=1, le=5)
    weekday: str
    time_of_day: time
    label: str

    @classmethod
    def from_rule(cls, rule: RecurrenceRule) -> RecurrenceRuleResponse:
        return cls(
            ordinal=rule.ordinal,
            weekday=rule.weekday.name.lower(),
            time_of_day=rule.time_of_day,
            label=rule.describe(),
        )


class OccurrenceResponse(BaseModel):
    """One resolved occurrence."""

    occurrence_date: date
    local_datetime: datetime
    zoned_datetime: datetime
    weekday: str
    rolled_over: bool
    steps_ahead: int = Field(ge=0)

    @classmethod
    def from_projection(cls, projection: OccurrenceProjection) -> OccurrenceResponse:
        return cls(
            occurrence_date=projection.occurrence_date,
            local_datetime=projection.local_datetime,
            zoned_datetime=projection.zoned_datetime,
            weekday=Weekday(projection.occurrence_date.weekday()).name.lower(),
            rolled_over=projection.rolled_over,
            steps_ahead=projection.steps_ahead,
        )


class UpcomingOccurrencesResponse(BaseModel):
    """Upcoming occurrences listing."""

    rule: RecurrenceRuleResponse
    reference_date: date
    timezone: str
    occurrences: list[OccurrenceResponse]

    @classmethod
    def from_projection(
        cls, projection: UpcomingOccurrencesProjection
    ) -> UpcomingOccurrencesResponse:
        return cls(
            rule=RecurrenceRuleResponse.from_rule(projection.rule),
            reference_date=projection.reference_date,
            timezone=projection.timezone,
            occurrences=[
                OccurrenceResponse.from_projection(item)
                for item in projection.occurrences
            ],
        )
