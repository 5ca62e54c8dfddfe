"""Occurrence routes."""

from __future__ import annotations

from datetime import date, time
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from reuniao_mensal.api.dependencies import get_occurrence_service
from reuniao_mensal.api.schemas.occurrences import (
    OccurrenceResponse,
    UpcomingOccurrencesResponse,
)
from reuniao_mensal.services.occurrence_service import OccurrenceService, RuleInput

router = APIRouter(prefix="/occurrences", tags=["Occurrences"])
monthly_router = APIRouter(prefix="/months", tags=["Monthly Occurrences"])

OrdinalQuery = Annotated[int | None, Query(description="1st through 5th weekday")]
WeekdayQuery = Annotated[str | None, Query(examples=["wednesday", "quarta"])]
TimeOfDayQuery = Annotated[time | None, Query(examples=["14:30"])]


@router.get(
    "/next",
    response_model=OccurrenceResponse,
    responses={
        400: {"description": "Invalid query parameters"},
        422: {"description": "Invalid recurrence configuration"},
    },
)
def get_next_occurrence(
    service: Annotated[OccurrenceService, Depends(get_occurrence_service)],
    ordinal: OrdinalQuery = None,
    weekday: WeekdayQuery = None,
    time_of_day: TimeOfDayQuery = None,
    reference_date: Annotated[date | None, Query()] = None,
    steps_ahead: Annotated[int, Query()] = 0,
) -> OccurrenceResponse:
    """Return the soonest occurrence on or after the reference date."""

    projection = service.get_next_occurrence(
        RuleInput(ordinal=ordinal, weekday=weekday, time_of_day=time_of_day),
        reference_date=reference_date,
        steps_ahead=steps_ahead,
    )
    return OccurrenceResponse.from_projection(projection)


@router.get(
    "/upcoming",
    response_model=UpcomingOccurrencesResponse,
    responses={
        400: {"description": "Invalid query parameters"},
        422: {"description": "Invalid recurrence configuration"},
    },
)
def list_upcoming_occurrences(
    service: Annotated[OccurrenceService, Depends(get_occurrence_service)],
    ordinal: OrdinalQuery = None,
    weekday: WeekdayQuery = None,
    time_of_day: TimeOfDayQuery = None,
    reference_date: Annotated[date | None, Query()] = None,
    count: Annotated[int, Query(ge=1)] = 3,
) -> UpcomingOccurrencesResponse:
    """List the next occurrences, soonest first."""

    projection = service.list_upcoming_occurrences(
        RuleInput(ordinal=ordinal, weekday=weekday, time_of_day=time_of_day),
        count=count,
        reference_date=reference_date,
    )
    return UpcomingOccurrencesResponse.from_projection(projection)


@monthly_router.get(
    "/{year}/{month}/occurrence",
    response_model=OccurrenceResponse,
    responses={
        400: {"description": "Invalid path or query parameters"},
        422: {"description": "Invalid recurrence configuration"},
    },
)
def get_occurrence_for_month(
    year: Annotated[int, Path(ge=1, le=9998)],
    month: Annotated[int, Path(ge=1, le=12)],
    service: Annotated[OccurrenceService, Depends(get_occurrence_service)],
    ordinal: OrdinalQuery = None,
    weekday: WeekdayQuery = None,
    time_of_day: TimeOfDayQuery = None,
) -> OccurrenceResponse:
    """Return the occurrence computed for one calendar month."""

    projection = service.get_occurrence_for_month(
        RuleInput(ordinal=ordinal, weekday=weekday, time_of_day=time_of_day),
        year=year,
        month=month,
    )
    return OccurrenceResponse.from_projection(projection)
