"""API request and response schemas."""

from reuniao_mensal.api.schemas.occurrences import (
    OccurrenceResponse,
    RecurrenceRuleResponse,
    UpcomingOccurrencesResponse,
)

__all__ = [
    "OccurrenceResponse",
    "RecurrenceRuleResponse",
    "UpcomingOccurrencesResponse",
]
