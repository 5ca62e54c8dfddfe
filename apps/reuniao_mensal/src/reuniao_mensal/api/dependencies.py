"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from reuniao_mensal.core.settings import Settings, get_settings
from reuniao_mensal.services.occurrence_service import OccurrenceService


def get_occurrence_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> OccurrenceService:
    """Build occurrence service bound to runtime settings."""

    return OccurrenceService(settings=settings)
