"""Timezone boundary helpers for occurrence date-times."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from reuniao_mensal.domain.errors import (
    InvalidConfigurationError,
    compose_error_message,
)

DEFAULT_TIMEZONE = "America/Sao_Paulo"


def resolve_zone(name: str | None) -> ZoneInfo:
    """Return the named IANA zone, falling back to the default one."""

    zone_name = (name or DEFAULT_TIMEZONE).strip()
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidConfigurationError(
            message=compose_error_message(
                cause=f"Unknown timezone: {zone_name!r}.",
                action="Use an IANA timezone name such as 'America/Sao_Paulo'.",
            ),
            details={"timezone": zone_name},
        ) from exc


def attach_zone(value: datetime, zone: ZoneInfo) -> datetime:
    """Attach zone to a naive local value or convert an aware one."""

    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def today_in_zone(zone: ZoneInfo) -> date:
    """Return the current calendar date as seen in zone."""

    return datetime.now(tz=zone).date()
