"""MCP server exposing reuniao_mensal API capabilities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx
from fastmcp import FastMCP

from reuniao_mensal.core.settings import get_settings

ParamValue = str | int | float | bool | None
ParamsMapping = Mapping[str, ParamValue]


class APIRequester(Protocol):
    """Requester abstraction to simplify HTTP boundary testing."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: ParamsMapping | None = None,
    ) -> object: ...


@dataclass(slots=True, frozen=True)
class HTTPAPIRequester:
    """HTTP client wrapper for reuniao_mensal API."""

    base_url: str
    timeout_seconds: float

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: ParamsMapping | None = None,
    ) -> object:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
        ) as client:
            response = await client.request(method=method, url=path, params=params)

        if response.is_success:
            return _parse_json_response(response)
        raise RuntimeError(_build_api_error(response))


def _parse_json_response(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError as exc:
        raise RuntimeError(
            f"API returned a non-JSON response with status {response.status_code}."
        ) from exc


def _build_api_error(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        if text:
            return f"API request failed with status {response.status_code}: {text}"
        return f"API request failed with status {response.status_code}."

    if isinstance(payload, Mapping):
        error_code = payload.get("code")
        error_message = payload.get("message")
        details = payload.get("details")
        if isinstance(error_code, str) and isinstance(error_message, str):
            if details is None:
                return f"API error {error_code}: {error_message}"
            return f"API error {error_code}: {error_message} | details={details}"

    return f"API request failed with status {response.status_code}: {payload}"


def _normalize_base_url(value: str) -> str:
    return value.rstrip("/")


def _rule_params(
    ordinal: int | None,
    weekday: str | None,
    time_of_day: str | None,
) -> dict[str, ParamValue]:
    params: dict[str, ParamValue] = {}
    if ordinal is not None:
        params["ordinal"] = ordinal
    if weekday is not None:
        params["weekday"] = weekday
    if time_of_day is not None:
        params["time_of_day"] = time_of_day
    return params


def create_mcp_server(
    *,
    api_base_url: str | None = None,
    timeout_seconds: float | None = None,
    requester: APIRequester | None = None,
) -> FastMCP:
    """Create MCP server with tools mapped to REST endpoints."""

    settings = get_settings()
    resolved_base_url = _normalize_base_url(api_base_url or settings.mcp_api_base_url)
    resolved_timeout = (
        settings.mcp_api_timeout_seconds if timeout_seconds is None else timeout_seconds
    )
    if resolved_timeout <= 0:
        raise ValueError("MCP API timeout must be greater than zero.")

    mcp = FastMCP(name="Reuniao Mensal")
    api_requester: APIRequester = requester or HTTPAPIRequester(
        base_url=resolved_base_url,
        timeout_seconds=resolved_timeout,
    )

    @mcp.tool
    async def get_next_occurrence(
        ordinal: int | None = None,
        weekday: str | None = None,
        time_of_day: str | None = None,
        reference_date: str | None = None,
        steps_ahead: int = 0,
    ) -> object:
        """Return the soonest occurrence of a monthly weekday rule."""

        if steps_ahead < 0:
            raise ValueError("steps_ahead must not be negative.")

        params = _rule_params(ordinal, weekday, time_of_day)
        if reference_date is not None:
            params["reference_date"] = reference_date
        if steps_ahead:
            params["steps_ahead"] = steps_ahead
        return await api_requester.request(
            "GET",
            "/v1/occurrences/next",
            params=params if params else None,
        )

    @mcp.tool
    async def list_upcoming_occurrences(
        ordinal: int | None = None,
        weekday: str | None = None,
        time_of_day: str | None = None,
        reference_date: str | None = None,
        count: int = 3,
    ) -> object:
        """List upcoming occurrences of a monthly weekday rule."""

        params = _rule_params(ordinal, weekday, time_of_day)
        params["count"] = count
        if reference_date is not None:
            params["reference_date"] = reference_date
        return await api_requester.request(
            "GET",
            "/v1/occurrences/upcoming",
            params=params,
        )

    @mcp.tool
    async def get_occurrence_for_month(
        year: int,
        month: int,
        ordinal: int | None = None,
        weekday: str | None = None,
        time_of_day: str | None = None,
    ) -> object:
        """Return the occurrence computed for one calendar month."""

        params = _rule_params(ordinal, weekday, time_of_day)
        return await api_requester.request(
            "GET",
            f"/v1/months/{year}/{month}/occurrence",
            params=params if params else None,
        )

    return mcp
