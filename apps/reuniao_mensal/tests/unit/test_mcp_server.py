from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from reuniao_mensal.mcp.server import _build_api_error, create_mcp_server


@dataclass
class FakeRequester:
    responses: dict[tuple[str, str], object]
    calls: list[dict[str, object]] = field(default_factory=list)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool | None] | None = None,
    ) -> object:
        self.calls.append(
            {
                "method": method,
                "path": path,
                "params": dict(params) if params else None,
            }
        )

        value = self.responses[(method, path)]
        if isinstance(value, Exception):
            raise value
        return value


def _server(fake_requester: FakeRequester) -> FastMCP:
    return create_mcp_server(
        api_base_url="http://example.test",
        timeout_seconds=1,
        requester=fake_requester,
    )


def test_create_mcp_server_registers_expected_tools() -> None:
    async def scenario() -> list[str]:
        server = _server(FakeRequester(responses={}))
        async with Client(server) as client:
            tools = await client.list_tools()
        return sorted(tool.name for tool in tools)

    tool_names = asyncio.run(scenario())

    assert tool_names == [
        "get_next_occurrence",
        "get_occurrence_for_month",
        "list_upcoming_occurrences",
    ]


def test_get_next_occurrence_tool_returns_api_payload() -> None:
    expected_payload = {"occurrence_date": "2024-04-17", "rolled_over": False}

    async def scenario() -> tuple[object, dict[str, object]]:
        fake_requester = FakeRequester(
            responses={("GET", "/v1/occurrences/next"): expected_payload}
        )
        async with Client(_server(fake_requester)) as client:
            result = await client.call_tool(
                "get_next_occurrence",
                {
                    "ordinal": 3,
                    "weekday": "wednesday",
                    "reference_date": "2024-03-25",
                },
            )
        return result.data, fake_requester.calls[0]

    tool_result, recorded_call = asyncio.run(scenario())

    assert tool_result == expected_payload
    assert recorded_call == {
        "method": "GET",
        "path": "/v1/occurrences/next",
        "params": {
            "ordinal": 3,
            "weekday": "wednesday",
            "reference_date": "2024-03-25",
        },
    }


def test_list_upcoming_occurrences_tool_forwards_count() -> None:
    async def scenario() -> dict[str, object]:
        fake_requester = FakeRequester(
            responses={("GET", "/v1/occurrences/upcoming"): {"occurrences": []}}
        )
        async with Client(_server(fake_requester)) as client:
            await client.call_tool(
                "list_upcoming_occurrences",
                {"weekday": "quarta", "time_of_day": "19:00", "count": 5},
            )
        return fake_requester.calls[0]

    recorded_call = asyncio.run(scenario())

    assert recorded_call["params"] == {
        "weekday": "quarta",
        "time_of_day": "19:00",
        "count": 5,
    }


def test_get_occurrence_for_month_tool_builds_month_path() -> None:
    async def scenario() -> dict[str, object]:
        fake_requester = FakeRequester(
            responses={("GET", "/v1/months/2025/2/occurrence"): {"ok": True}}
        )
        async with Client(_server(fake_requester)) as client:
            await client.call_tool(
                "get_occurrence_for_month",
                {"year": 2025, "month": 2, "ordinal": 5, "weekday": "friday"},
            )
        return fake_requester.calls[0]

    recorded_call = asyncio.run(scenario())

    assert recorded_call == {
        "method": "GET",
        "path": "/v1/months/2025/2/occurrence",
        "params": {"ordinal": 5, "weekday": "friday"},
    }


def test_get_next_occurrence_tool_rejects_negative_steps() -> None:
    async def scenario() -> None:
        fake_requester = FakeRequester(responses={})
        async with Client(_server(fake_requester)) as client:
            await client.call_tool("get_next_occurrence", {"steps_ahead": -1})

    with pytest.raises(ToolError):
        asyncio.run(scenario())


def test_create_mcp_server_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="greater than zero"):
        create_mcp_server(api_base_url="http://example.test", timeout_seconds=0)


def test_build_api_error_uses_contract_payload_shape() -> None:
    response = httpx.Response(
        status_code=422,
        json={
            "code": "INVALID_CONFIGURATION",
            "message": "Cause: ordinal must be between 1 and 5. Action: retry.",
            "details": {"ordinal": 6},
        },
        request=httpx.Request("GET", "http://example.test/v1/occurrences/next"),
    )

    error_message = _build_api_error(response)

    assert "INVALID_CONFIGURATION" in error_message
    assert "details={'ordinal': 6}" in error_message
