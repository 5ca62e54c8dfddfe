from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient
from typer.testing import CliRunner

from reuniao_mensal.api.app import create_app
from reuniao_mensal.cli import app
from reuniao_mensal.skill import handle_command


def _occurrence_lines(output: str) -> list[str]:
    return [
        line.removeprefix("* ").strip()
        for line in output.splitlines()
        if line.startswith("* ")
    ]


def test_cli_skill_and_api_agree_on_upcoming_occurrences() -> None:
    cli_result = CliRunner().invoke(
        app,
        [
            "next",
            "-n",
            "5",
            "-w",
            "friday",
            "-c",
            "3",
            "--reference-date",
            "2025-02-01",
        ],
    )
    assert cli_result.exit_code == 0

    skill_result = handle_command(
        "proxima 5 sexta 3", reference_date=date(2025, 2, 1)
    )

    assert _occurrence_lines(cli_result.stdout) == _occurrence_lines(skill_result)
    assert _occurrence_lines(skill_result) == [
        "March 7, 2025 12:00 (rolled over)",
        "May 2, 2025 12:00 (rolled over)",
        "May 30, 2025 12:00",
    ]

    with TestClient(create_app()) as client:
        response = client.get(
            "/v1/occurrences/upcoming",
            params={
                "ordinal": 5,
                "weekday": "friday",
                "count": 3,
                "reference_date": "2025-02-01",
            },
        )

    assert response.status_code == 200
    assert [item["occurrence_date"] for item in response.json()["occurrences"]] == [
        "2025-03-07",
        "2025-05-02",
        "2025-05-30",
    ]
