from __future__ import annotations

from fastapi.testclient import TestClient


def test_get_next_occurrence_skips_already_passed_month(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next",
        params={
            "ordinal": 3,
            "weekday": "wednesday",
            "reference_date": "2024-03-25",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "occurrence_date": "2024-04-17",
        "local_datetime": "2024-04-17T12:00:00",
        "zoned_datetime": "2024-04-17T12:00:00-03:00",
        "weekday": "wednesday",
        "rolled_over": False,
        "steps_ahead": 0,
    }


def test_get_next_occurrence_combines_time_of_day(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next",
        params={"time_of_day": "14:30", "reference_date": "2024-03-10"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["occurrence_date"] == "2024-03-20"
    assert body["local_datetime"] == "2024-03-20T14:30:00"


def test_get_next_occurrence_with_steps_ahead(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next",
        params={"reference_date": "2024-03-10", "steps_ahead": 2},
    )

    assert response.status_code == 200
    assert response.json()["occurrence_date"] == "2024-05-15"
    assert response.json()["steps_ahead"] == 2


def test_get_next_occurrence_rejects_invalid_ordinal(client: TestClient) -> None:
    response = client.get("/v1/occurrences/next", params={"ordinal": 6})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "INVALID_CONFIGURATION"
    assert body["details"] == {"ordinal": 6}


def test_get_next_occurrence_rejects_negative_steps(client: TestClient) -> None:
    response = client.get("/v1/occurrences/next", params={"steps_ahead": -1})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_STEPS_AHEAD"


def test_get_next_occurrence_rejects_unknown_weekday(client: TestClient) -> None:
    response = client.get("/v1/occurrences/next", params={"weekday": "funday"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"
    assert response.json()["details"] == {"weekday": "funday"}


def test_get_next_occurrence_rejects_malformed_date(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next", params={"reference_date": "2024-13-40"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"
    assert "errors" in response.json()["details"]


def test_get_next_occurrence_rejects_steps_beyond_calendar(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next",
        params={
            "ordinal": 3,
            "weekday": "wednesday",
            "reference_date": "2024-03-10",
            "steps_ahead": 200000,
        },
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_REQUEST"
    assert body["details"] == {"reference_date": "2024-03-10", "steps_ahead": 200000}


def test_get_next_occurrence_rejects_reference_at_calendar_end(
    client: TestClient,
) -> None:
    response = client.get(
        "/v1/occurrences/next", params={"reference_date": "9999-12-25"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_get_next_occurrence_accepts_weekday_index(client: TestClient) -> None:
    response = client.get(
        "/v1/occurrences/next",
        params={"ordinal": 3, "weekday": "2", "reference_date": "2024-03-10"},
    )

    assert response.status_code == 200
    assert response.json()["occurrence_date"] == "2024-03-20"
