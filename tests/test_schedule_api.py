"""Integration tests for the schedule API endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


def _draft(**overrides) -> dict:
    payload = {
        "name": "Lunch lift",
        "focus": "Strength",
        "intensity": "High",
        "day": "Tuesday",
        "start": "12:00",
        "duration": 45,
        "location": "Main Floor",
        "notes": "Bench triples",
    }
    payload.update(overrides)
    return payload


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_sessions_starts_with_default_week(test_client: TestClient):
    response = test_client.get("/api/schedule/sessions")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 6
    assert data[0]["name"] == "Lower Body Power"
    assert data[0]["day"] == "Monday"
    assert data[0]["start"] == "06:30"


def test_create_session(test_client: TestClient):
    response = test_client.post("/api/schedule/sessions", json=_draft())

    assert response.status_code == 201
    data = response.json()
    assert len(data) == 7
    created = next(s for s in data if s["name"] == "Lunch lift")
    assert created["id"]
    assert created["completed"] is False
    # Tuesday 07:00 template session comes before the 12:00 one
    names = [s["name"] for s in data]
    assert names.index("Upper Body Push-Pull") < names.index("Lunch lift")


def test_create_session_truncates_long_text(test_client: TestClient):
    response = test_client.post(
        "/api/schedule/sessions",
        json=_draft(name="x" * 100, location="y" * 80, notes="z" * 300),
    )

    assert response.status_code == 201
    created = next(s for s in response.json() if s["name"].startswith("x"))
    assert len(created["name"]) == 60
    assert len(created["location"]) == 60
    assert len(created["notes"]) == 220


def test_create_session_invalid_payload(test_client: TestClient):
    assert test_client.post("/api/schedule/sessions", json=_draft(focus="Yoga")).status_code == 422
    assert test_client.post("/api/schedule/sessions", json=_draft(start="25:00")).status_code == 422
    assert test_client.post("/api/schedule/sessions", json=_draft(day="Someday")).status_code == 422


def test_get_session(test_client: TestClient):
    session_id = test_client.get("/api/schedule/sessions").json()[2]["id"]

    response = test_client.get(f"/api/schedule/sessions/{session_id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Tempo Run + Intervals"


def test_unknown_session_returns_404(test_client: TestClient):
    assert test_client.get("/api/schedule/sessions/missing").status_code == 404
    assert test_client.put("/api/schedule/sessions/missing", json=_draft()).status_code == 404
    assert test_client.delete("/api/schedule/sessions/missing").status_code == 404
    assert test_client.post("/api/schedule/sessions/missing/toggle").status_code == 404
    assert len(test_client.get("/api/schedule/sessions").json()) == 6


def test_update_session(test_client: TestClient):
    session_id = test_client.get("/api/schedule/sessions").json()[0]["id"]

    response = test_client.put(
        f"/api/schedule/sessions/{session_id}",
        json=_draft(name="Moved to Sunday", day="Sunday", start="11:00"),
    )

    assert response.status_code == 200
    data = response.json()
    assert data[-1]["id"] == session_id
    assert data[-1]["name"] == "Moved to Sunday"


@pytest.mark.parametrize("flag, expected", [("false", False), ("true", True), ("0", False)])
def test_update_session_parses_completed_strings(test_client: TestClient, flag, expected):
    session_id = test_client.get("/api/schedule/sessions").json()[0]["id"]
    test_client.post(f"/api/schedule/sessions/{session_id}/toggle")

    response = test_client.put(
        f"/api/schedule/sessions/{session_id}",
        json=_draft(completed=flag),
    )

    assert response.status_code == 200
    updated = next(item for item in response.json() if item["id"] == session_id)
    assert updated["completed"] is expected


def test_update_session_rejects_unparseable_completed(test_client: TestClient):
    session_id = test_client.get("/api/schedule/sessions").json()[0]["id"]

    response = test_client.put(
        f"/api/schedule/sessions/{session_id}",
        json=_draft(completed="maybe"),
    )

    assert response.status_code == 422


def test_delete_session(test_client: TestClient):
    session_id = test_client.get("/api/schedule/sessions").json()[0]["id"]

    response = test_client.delete(f"/api/schedule/sessions/{session_id}")

    assert response.status_code == 200
    assert session_id not in [s["id"] for s in response.json()]


def test_toggle_session_and_summary(test_client: TestClient):
    session_id = test_client.get("/api/schedule/sessions").json()[0]["id"]

    response = test_client.post(f"/api/schedule/sessions/{session_id}/toggle")
    assert response.status_code == 200
    assert response.json()[0]["completed"] is True

    summary = test_client.get("/api/schedule/summary").json()
    assert summary["session_count"] == 6
    assert summary["weekly_minutes"] == 320
    assert summary["weekly_volume"] == "5h 20m"
    assert summary["completion_rate"] == 17
    strength = next(v for v in summary["focus_volume"] if v["focus"] == "Strength")
    assert strength == {"focus": "Strength", "total_minutes": 75, "completed_minutes": 75}


def test_week_board(test_client: TestClient):
    response = test_client.get("/api/schedule/week")

    assert response.status_code == 200
    board = response.json()
    assert [column["day"] for column in board] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]
    monday = board[0]
    assert monday["total_minutes"] == 75
    assert monday["total_duration"] == "1h 15m"
    assert monday["sessions"][0]["end"] == "07:45"
    assert board[6]["sessions"] == []


def test_auto_balance_resets_week(test_client: TestClient):
    test_client.post("/api/schedule/sessions", json=_draft(name="Extra"))

    response = test_client.post("/api/schedule/auto-balance")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 6
    assert "Extra" not in [s["name"] for s in data]


def test_templates(test_client: TestClient):
    response = test_client.get("/api/schedule/templates")

    assert response.status_code == 200
    templates = response.json()
    assert len(templates) == 6
    assert templates[5]["name"] == "Active Recovery Ride"


def test_template_draft(test_client: TestClient):
    response = test_client.get("/api/schedule/templates/1/draft")

    assert response.status_code == 200
    draft = response.json()
    assert draft["name"] == "Upper Body Push-Pull"
    assert draft["day"] == "Monday"
    assert draft["start"] == "07:00"

    assert test_client.get("/api/schedule/templates/9/draft").status_code == 404
