"""Tests for stateless planner endpoints."""

from typing import Any

import pytest
from fastapi.testclient import TestClient


def _activity(activity_id: int, price: float) -> dict[str, Any]:
    return {
        "id": activity_id,
        "name": f"Activity {activity_id}",
        "description": "",
        "price": price,
        "duration": "1h",
        "startTime": "09:00",
    }


@pytest.fixture
def days(client: TestClient) -> list[dict[str, Any]]:
    response = client.post(
        "/api/planner/days", json={"startDate": "2024-06-01", "endDate": "2024-06-03"}
    )
    return response.json()["days"]


def _apply(client: TestClient, days: list[dict[str, Any]], operation: dict[str, Any]) -> dict[str, Any]:
    response = client.post("/api/planner/apply", json={"days": days, "operation": operation})
    assert response.status_code == 200, response.text
    return response.json()


def test_derive_days(days: list[dict[str, Any]]) -> None:
    assert [d["date"] for d in days] == ["2024-06-01", "2024-06-02", "2024-06-03"]
    assert all(d["activities"] == [] for d in days)


def test_derive_rejects_inverted_range(client: TestClient) -> None:
    response = client.post(
        "/api/planner/days", json={"startDate": "2024-06-05", "endDate": "2024-06-01"}
    )

    assert response.status_code == 422


def test_derive_carries_content_by_position(client: TestClient, days: list[dict[str, Any]]) -> None:
    days[1]["notes"] = "museum day"

    response = client.post(
        "/api/planner/days",
        json={"startDate": "2024-07-01", "endDate": "2024-07-02", "days": days},
    )

    data = response.json()
    assert [d["date"] for d in data["days"]] == ["2024-07-01", "2024-07-02"]
    assert data["days"][1]["notes"] == "museum day"


def test_walkthrough(client: TestClient, days: list[dict[str, Any]]) -> None:
    """Add, book, drag: total follows each edit."""
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 0, "activity": _activity(1, 25)})
    assert state["totalCost"] == 25

    state = _apply(
        client,
        state["days"],
        {
            "op": "set_accommodation",
            "dayIndex": 0,
            "accommodation": {"hotelId": 1, "name": "Hotel", "price": 100},
        },
    )
    assert state["totalCost"] == 125

    state = _apply(
        client,
        state["days"],
        {
            "op": "relocate_activity",
            "source": {"dayIndex": 0, "index": 0},
            "destination": {"dayIndex": 1, "index": 0},
        },
    )
    assert state["days"][0]["activities"] == []
    assert state["days"][0]["accommodation"]["price"] == 100
    assert len(state["days"][1]["activities"]) == 1
    assert state["totalCost"] == 125


def test_cancelled_drag_is_noop(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 0, "activity": _activity(1, 25)})

    after = _apply(
        client, state["days"], {"op": "relocate_activity", "source": {"dayIndex": 0, "index": 0}}
    )

    assert after["days"] == state["days"]


def test_update_activity_start_time(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 2, "activity": _activity(4, 10)})

    state = _apply(
        client,
        state["days"],
        {"op": "update_activity", "dayIndex": 2, "activityIndex": 0, "changes": {"startTime": "15:45"}},
    )

    assert state["days"][2]["activities"][0]["startTime"] == "15:45"
    assert state["days"][2]["activities"][0]["price"] == 10


def test_clear_transportation_with_null(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(
        client,
        days,
        {
            "op": "set_transportation",
            "dayIndex": 1,
            "transportation": {"type": "train", "from": "Paris", "to": "Lyon", "price": 60},
        },
    )
    assert state["totalCost"] == 60

    state = _apply(
        client, state["days"], {"op": "set_transportation", "dayIndex": 1, "transportation": None}
    )
    assert state["days"][1]["transportation"] is None
    assert state["totalCost"] == 0


def test_stale_indices_are_noops(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "remove_activity", "dayIndex": 0, "activityIndex": 3})
    assert state["days"] == days

    state = _apply(client, days, {"op": "set_notes", "dayIndex": 9, "notes": "lost"})
    assert state["days"] == days


def test_notes_and_resets(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "set_notes", "dayIndex": 0, "notes": "arrive late"})
    assert state["days"][0]["notes"] == "arrive late"

    state = _apply(client, state["days"], {"op": "reset_day", "dayIndex": 0})
    assert state["days"][0]["notes"] == ""

    state = _apply(client, state["days"], {"op": "add_activity", "dayIndex": 1, "activity": _activity(2, 5)})
    state = _apply(client, state["days"], {"op": "reset_all"})
    assert state["totalCost"] == 0


def test_unknown_operation_rejected(client: TestClient, days: list[dict[str, Any]]) -> None:
    response = client.post("/api/planner/apply", json={"days": days, "operation": {"op": "teleport"}})

    assert response.status_code == 422


def test_cost_breakdown(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 0, "activity": _activity(1, 12.5)})
    state = _apply(
        client,
        state["days"],
        {
            "op": "set_accommodation",
            "dayIndex": 1,
            "accommodation": {"hotelId": 2, "name": "Inn", "price": 80},
        },
    )

    breakdown = client.post("/api/planner/cost", json={"days": state["days"]}).json()

    assert breakdown == {
        "activities": 12.5,
        "accommodation": 80,
        "transportation": 0,
        "total": 92.5,
    }


def test_update_activity_clears_start_time_with_null(
    client: TestClient, days: list[dict[str, Any]]
) -> None:
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 0, "activity": _activity(4, 10)})

    state = _apply(
        client,
        state["days"],
        {"op": "update_activity", "dayIndex": 0, "activityIndex": 0, "changes": {"startTime": None}},
    )

    activity = state["days"][0]["activities"][0]
    assert activity["startTime"] is None
    assert activity["name"] == "Activity 4"
    assert activity["price"] == 10


def test_update_activity_ignores_null_price(client: TestClient, days: list[dict[str, Any]]) -> None:
    state = _apply(client, days, {"op": "add_activity", "dayIndex": 0, "activity": _activity(4, 10)})

    state = _apply(
        client,
        state["days"],
        {"op": "update_activity", "dayIndex": 0, "activityIndex": 0, "changes": {"price": None}},
    )

    assert state["days"][0]["activities"][0]["price"] == 10


class TestCatalogOperations:
    def test_add_catalog_activity_copies_snapshot(
        self, client: TestClient, days: list[dict[str, Any]]
    ) -> None:
        state = _apply(client, days, {"op": "add_catalog_activity", "dayIndex": 0, "activityId": 1})

        activity = state["days"][0]["activities"][0]
        assert activity["id"] == 1
        assert activity["name"] == "Eiffel Tower Tour"
        assert activity["price"] == 25
        assert activity["startTime"] == "09:00"
        assert state["totalCost"] == 25

    def test_add_catalog_activity_with_start_time(
        self, client: TestClient, days: list[dict[str, Any]]
    ) -> None:
        state = _apply(
            client,
            days,
            {"op": "add_catalog_activity", "dayIndex": 1, "activityId": 2, "startTime": "14:30"},
        )

        assert state["days"][1]["activities"][0]["startTime"] == "14:30"
        assert state["totalCost"] == 15

    def test_book_hotel(self, client: TestClient, days: list[dict[str, Any]]) -> None:
        state = _apply(client, days, {"op": "book_hotel", "dayIndex": 0, "hotelId": 1})

        assert state["days"][0]["accommodation"] == {
            "hotelId": 1,
            "name": "Grand Plaza Hotel",
            "price": 250,
        }
        assert state["totalCost"] == 250

    def test_book_flight(self, client: TestClient, days: list[dict[str, Any]]) -> None:
        state = _apply(client, days, {"op": "book_flight", "dayIndex": 2, "flightId": 1})

        transportation = state["days"][2]["transportation"]
        assert transportation["type"] == "flight"
        assert transportation["from"] == "New York"
        assert transportation["to"] == "Paris"
        assert transportation["flightNumber"] == "SA123"
        assert transportation["flightId"] == 1
        assert state["totalCost"] == 650

    @pytest.mark.parametrize(
        "operation",
        [
            {"op": "add_catalog_activity", "dayIndex": 0, "activityId": 999},
            {"op": "book_hotel", "dayIndex": 0, "hotelId": 999},
            {"op": "book_flight", "dayIndex": 0, "flightId": 999},
        ],
    )
    def test_unknown_catalog_id_returns_404(
        self, client: TestClient, days: list[dict[str, Any]], operation: dict[str, Any]
    ) -> None:
        response = client.post("/api/planner/apply", json={"days": days, "operation": operation})

        assert response.status_code == 404

    def test_stale_day_index_is_noop(self, client: TestClient, days: list[dict[str, Any]]) -> None:
        state = _apply(client, days, {"op": "book_hotel", "dayIndex": 9, "hotelId": 1})

        assert state["days"] == days
        assert state["totalCost"] == 0
