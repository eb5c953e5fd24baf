from sqlalchemy.exc import OperationalError

from photobooth.api.v1 import events as events_api
from photobooth.db.models.Event import Event
from photobooth.db.models.Photo import Photo


def test_list_events_requires_identity(client, seeded):
    response = client.get("/api/v1/events")
    assert response.status_code == 401


def test_list_events_returns_only_admins_events(client, seeded, headers_for):
    body = client.get("/api/v1/events", headers=headers_for("owner@example.com")).json()
    assert body["status_code"] == 200
    assert body["data"]["admin_id"] == 7
    events = body["data"]["events"]
    assert sorted(e["id"] for e in events) == [1, 2]
    assert all(e["admin_id"] == 7 for e in events)
    assert {e["display_title"] for e in events} == {"GALA", "LAUNCH"}


def test_list_events_is_independent_of_call_order(client, seeded, headers_for):
    first = client.get("/api/v1/events", headers=headers_for("other@example.com")).json()
    client.get("/api/v1/events", headers=headers_for("owner@example.com"))
    second = client.get("/api/v1/events", headers=headers_for("other@example.com")).json()
    assert [e["id"] for e in first["data"]["events"]] == [3]
    assert first["data"]["events"] == second["data"]["events"]


def test_list_events_for_unknown_admin_is_empty(client, seeded, headers_for):
    body = client.get("/api/v1/events", headers=headers_for("guest@example.com")).json()
    assert body["status"] == "success"
    assert body["data"]["admin_id"] is None
    assert body["data"]["events"] == []


def test_list_events_store_error(client, seeded, headers_for, monkeypatch):
    def broken(db, admin_id):
        raise OperationalError("SELECT", {}, Exception("store unreachable"))

    monkeypatch.setattr(events_api, "list_events_by_admin", broken)
    body = client.get("/api/v1/events", headers=headers_for("owner@example.com")).json()
    assert body == {
        "message": "Error loading events",
        "status": "error",
        "status_code": 500,
        "data": None,
    }


def test_get_event_details(client, seeded):
    body = client.get("/api/v1/events/2").json()
    assert body["status_code"] == 200
    event = body["data"]["event"]
    assert event["title"] == "LAUNCH"
    assert event["event_date"] == "Sat, Apr 12, 2025, 09:30 AM UTC"
    assert event["admin_id"] == 7


def test_get_missing_event(client, seeded):
    body = client.get("/api/v1/events/99").json()
    assert body["status_code"] == 404
    assert body["data"] is None


def test_create_event(client, seeded, headers_for, db):
    response = client.post(
        "/api/v1/events",
        json={"event_title": "afterparty", "event_date": "2025-06-01T22:00:00"},
        headers=headers_for("owner@example.com"),
    )
    body = response.json()
    assert body["status_code"] == 201
    created = body["data"]["event"]
    assert created["admin_id"] == 7
    assert created["display_title"] == "AFTERPARTY"
    assert db.query(Event).filter(Event.admin_id == 7).count() == 3


def test_create_event_requires_admin(client, seeded, headers_for):
    response = client.post(
        "/api/v1/events",
        json={"event_title": "crash", "event_date": "2025-06-01T22:00:00"},
        headers=headers_for("guest@example.com"),
    )
    assert response.status_code == 403


def test_create_event_rejects_blank_title(client, seeded, headers_for):
    body = client.post(
        "/api/v1/events",
        json={"event_title": "   ", "event_date": "2025-06-01T22:00:00"},
        headers=headers_for("owner@example.com"),
    ).json()
    assert body["status_code"] == 400


def test_delete_event_removes_its_photos(client, seeded, headers_for, db):
    body = client.delete("/api/v1/events/1", headers=headers_for("owner@example.com")).json()
    assert body["status_code"] == 200
    assert [e["id"] for e in body["data"]["events"]] == [2]
    assert db.query(Photo).filter(Photo.event_id == 1).count() == 0
    assert db.query(Photo).count() == 1


def test_delete_event_of_other_admin_is_forbidden(client, seeded, headers_for, db):
    response = client.delete("/api/v1/events/3", headers=headers_for("owner@example.com"))
    assert response.status_code == 403
    assert db.query(Event).filter(Event.id == 3).count() == 1
