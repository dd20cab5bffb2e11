import pytest

from clubhub.controller import event_controller
from clubhub.controller.crud_controller import parse_id
from clubhub.controller.event_controller import generate_slug
from clubhub.models.event_model import Event
from clubhub.models.registration_model import EventRegistration


def test_generate_slug():
    assert generate_slug("Code & Coffee!!") == "code-coffee"
    assert generate_slug("  Hack   the  Night ") == "hack-the-night"
    assert generate_slug("--Intro -- to Git--") == "intro-to-git"
    assert generate_slug("!!!") == "event"


def test_duplicate_titles_get_counter_suffix(client, admin_headers):
    first = client.post("/api/events", json={"title": "Code & Coffee!!"}, headers=admin_headers)
    second = client.post("/api/events", json={"title": "Code & Coffee!!"}, headers=admin_headers)
    third = client.post("/api/events", json={"title": "Code & Coffee!!"}, headers=admin_headers)
    assert first.status_code == 201
    assert first.json()["slug"] == "code-coffee"
    assert second.json()["slug"] == "code-coffee-1"
    assert third.json()["slug"] == "code-coffee-2"


def test_create_event_defaults(client, admin_headers):
    response = client.post(
        "/api/events",
        json={"title": "Hack Night", "eventType": "hackathon", "date": "2025-03-01T10:00:00",
              "teamSettings": {"enabled": True, "minTeamSize": 2, "maxTeamSize": 4}},
        headers=admin_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "upcoming"
    assert body["registrationCount"] == 0
    assert body["isPaid"] is False
    assert body["teamSettings"] == {"enabled": True, "minTeamSize": 2, "maxTeamSize": 4}


def test_create_event_validation(client, admin_headers):
    response = client.post(
        "/api/events",
        json={"status": "postponed", "price": -5},
        headers=admin_headers,
    )
    assert response.status_code == 400
    fields = response.json()["fields"]
    assert "title" in fields and "status" in fields and "price" in fields


def test_registration_count_is_not_client_writable(client, admin_headers):
    response = client.post("/api/events", json={"title": "Meetup", "registrationCount": 99}, headers=admin_headers)
    assert response.json()["registrationCount"] == 0


def test_get_event_by_id_or_slug(client, make_event):
    event_id, slug = make_event("Git Basics")
    by_id = client.get(f"/api/events/{event_id}")
    by_slug = client.get(f"/api/events/{slug}")
    assert by_id.status_code == 200 and by_slug.status_code == 200
    assert by_id.json()["id"] == by_slug.json()["id"] == event_id


def test_numeric_slug_falls_back_to_slug_lookup(client, make_event):
    event_id, _ = make_event("2025", slug="2025")
    response = client.get("/api/events/2025")
    assert response.status_code == 200
    assert response.json()["id"] == event_id


def test_unknown_event_is_404(client):
    response = client.get("/api/events/no-such-event")
    assert response.status_code == 404
    assert response.json()["message"] == "Event not found"


def test_list_events_filters(client, make_event):
    make_event("Old Talk", status="completed")
    make_event("New Talk", status="upcoming")
    assert len(client.get("/api/events").json()) == 2
    upcoming = client.get("/api/events?status=upcoming").json()
    assert [e["title"] for e in upcoming] == ["New Talk"]


def test_update_event_regenerates_slug_on_title_change(client, admin_headers, make_event):
    event_id, _ = make_event("Old Name", slug="old-name")
    make_event("Taken", slug="new-name")
    response = client.put(f"/api/events/{event_id}", json={"title": "New Name"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "new-name-1"

    response = client.put(f"/api/events/{event_id}", json={"location": "Hall B"}, headers=admin_headers)
    assert response.json()["slug"] == "new-name-1"
    assert response.json()["location"] == "Hall B"


def test_update_unknown_event_is_404(client, admin_headers):
    response = client.put("/api/events/999", json={"title": "X"}, headers=admin_headers)
    assert response.status_code == 404


def test_delete_event_removes_registrations(client, admin_headers, make_event, store, registration_payload):
    event_id, slug = make_event("Short Lived")
    assert client.post(f"/api/events/{slug}/register", json=registration_payload()).status_code == 201

    response = client.delete(f"/api/events/{event_id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Event deleted"

    session = store.session()
    assert session.query(Event).count() == 0
    assert session.query(EventRegistration).count() == 0
    session.close()

    assert client.delete(f"/api/events/{event_id}", headers=admin_headers).status_code == 404


def test_parse_id_only_accepts_ascii_bigint():
    assert parse_id("42") == 42
    assert parse_id(str(2 ** 63 - 1)) == 2 ** 63 - 1
    assert parse_id(str(2 ** 63)) is None
    assert parse_id("²") is None
    assert parse_id("٣") is None
    assert parse_id("") is None
    assert parse_id("code-coffee") is None


@pytest.mark.parametrize("identifier", ["99999999999999999999", "%C2%B2"])
def test_out_of_range_or_unicode_digits_are_404(client, admin_headers, identifier, registration_payload):
    assert client.get(f"/api/events/{identifier}").status_code == 404
    response = client.post(f"/api/events/{identifier}/register", json=registration_payload())
    assert response.status_code == 404
    assert response.json()["message"] == "Event not found"
    assert client.put(f"/api/events/{identifier}", json={"title": "X"}, headers=admin_headers).status_code == 404
    assert client.delete(f"/api/events/{identifier}", headers=admin_headers).status_code == 404


def test_unicode_digit_slug_still_resolves(client, make_event):
    event_id, _ = make_event("Squared", slug="²")
    response = client.get("/api/events/%C2%B2")
    assert response.status_code == 200
    assert response.json()["id"] == event_id


def test_update_rejects_null_for_required_columns(client, admin_headers, make_event):
    event_id, _ = make_event("Keep Me", location="Hall A")
    response = client.put(f"/api/events/{event_id}", json={"title": None, "eventType": None}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["fields"] == ["eventType", "title"]

    cleared = client.put(f"/api/events/{event_id}", json={"location": None}, headers=admin_headers)
    assert cleared.status_code == 200
    assert cleared.json()["title"] == "Keep Me"
    assert cleared.json()["location"] is None


def test_slug_taken_between_check_and_commit_is_retried(client, admin_headers, make_event, monkeypatch):
    make_event("Taken", slug="taken")
    real_unique_slug = event_controller.unique_slug
    calls = []

    def racing_unique_slug(db, title, event_id=None):
        calls.append(title)
        return "taken" if len(calls) == 1 else real_unique_slug(db, title, event_id)

    monkeypatch.setattr(event_controller, "unique_slug", racing_unique_slug)
    response = client.post("/api/events", json={"title": "Fresh"}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["slug"] == "fresh"
    assert len(calls) == 2


def test_slug_collision_gives_up_after_one_retry(client, admin_headers, make_event, store, monkeypatch):
    make_event("Taken", slug="taken")
    monkeypatch.setattr(event_controller, "unique_slug", lambda db, title, event_id=None: "taken")
    response = client.post("/api/events", json={"title": "Fresh"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "DUPLICATE_SLUG"

    session = store.session()
    assert session.query(Event).count() == 1
    session.close()
