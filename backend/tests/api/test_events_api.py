"""Event routes — CRUD over HTTP, camelCase wire format, envelopes and errors.

Tests:
    - POST returns 201 with slug and camelCase keys
    - GET by slug and by id; unknown key → 404 envelope
    - List envelope carries page metadata; filters and validation errors
    - Fixed paths (featured, upcoming, range) do not collide with /{idOrSlug}
    - Registration endpoint applies business rules
"""

from datetime import timedelta

from contentdesk.core.clock import utcnow


async def _create(client, body):
    response = await client.post("/api/events", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_returns_camel_case_resource(client, event_body):
    response = await client.post("/api/events", json=event_body(title="Open Day 2026"))
    assert response.status_code == 201
    payload = response.json()
    assert payload["success"] is True
    data = payload["data"]
    assert data["slug"] == "open-day-2026"
    assert data["registeredCount"] == 0
    assert "startDate" in data and "start_date" not in data


async def test_duplicate_titles_get_distinct_slugs(client, event_body):
    first = await _create(client, event_body(title="Town Hall"))
    second = await _create(client, event_body(title="Town Hall"))
    assert (first["slug"], second["slug"]) == ("town-hall", "town-hall-1")


async def test_get_by_slug_and_id(client, event_body):
    created = await _create(client, event_body(title="Lookup"))
    by_slug = await client.get("/api/events/lookup")
    by_id = await client.get(f"/api/events/{created['id']}")
    assert by_slug.json()["data"]["id"] == created["id"]
    assert by_id.json()["data"]["slug"] == "lookup"


async def test_unknown_event_is_404_envelope(client):
    response = await client.get("/api/events/nothing-here")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["message"] == "Event not found"
    assert body["details"]["code"] == "RESOURCE_NOT_FOUND"


async def test_list_envelope_and_filters(client, event_body):
    await _create(client, event_body(title="A", isFeatured=True))
    await _create(client, event_body(title="B"))
    response = await client.get("/api/events", params={"isFeatured": "true"})
    data = response.json()["data"]
    assert [e["title"] for e in data["items"]] == ["A"]
    assert data["total"] == 1
    assert data["hasNext"] is False and data["hasPrev"] is False


async def test_invalid_filter_value_is_400(client):
    response = await client.get("/api/events", params={"status": "postponed"})
    assert response.status_code == 400
    body = response.json()
    assert body["details"]["code"] == "VALIDATION_ERROR"
    assert body["details"]["context"]["field"] == "status"


async def test_list_date_range_query(client, event_body):
    await _create(client, event_body(title="Soon", days_ahead=3))
    await _create(client, event_body(title="Later", days_ahead=60))
    end = (utcnow() + timedelta(days=10)).isoformat()
    response = await client.get("/api/events", params={"endDate": end})
    assert [e["title"] for e in response.json()["data"]["items"]] == ["Soon"]


async def test_range_path(client, event_body):
    await _create(client, event_body(title="Soon", days_ahead=3))
    await _create(client, event_body(title="Later", days_ahead=60))
    start = utcnow().date().isoformat()
    end = (utcnow() + timedelta(days=10)).date().isoformat()
    response = await client.get(f"/api/events/range/{start}/{end}")
    assert response.status_code == 200
    assert [e["title"] for e in response.json()["data"]["items"]] == ["Soon"]


async def test_featured_and_upcoming_paths(client, event_body):
    await _create(client, event_body(title="Star", isFeatured=True))
    await _create(client, event_body(title="Gone", days_ahead=-3))
    featured = await client.get("/api/events/featured")
    upcoming = await client.get("/api/events/upcoming")
    assert [e["title"] for e in featured.json()["data"]] == ["Star"]
    assert [e["title"] for e in upcoming.json()["data"]["items"]] == ["Star"]


async def test_validation_error_envelope(client, event_body):
    body = event_body()
    del body["title"]
    response = await client.post("/api/events", json=body)
    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["details"]["code"] == "VALIDATION_ERROR"
    assert any("title" in e["field"] for e in payload["details"]["errors"])


async def test_inverted_dates_rejected(client, event_body):
    start = utcnow() + timedelta(days=5)
    body = event_body(
        startDate=start.isoformat(),
        endDate=(start - timedelta(days=1)).isoformat(),
    )
    response = await client.post("/api/events", json=body)
    assert response.status_code == 400
    assert response.json()["details"]["code"] == "INVALID_DATE_RANGE"


async def test_update_renames_slug(client, event_body):
    created = await _create(client, event_body(title="Draft Title"))
    response = await client.put(
        f"/api/events/{created['id']}", json={"title": "Final Title"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["slug"] == "final-title"


async def test_delete_then_404(client, event_body):
    created = await _create(client, event_body(title="Temporary"))
    response = await client.delete(f"/api/events/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"] is None
    assert (await client.get("/api/events/temporary")).status_code == 404


async def test_register_and_capacity(client, event_body):
    created = await _create(client, event_body(title="Small Room", capacity=1))
    first = await client.post(f"/api/events/{created['id']}/register", json={})
    assert first.status_code == 200
    assert first.json()["data"]["registeredCount"] == 1
    second = await client.post(f"/api/events/{created['id']}/register", json={})
    assert second.status_code == 400
    assert second.json()["details"]["code"] == "EVENT_FULL"
