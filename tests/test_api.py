"""Tests for the HTTP surface."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from visa_planner import api
from visa_planner.models import DocumentSlot


@pytest.fixture
def client():
    api.plan_store._sessions.clear()
    return TestClient(api.app)


def _payload(**overrides):
    data = dict(
        nationality="Kenya",
        destination="Germany",
        travel_date=(date.today() + timedelta(days=30)).isoformat(),
        purpose="Tourism",
    )
    data.update(overrides)
    return data


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_options_lists_form_choices(client):
    body = client.get("/options").json()
    assert body["destinations"] == sorted(body["destinations"])
    assert "Kenya" in body["nationalities"]
    assert body["purposes"][0] == "Tourism"


def test_create_plan_returns_checklist_and_empty_slots(client):
    response = client.post("/plans", json=_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["checklist"].startswith("# Your Visa Plan for Germany")
    assert body["active_tab"] == "checklist"
    assert set(body["slots"]) == {"cover_letter", "itinerary", "budget"}
    assert all(slot["status"] == "not_started" for slot in body["slots"].values())


def test_create_plan_rejects_invalid_form(client):
    response = client.post("/plans", json=_payload(travel_date="2000-01-01"))
    assert response.status_code == 400
    assert "past" in response.json()["detail"]

    response = client.post("/plans", json=_payload(travel_date="tomorrow"))
    assert response.status_code == 400
    assert "ISO date" in response.json()["detail"]


@patch("visa_planner.session.planner.get_checklist", side_effect=RuntimeError("boom"))
def test_create_plan_surfaces_checklist_failure(_mock, client):
    response = client.post("/plans", json=_payload())
    assert response.status_code == 500
    assert response.json()["detail"] == "boom"


def test_generate_document_is_idempotent(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    first = client.post(f"/plans/{plan_id}/documents/budget")
    second = client.post(f"/plans/{plan_id}/documents/budget")
    assert first.status_code == 200
    assert first.json()["status"] == "succeeded"
    assert first.json() == second.json()
    assert api.plan_store.get(plan_id).slots[DocumentSlot.BUDGET].generation_count == 1


def test_generate_unknown_slot_is_rejected(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    assert client.post(f"/plans/{plan_id}/documents/passport").status_code == 422


def test_html_format_renders_content(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    body = client.post(f"/plans/{plan_id}/documents/itinerary", params={"format": "html"}).json()
    assert body["content"].startswith("<h1>Sample 7-Day Itinerary for Germany</h1>")


def test_activate_tab_with_generation(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    body = client.post(f"/plans/{plan_id}/tabs/documents", params={"generate": "true"}).json()
    assert body["active_tab"] == "documents"
    assert body["slots"]["cover_letter"]["status"] == "succeeded"
    assert body["slots"]["itinerary"]["status"] == "succeeded"
    assert body["slots"]["budget"]["status"] == "not_started"


def test_reset_discards_plan(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    assert client.delete(f"/plans/{plan_id}").status_code == 204
    assert client.get(f"/plans/{plan_id}").status_code == 404
    assert client.delete(f"/plans/{plan_id}").status_code == 404


def test_share_link(client):
    plan_id = client.post("/plans", json=_payload()).json()["id"]
    url = client.get(f"/plans/{plan_id}/share").json()["url"]
    assert url.startswith("https://api.whatsapp.com/send?text=Here%20is%20my%20visa%20plan%20for%20Germany")


def test_store_evicts_oldest_plan_beyond_limit(client):
    with patch.object(api, "plan_store", api.PlanStore(max_plans=2)):
        ids = [client.post("/plans", json=_payload()).json()["id"] for _ in range(3)]
        assert client.get(f"/plans/{ids[0]}").status_code == 404
        assert client.get(f"/plans/{ids[1]}").status_code == 200
        assert client.get(f"/plans/{ids[2]}").status_code == 200
