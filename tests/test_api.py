from unittest.mock import MagicMock, patch

import pytest
import requests

from backend.utils.config import settings
from backend.utils.exceptions import CompletionProviderError

POST = "backend.services.completion_client.requests.post"

PAYLOAD = {"destination": "Tokyo", "days": 3, "theme": "food", "pace": "moderate"}


@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_plan_trip_returns_itinerary_text(api_client, fake_client):
    response = await api_client.post("/api/plan-trip", json=PAYLOAD)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Day 1: Beach"

    request = fake_client.requests[0]
    assert request.destination == "Tokyo"
    assert request.days == 3
    assert request.theme == "food"
    assert request.pace == "moderate"


@pytest.mark.asyncio
async def test_plan_trip_reports_errors_in_body(api_client, fake_client):
    fake_client.error = CompletionProviderError("Completion provider request failed: boom")
    response = await api_client.post("/api/plan-trip", json=PAYLOAD)
    assert response.status_code == 200
    assert response.text.startswith("Error: ")
    assert "boom" in response.text


@pytest.mark.asyncio
async def test_plan_trip_accepts_missing_optional_fields(api_client, fake_client):
    response = await api_client.post("/api/plan-trip", json={"destination": "Cairo", "days": 2})
    assert response.status_code == 200
    request = fake_client.requests[0]
    assert request.theme is None
    assert request.pace is None


@pytest.mark.asyncio
async def test_plan_trip_allows_any_origin(api_client, fake_client):
    response = await api_client.post(
        "/api/plan-trip",
        json=PAYLOAD,
        headers={"Origin": "http://localhost:5173"},
    )
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_plan_trip_reports_unreachable_provider(api_client):
    with patch(POST, side_effect=requests.ConnectionError("down")):
        response = await api_client.post("/api/plan-trip", json=PAYLOAD)
    assert response.status_code == 200
    assert response.text.startswith("Error: ")
    assert "down" in response.text


@pytest.mark.asyncio
async def test_plan_trip_reports_non_json_reply(api_client):
    reply = MagicMock(status_code=502, ok=False, text="<html>bad gateway</html>")
    with patch(POST, return_value=reply):
        response = await api_client.post("/api/plan-trip", json=PAYLOAD)
    assert response.status_code == 200
    assert response.text.startswith("Error: ")


@pytest.mark.asyncio
async def test_plan_trip_reports_blank_model_setting(api_client, monkeypatch):
    monkeypatch.setattr(settings, "openrouter_model", " ")
    with patch(POST) as post:
        response = await api_client.post("/api/plan-trip", json=PAYLOAD)
    assert response.status_code == 200
    assert response.text.startswith("Error: ")
    post.assert_not_called()
