import pytest
from httpx import ASGITransport, AsyncClient

from backend.main import app
from backend.routes.trips import get_completion_client


class FakeCompletionClient:
    """Stands in for OpenRouterClient; returns or raises what it was given."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.requests = []

    def generate_itinerary(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_client():
    fake = FakeCompletionClient(result="Day 1: Beach")
    app.dependency_overrides[get_completion_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client():
    """Async client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
