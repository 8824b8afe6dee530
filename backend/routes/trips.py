"""
API routes for trip planning
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from backend.schemas import TripRequest
from backend.services import OpenRouterClient
from backend.utils.config import settings
from backend.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["trips"])


def get_completion_client() -> OpenRouterClient:
    """Dependency that builds the completion client from settings"""
    return OpenRouterClient.from_settings(settings)


@router.post("/plan-trip", response_class=PlainTextResponse)
def plan_trip(
    request: TripRequest,
    client: OpenRouterClient = Depends(get_completion_client),
) -> str:
    """
    Generate a day-by-day itinerary for the requested trip.

    Failures are reported in the body as "Error: <message>" with status 200,
    which is what existing frontends expect.
    """
    try:
        return client.generate_itinerary(request)
    except Exception as e:
        logger.error(
            "plan_trip_failed",
            destination=request.destination,
            error=str(e),
            error_type=type(e).__name__,
        )
        return f"Error: {e}"
