"""
JourneyCraft API - Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from backend.utils.config import settings
from backend.utils.logger import get_logger

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="JourneyCraft API",
    description="AI-powered trip itinerary generator",
    version="1.0.0"
)

# CORS middleware - any origin may call the planner
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

if not settings.llm_configured:
    logger.warning("openrouter_api_key_missing", environment=settings.environment)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "service": "JourneyCraft API",
        "status": "running",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "api": "ok",
        "llm_configured": settings.llm_configured,
    }


# Import and include routers
from backend.routes.trips import router as trips_router
app.include_router(trips_router)
