"""
FastAPI application.

Configures logging and mounts the v1 API.
"""

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.middleware import RequestIDMiddleware

configure_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Training-load analytics and exercise recommendations for a workout-program builder.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.add_middleware(RequestIDMiddleware)

# Include API router
app.include_router(api_router, prefix="/api/v1")

logger.info("app_started", project=settings.PROJECT_NAME, version=settings.VERSION)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "PRGRM Analytics API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "prgrm-analytics",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
