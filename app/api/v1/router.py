"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, catalog

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    catalog.router, prefix="/catalog", tags=["Exercise catalog"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
