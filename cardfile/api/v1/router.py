"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from cardfile.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from cardfile.api.v1.endpoints import health, text_materials

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    text_materials.router, prefix="/text-materials", tags=["text-materials"]
)
