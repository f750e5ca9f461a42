"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from siteops.api.v1.dependencies.
"""

from fastapi import APIRouter

from siteops.api.v1.endpoints import cleanup, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(cleanup.router, prefix="/admin/cleanup", tags=["admin"])
