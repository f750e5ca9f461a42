"""Health check endpoints. No auth; used for liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from siteops.infrastructure.firebase.client import get_firestore_client
from siteops.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Firestore not configured", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the Firestore client is initialized; 503 otherwise."""
    if get_firestore_client() is not None:
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message="Firestore client is not initialized",
        ).model_dump(),
    )
