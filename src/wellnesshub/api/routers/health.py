"""
Health check endpoints.
"""

import asyncio
from datetime import datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ... import __version__
from ...core.config import get_settings
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/health", tags=["health"])

DB_PING_TIMEOUT_SECONDS = 5.0


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    service: str


@router.get("/", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    return ok(request, data=HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow(),
        version=__version__,
        service=get_settings().app_name,
    ), message="OK")


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness_check(request: Request):
    """
    Readiness check endpoint.

    Pings MongoDB through the client opened at startup and reports whether
    the embedding API is configured.
    """
    settings = get_settings()
    checks = {}
    all_ok = True

    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        checks["database"] = "not_initialized"
        all_ok = False
    else:
        try:
            await asyncio.wait_for(client.admin.command("ping"), timeout=DB_PING_TIMEOUT_SECONDS)
            checks["database"] = "ok"
        except Exception as e:
            checks["database"] = f"error: {str(e)[:50]}"
            all_ok = False

    checks["embedding_api"] = "configured" if settings.embedding.api_key else "not_configured"
    checks["rate_limiter"] = "enabled" if getattr(request.app.state, "rate_limiter", None) else "disabled"

    status = "ready" if all_ok else "degraded"

    return ok(request, data={
        "status": status,
        "timestamp": datetime.utcnow(),
        "checks": checks,
    }, message="OK" if all_ok else "Some services unavailable")


@router.get("/live", response_model=ApiResponse[dict])
async def liveness_check(request: Request):
    """
    Liveness check endpoint.
    """
    return ok(request, data={"status": "alive", "timestamp": datetime.utcnow()}, message="OK")
