"""Health e readiness do listener de webhooks.

- GET /health: processo vivo
- GET /ready: capacidades do conector; "degraded" quando alguma está
  desabilitada por configuração, 503 apenas sem conector
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

router = APIRouter()

SERVICE_NAME = "lp-consumer-connector"
SERVICE_VERSION = "1.0.0"


def _now() -> str:
    return datetime.now(UTC).isoformat()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    timestamp: str = Field(default_factory=_now)


class ReadinessResponse(BaseModel):
    status: str
    capabilities: dict[str, bool] = Field(default_factory=dict)
    timestamp: str = Field(default_factory=_now)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> JSONResponse:
    """Estado das capacidades do Connector exposto em `app.state.connector`."""
    connector = getattr(request.app.state, "connector", None)
    if connector is None:
        body = ReadinessResponse(status="not_ready")
        return JSONResponse(content=body.model_dump(), status_code=503)

    capabilities = connector.capabilities()
    body = ReadinessResponse(
        status="ready" if all(capabilities.values()) else "degraded",
        capabilities=capabilities,
    )
    return JSONResponse(content=body.model_dump(), status_code=200)
