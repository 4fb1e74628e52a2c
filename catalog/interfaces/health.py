"""
Health check and greeting routes.

Provides a simple health endpoint for liveness/readiness probes.
No business logic.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from catalog.interfaces.catalog.schemas import HealthResponse

router = APIRouter(tags=["health"])

GREETING = "Hello, World!\n"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
def root() -> str:
    """Return a plain-text greeting."""
    return GREETING


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
