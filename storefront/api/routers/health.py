"""
Health check API endpoints.

Routes: GET /health

System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.api.deps.dependencies import get_settings_dependency
from storefront.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    square_environment: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check. Does not call Square."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        square_environment=settings.square.env,
    )
