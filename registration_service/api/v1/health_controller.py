# External package imports
from fastapi import APIRouter
from pydantic import BaseModel

# Local application imports
from ...core.config import get_settings


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and version"""
    return HealthResponse(status="healthy", version=get_settings().app_version)
