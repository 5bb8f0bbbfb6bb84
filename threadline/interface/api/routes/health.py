"""Liveness endpoint."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from threadline.config import Settings
from threadline.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Service identity and liveness."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=SERVICE_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
