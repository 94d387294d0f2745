"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from agora.config import Settings
from agora.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    forum: str
    version: str
    git_sha: str
    environment: str
    spam_check_enabled: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the API is up and which build and forum it serves.

    Nothing downstream (database, Akismet) is probed.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        forum=settings.forum.name,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        spam_check_enabled=settings.spam.akismet_api_key is not None,
    )
