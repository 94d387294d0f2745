"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.config import Settings
from agora.interface.api.routes import auth, health, topics, votes
from agora.util.di.container import create_container, setup_di
from agora.util.observability import (
    SERVICE_VERSION,
    instrument_fastapi,
    instrument_httpx,
)

# Vite and other local frontends
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the forum API.

    Logfire should be configured before this is called (start_app.py does
    it); instrumentation installed earlier sends nothing.

    Args:
        container: Container to serve requests from instead of the
            production one (tests pass one with mocked components)
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title=f"{settings.forum.name} API",
        description="Topics, posts and votes of the discussion forum",
        version=SERVICE_VERSION,
    )
    instrument_fastapi(app_instance)

    # Credentials are needed for the auth and anti-forgery cookies
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "X-Requested-With",
            settings.auth.csrf_header_name,
        ],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    # /topics/{slug} is declared last inside the router
    app_instance.include_router(topics.router)
    app_instance.include_router(votes.router)

    return app_instance


# Imported by uvicorn after start_app.py configured Logfire
app = create_app()
