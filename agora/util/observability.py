"""Logfire setup and instrumentation.

Services log through logfire directly:

    import logfire

    logfire.info("Vote cast", post_id=str(post.id), amount=vote.amount)

    with logfire.span("cast_vote", post_id=str(post_id)):
        ...

``configure_logfire`` must run before the app module is imported; the
scripts under ``scripts/`` take care of that.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import ObservabilitySettings, Settings

SERVICE_NAME = "agora-forum"
SERVICE_VERSION = "0.1.0"


def _sends_to_cloud(observability: ObservabilitySettings) -> bool:
    """Explicit setting first, then whether a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire; without a token everything stays on the console."""
    send_to_logfire = _sends_to_cloud(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        forum=settings.forum.name,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Add the path and whether the call came from the forum's scripts."""
    result = {**attributes, "path": request.url.path}
    result["ajax"] = request.headers.get("x-requested-with") == "XMLHttpRequest"
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, with the route as an SQL comment."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (Akismet spam checks)."""
    logfire.instrument_httpx()
