"""Fixtures for end-to-end tests against the HTTP API."""

import httpx
import pytest_asyncio

from agora.domain.model import Member
from agora.domain.service import JWTService
from agora.interface.api.app import create_app
from tests.di import build_test_container

AJAX = {"X-Requested-With": "XMLHttpRequest"}


@pytest_asyncio.fixture
async def container():
    """Test container shared by the app and the test's seeding code."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client for an app wired to the test container."""
    app_instance = create_app(container=container)
    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as http_client:
        yield http_client


async def sign_in(client: httpx.AsyncClient, container, member: Member) -> None:
    """Put a valid auth cookie for ``member`` in the client's jar."""
    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
    client.cookies.set(
        "auth_token", jwt_service.create_token(str(member.id), member.username)
    )
