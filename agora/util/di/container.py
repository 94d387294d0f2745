"""Dependency injection container."""

from typing import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from agora.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container from every provider in ``PROVIDERS``.

    Settings are loaded from environment variables when first resolved.

    Args:
        mocked: Components to install the mock implementation of; the
            production service only ever passes nothing

    Returns:
        Container with one REQUEST scope per HTTP request
    """
    mocked = set(mocked)
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # FastapiProvider puts the current Request in the request scope
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``app``'s DishkaRoute handlers from ``container``."""
    setup_dishka(container, app)
