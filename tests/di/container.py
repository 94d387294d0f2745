"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from agora.util.di import Component, mockable_components
from agora.util.di.container import create_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every mockable component mocked.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container, usable directly or through ``create_app``

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real Postgres, mocked Akismet
        container = build_test_container(unmock={"persistence"})
    """
    unmock = set(unmock or ())
    components = mockable_components()

    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return create_container(mocked=components - unmock)
