"""Mock providers for testing."""

from .akismet import MockAkismetProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAkismetProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
