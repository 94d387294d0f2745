"""Dependency injection wiring.

Components that tests swap out (``akismet``, ``persistence``) are declared
as a base provider with one production and one mock subclass. Every other
provider is concrete and installed as-is.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import (
    AkismetProvider,
    PersistenceProvider,
    ProdAkismetProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    AkismetProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components with a mock implementation registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for ``base``.

    Mock implementations are only visible once their module is imported
    (``tests.di`` does this).

    Raises:
        ValueError: If the component has no implementation of the wanted kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "AkismetProvider",
    "PersistenceProvider",
    "ProdAkismetProvider",
    "ProdPersistenceProvider",
]
