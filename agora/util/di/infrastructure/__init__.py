"""Infrastructure providers."""

# Import bases
from .akismet import AkismetProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .akismet import ProdAkismetProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AkismetProvider",
    "PersistenceProvider",
    "ProdAkismetProvider",
    "ProdPersistenceProvider",
]
