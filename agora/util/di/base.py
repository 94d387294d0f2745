"""Base class for the forum's DI providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-process fakes
Component = Literal["akismet", "persistence"]


class ProviderBase(Provider):
    """Provider with the metadata ``get_provider`` selects on.

    A mockable component sets ``__mock_component__`` on its base provider;
    its subclasses set ``__is_mock__`` to tell production from test wiring.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
