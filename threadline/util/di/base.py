"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that can be swapped for an in-memory implementation in tests
Component = Literal["persistence"]


class DependencyInjectionError(Exception):
    """Raised when no provider implementation matches a request."""

    pass


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name on the base of a swappable
            component, None for providers that are always used as-is
        __is_mock__: Marks the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
