"""Dependency injection wiring.

Layers are wired by one provider each. Persistence is the only swappable
component: production uses PostgreSQL, tests register an in-memory
subclass of ``PersistenceProvider`` (see ``tests/di``).
"""

from typing import Type

from threadline.util.di.application import ProdApplicationProvider
from threadline.util.di.base import Component, DependencyInjectionError, ProviderBase
from threadline.util.di.core import ProdConfigProvider
from threadline.util.di.domain import ProdDomainProvider
from threadline.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    A base without subclasses is used directly. Otherwise the subclass whose
    ``__is_mock__`` flag equals ``use_mock`` is returned.

    Raises:
        DependencyInjectionError: If no subclass matches
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(
        f"No {'mock' if use_mock else 'production'} provider for {component}"
    )


__all__ = [
    "Component",
    "DependencyInjectionError",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
