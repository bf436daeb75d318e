"""Dependency injection wiring."""

from stackit.util.di.application import ProdApplicationProvider
from stackit.util.di.base import Component, ProviderBase
from stackit.util.di.core import ProdConfigProvider
from stackit.util.di.domain import ProdDomainProvider
from stackit.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order is irrelevant to dishka; slots are resolved by get_provider
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Resolve a provider slot to a concrete provider class.

    Providers without subclasses are concrete and returned unchanged.

    Raises:
        ValueError: If the slot has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__
    raise ValueError(f"No {kind} provider for component {component!r}")


def swappable_components() -> set[Component]:
    """Components that have a mock flavour."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "swappable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
