"""Dependency injection module.

``PROVIDERS`` lists every provider base in wiring order. A base with
subclasses is a swappable component: production code picks the subclass
with ``__is_mock__ = False`` and tests may pick the test double instead.
"""

from typing import Type

from citadel.util.di.application import ProdApplicationProvider
from citadel.util.di.base import Component, ProviderBase
from citadel.util.di.core import ProdConfigProvider
from citadel.util.di.domain import ProdDomainProvider
from citadel.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class that should be instantiated.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the test double of a swappable component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching
        subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
