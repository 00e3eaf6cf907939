"""Dependency injection module."""

from typing import Type

from resdir.util.di.application import ProdApplicationProvider
from resdir.util.di.base import Component, ProviderBase
from resdir.util.di.core import ProdConfigProvider
from resdir.util.di.domain import ProdDomainProvider
from resdir.util.di.infrastructure import (
    ClassifierProvider,
    PersistenceProvider,
    ProdClassifierProvider,
    ProdPersistenceProvider,
)
from resdir.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    ClassifierProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        component_name = getattr(base, "__mock_component__", None) or base.__name__
        raise DependencyInjectionError(component_name, use_mock)

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ClassifierProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdClassifierProvider",
    "ProdPersistenceProvider",
]
