"""Mock providers for testing."""

from .classifier import MockClassifierProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClassifierProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
