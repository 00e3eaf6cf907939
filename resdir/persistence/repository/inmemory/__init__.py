"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .resource import InMemoryResourceRepository
from .store import InMemoryStore
from .subcategory import InMemorySubcategoryRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryResourceRepository",
    "InMemoryStore",
    "InMemorySubcategoryRepository",
    "InMemoryTagRepository",
]
