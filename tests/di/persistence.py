"""Mock persistence providers for testing."""

from dishka import Scope, provide

from resdir.domain.repository import (
    CategoryRepository,
    ResourceRepository,
    SubcategoryRepository,
    TagRepository,
)
from resdir.persistence.repository.inmemory import (
    InMemoryCategoryRepository,
    InMemoryResourceRepository,
    InMemoryStore,
    InMemorySubcategoryRepository,
    InMemoryTagRepository,
)
from resdir.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives as long as the container, so data written in one request
    is visible in the next. Each test builds its own container, so tests stay
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, store: InMemoryStore) -> CategoryRepository:
        """Provide in-memory category repository."""
        return InMemoryCategoryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_subcategory_repository(
        self, store: InMemoryStore
    ) -> SubcategoryRepository:
        """Provide in-memory subcategory repository."""
        return InMemorySubcategoryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, store: InMemoryStore) -> ResourceRepository:
        """Provide in-memory resource repository."""
        return InMemoryResourceRepository(store)
