"""In-memory implementation of Category repository for testing."""

from typing import Optional

from resdir.domain.model import Category
from resdir.domain.repository.category import CategoryRepository
from resdir.domain.value import CategoryId, Slug

from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, category: Category) -> Category:
        """Save a category, assigning an id on insert."""
        self.store.check_available()
        if category.id is None:
            category = category.model_copy(
                update={
                    "id": CategoryId(self.store.next_id("categories")),
                    **self.store.stamp(created=True),
                }
            )
        else:
            category = category.model_copy(update=self.store.stamp(created=False))
        self.store.categories[category.id] = category
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        self.store.check_available()
        return self.store.categories.get(category_id)

    async def find_all(self, include_inactive: bool = False) -> list[Category]:
        """Find categories ordered by (sort_order, name)."""
        self.store.check_available()
        categories = [
            c for c in self.store.categories.values() if include_inactive or c.is_active
        ]
        return sorted(categories, key=lambda c: (c.sort_order, c.name, c.id))

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if an active category uses the slug."""
        self.store.check_available()
        return any(
            c.slug == slug and c.is_active for c in self.store.categories.values()
        )
