"""In-memory implementation of Subcategory repository for testing."""

from typing import Optional

from resdir.domain.model import Subcategory
from resdir.domain.repository.subcategory import SubcategoryRepository
from resdir.domain.value import CategoryId, Slug, SubcategoryId

from .store import InMemoryStore


class InMemorySubcategoryRepository(SubcategoryRepository):
    """In-memory implementation of SubcategoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, subcategory: Subcategory) -> Subcategory:
        """Save a subcategory, assigning an id on insert."""
        self.store.check_available()
        if subcategory.id is None:
            subcategory = subcategory.model_copy(
                update={
                    "id": SubcategoryId(self.store.next_id("subcategories")),
                    **self.store.stamp(created=True),
                }
            )
        else:
            subcategory = subcategory.model_copy(update=self.store.stamp(created=False))
        self.store.subcategories[subcategory.id] = subcategory
        return subcategory

    async def find_by_id(self, subcategory_id: SubcategoryId) -> Optional[Subcategory]:
        """Find a subcategory by ID."""
        self.store.check_available()
        return self.store.subcategories.get(subcategory_id)

    async def find_by_category(
        self, category_id: Optional[CategoryId] = None
    ) -> list[Subcategory]:
        """Find active subcategories of active categories."""
        self.store.check_available()
        found = []
        for sub in self.store.subcategories.values():
            category = self.store.categories.get(sub.category_id)
            if not sub.is_active or category is None or not category.is_active:
                continue
            if category_id is not None and sub.category_id != category_id:
                continue
            found.append((category, sub))
        found.sort(
            key=lambda pair: (
                pair[0].sort_order,
                pair[0].name,
                pair[0].id,
                pair[1].sort_order,
                pair[1].name,
                pair[1].id,
            )
        )
        return [sub for _, sub in found]

    async def slug_exists(self, category_id: CategoryId, slug: Slug) -> bool:
        """Check if an active subcategory of the category uses the slug."""
        self.store.check_available()
        return any(
            s.category_id == category_id and s.slug == slug and s.is_active
            for s in self.store.subcategories.values()
        )
