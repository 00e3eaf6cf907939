"""Subcategory repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from resdir.domain.model.subcategory import Subcategory
from resdir.domain.value import CategoryId, Slug, SubcategoryId


class SubcategoryRepository(ABC):
    """Repository interface for Subcategory entries."""

    @abstractmethod
    async def save(self, subcategory: Subcategory) -> Subcategory:
        """Save a subcategory (create or update).

        Args:
            subcategory: Subcategory to save

        Returns:
            Saved subcategory, with its id assigned
        """
        pass

    @abstractmethod
    async def find_by_id(self, subcategory_id: SubcategoryId) -> Optional[Subcategory]:
        """Find a subcategory by ID, active or not."""
        pass

    @abstractmethod
    async def find_by_category(
        self, category_id: Optional[CategoryId] = None
    ) -> list[Subcategory]:
        """Find active subcategories ordered by (sort_order, name).

        Args:
            category_id: Restrict to one category (None for all)

        Returns:
            List of active subcategories
        """
        pass

    @abstractmethod
    async def slug_exists(self, category_id: CategoryId, slug: Slug) -> bool:
        """Whether an active subcategory of the category already uses this slug."""
        pass
