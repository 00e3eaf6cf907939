"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from resdir.domain.model.category import Category
from resdir.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository interface for Category entries."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update).

        Args:
            category: Category to save. A category without an id is inserted.

        Returns:
            Saved category, with its id assigned
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID, active or not.

        Args:
            category_id: Category identifier

        Returns:
            Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, include_inactive: bool = False) -> list[Category]:
        """Find categories ordered by (sort_order, name).

        Args:
            include_inactive: Whether to include soft-deleted categories

        Returns:
            List of categories
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Whether an active category already uses this slug."""
        pass
