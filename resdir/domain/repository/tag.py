"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from resdir.domain.model.hierarchy import FlatTagRow
from resdir.domain.model.tag import Tag
from resdir.domain.value import CategoryId, Slug, SubcategoryId, TagId


class TagRepository(ABC):
    """Repository interface for Tag entries."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID, active or not.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_ids_by_names(self, names: list[str]) -> list[TagId]:
        """Resolve display names to ids of visible tags.

        Matching is exact and case-sensitive. A name may resolve to several
        ids since names are only unique within a subcategory. Tags under a
        deactivated category or subcategory are not visible.

        Args:
            names: Tag display names

        Returns:
            Ids of every matching active tag
        """
        pass

    @abstractmethod
    async def slug_exists(
        self,
        category_id: CategoryId,
        sub_category_id: Optional[SubcategoryId],
        slug: Slug,
    ) -> bool:
        """Whether an active tag in the same parent scope already uses this slug."""
        pass

    @abstractmethod
    async def find_hierarchy_rows(self, public_only: bool = False) -> list[FlatTagRow]:
        """Load denormalized rows for every visible tag.

        Rows cover active tags under active categories, and under active
        subcategories when a subcategory is set. They are ordered by
        (sort_order, name) at the category, subcategory and tag level, so
        the hierarchy builder can keep encounter order.

        Args:
            public_only: Keep only tags attached to at least one resource

        Returns:
            Ordered flat rows
        """
        pass
