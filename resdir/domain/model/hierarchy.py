"""Taxonomy hierarchy models.

``FlatTagRow`` is the denormalized input the store produces (one row per
tag with its whole parent chain). The builder turns a list of rows into a
``TagHierarchy``; ``TagPath`` is the flat, resolved form handed to simple
consumers and attached to listed resources.
"""

from enum import Enum
from typing import Iterator, Optional

from resdir.domain.model.common import DomainModel
from resdir.domain.value import CategoryId, SubcategoryId, TagId


class FlatTagRow(DomainModel):
    """One tag with its full category/subcategory path, as stored."""

    category_id: CategoryId
    category_name: str
    category_slug: str
    category_color: str
    sub_category_id: Optional[SubcategoryId] = None
    sub_category_name: Optional[str] = None
    sub_category_slug: Optional[str] = None
    sub_category_color: Optional[str] = None
    # The subcategory's own owning category, used to detect broken parent chains
    sub_category_parent_id: Optional[CategoryId] = None
    tag_id: TagId
    tag_name: str
    tag_slug: str
    tag_color: Optional[str] = None

    @property
    def effective_color(self) -> str:
        """Tag color, else subcategory color, else category color."""
        return self.tag_color or self.sub_category_color or self.category_color

    @property
    def full_path(self) -> str:
        parts = [self.category_name, self.sub_category_name, self.tag_name]
        return " > ".join(part for part in parts if part)

    def to_path(self) -> "TagPath":
        """Resolve into the flat form exposed to consumers."""
        return TagPath(
            tag_id=self.tag_id,
            tag_name=self.tag_name,
            tag_slug=self.tag_slug,
            category_id=self.category_id,
            category_name=self.category_name,
            category_slug=self.category_slug,
            category_color=self.category_color,
            sub_category_id=self.sub_category_id,
            sub_category_name=self.sub_category_name,
            sub_category_slug=self.sub_category_slug,
            effective_color=self.effective_color,
            full_path=self.full_path,
        )


class TagPath(DomainModel):
    """A tag with its resolved hierarchy path and effective color."""

    tag_id: TagId
    tag_name: str
    tag_slug: str
    category_id: CategoryId
    category_name: str
    category_slug: str
    category_color: str
    sub_category_id: Optional[SubcategoryId] = None
    sub_category_name: Optional[str] = None
    sub_category_slug: Optional[str] = None
    effective_color: str
    full_path: str


class HierarchyTag(DomainModel):
    """Leaf tag inside the hierarchy."""

    id: TagId
    name: str
    slug: str
    color: str  # Effective color
    category_id: CategoryId
    sub_category_id: Optional[SubcategoryId] = None


class HierarchySubcategory(DomainModel):
    """Subcategory node with its ordered leaf tags."""

    id: SubcategoryId
    name: str
    slug: str
    color: str  # Subcategory color, else category color
    tags: list[HierarchyTag]


class HierarchyCategory(DomainModel):
    """Category node.

    ``direct_tags`` holds tags attached to the category without a subcategory.
    """

    id: CategoryId
    name: str
    slug: str
    color: str
    subcategories: dict[str, HierarchySubcategory]
    direct_tags: list[HierarchyTag] = []


class OrphanReason(str, Enum):
    """Why a row was kept out of the tree."""

    NO_SUBCATEGORY = "no_subcategory"
    SUBCATEGORY_CATEGORY_MISMATCH = "subcategory_category_mismatch"
    DUPLICATE_CATEGORY_NAME = "duplicate_category_name"
    DUPLICATE_SUBCATEGORY_NAME = "duplicate_subcategory_name"


class OrphanedTag(DomainModel):
    """A row the builder refused to place, with the reason."""

    row: FlatTagRow
    reason: OrphanReason


class TagHierarchy(DomainModel):
    """Three-level taxonomy tree keyed by display name."""

    categories: dict[str, HierarchyCategory] = {}
    orphans: list[OrphanedTag] = []

    def iter_tags(self) -> Iterator[HierarchyTag]:
        """Yield every placed tag in display order."""
        for category in self.categories.values():
            for subcategory in category.subcategories.values():
                yield from subcategory.tags
            yield from category.direct_tags

    def tag_ids(self) -> set[TagId]:
        return {tag.id for tag in self.iter_tags()}
