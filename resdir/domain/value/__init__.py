"""Domain value objects for the resource directory."""

from resdir.domain.value.identifiers import (
    CategoryId,
    ResourceId,
    SubcategoryId,
    TagId,
)
from resdir.domain.value.types import (
    DirectTagPlacement,
    HexColor,
    ResourceSortField,
    ResourceStatus,
    Slug,
    SortOrder,
    slugify,
)

__all__ = [
    # Identifiers
    "CategoryId",
    "SubcategoryId",
    "TagId",
    "ResourceId",
    # Types
    "Slug",
    "HexColor",
    "ResourceStatus",
    "ResourceSortField",
    "SortOrder",
    "DirectTagPlacement",
    "slugify",
]
