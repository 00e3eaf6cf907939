"""Tag entity, the leaf of the taxonomy."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from resdir.domain.model.common import DomainModel
from resdir.domain.value import CategoryId, HexColor, Slug, SubcategoryId, TagId


class Tag(DomainModel):
    """Leaf taxonomy entry that resources are tagged with.

    A tag always belongs to a category and optionally to one of that
    category's subcategories. Names are unique within their subcategory
    (or within the category for category-direct tags).
    """

    id: Optional[TagId] = None
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    description: Optional[str] = None
    category_id: CategoryId
    sub_category_id: Optional[SubcategoryId] = None
    color: Optional[HexColor] = None
    icon: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
