"""Subcategory entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from resdir.domain.model.common import DomainModel
from resdir.domain.value import CategoryId, HexColor, Slug, SubcategoryId


class Subcategory(DomainModel):
    """Second taxonomy level, owned by exactly one category.

    ``color`` is optional; the category color applies when it is absent.
    """

    id: Optional[SubcategoryId] = None
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    description: Optional[str] = None
    category_id: CategoryId
    color: Optional[HexColor] = None
    icon: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
