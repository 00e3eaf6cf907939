"""Category entity, the top level of the taxonomy."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from resdir.domain.model.common import DomainModel
from resdir.domain.value import CategoryId, HexColor, Slug


class Category(DomainModel):
    """Top-level taxonomy entry.

    Created by admins only. Never hard-deleted; ``is_active=False`` hides it
    and everything below it from every hierarchy view.
    """

    id: Optional[CategoryId] = None  # Assigned by the store on first save
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    description: Optional[str] = None
    color: HexColor
    icon: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
