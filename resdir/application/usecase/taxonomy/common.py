"""Response items shared by the taxonomy use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from resdir.domain.model import Category, Subcategory, Tag


class CategoryItem(BaseModel):
    """Category in responses."""

    id: int
    name: str
    slug: str
    description: Optional[str]
    color: str
    icon: Optional[str]
    sort_order: int
    is_active: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryItem":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug.root,
            description=category.description,
            color=category.color.root,
            icon=category.icon,
            sort_order=category.sort_order,
            is_active=category.is_active,
            created_at=category.created_at,
        )


class SubcategoryItem(BaseModel):
    """Subcategory in responses."""

    id: int
    name: str
    slug: str
    description: Optional[str]
    category_id: int
    color: Optional[str]
    icon: Optional[str]
    sort_order: int
    is_active: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, subcategory: Subcategory) -> "SubcategoryItem":
        return cls(
            id=subcategory.id,
            name=subcategory.name,
            slug=subcategory.slug.root,
            description=subcategory.description,
            category_id=subcategory.category_id,
            color=subcategory.color.root if subcategory.color else None,
            icon=subcategory.icon,
            sort_order=subcategory.sort_order,
            is_active=subcategory.is_active,
            created_at=subcategory.created_at,
        )


class TagItem(BaseModel):
    """Tag in responses."""

    id: int
    name: str
    slug: str
    description: Optional[str]
    category_id: int
    sub_category_id: Optional[int]
    color: Optional[str]
    icon: Optional[str]
    sort_order: int
    is_active: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagItem":
        return cls(
            id=tag.id,
            name=tag.name,
            slug=tag.slug.root,
            description=tag.description,
            category_id=tag.category_id,
            sub_category_id=tag.sub_category_id,
            color=tag.color.root if tag.color else None,
            icon=tag.icon,
            sort_order=tag.sort_order,
            is_active=tag.is_active,
            created_at=tag.created_at,
        )
