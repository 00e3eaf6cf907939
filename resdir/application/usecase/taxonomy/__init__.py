"""Taxonomy use cases."""

from .common import CategoryItem, SubcategoryItem, TagItem
from .create_category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
)
from .create_subcategory import (
    CreateSubcategoryRequest,
    CreateSubcategoryResponse,
    CreateSubcategoryUseCase,
)
from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .deactivate_entry import (
    DeactivateEntryRequest,
    DeactivateEntryResponse,
    DeactivateEntryUseCase,
    EntryKind,
)
from .get_tag_hierarchy import (
    GetTagHierarchyRequest,
    GetTagHierarchyResponse,
    GetTagHierarchyUseCase,
    OrphanItem,
)
from .list_categories import ListCategoriesResponse, ListCategoriesUseCase
from .list_subcategories import (
    ListSubcategoriesRequest,
    ListSubcategoriesResponse,
    ListSubcategoriesUseCase,
)

__all__ = [
    "CategoryItem",
    "SubcategoryItem",
    "TagItem",
    "CreateCategoryRequest",
    "CreateCategoryResponse",
    "CreateCategoryUseCase",
    "CreateSubcategoryRequest",
    "CreateSubcategoryResponse",
    "CreateSubcategoryUseCase",
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "DeactivateEntryRequest",
    "DeactivateEntryResponse",
    "DeactivateEntryUseCase",
    "EntryKind",
    "GetTagHierarchyRequest",
    "GetTagHierarchyResponse",
    "GetTagHierarchyUseCase",
    "OrphanItem",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "ListSubcategoriesRequest",
    "ListSubcategoriesResponse",
    "ListSubcategoriesUseCase",
]
