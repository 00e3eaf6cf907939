"""Taxonomy domain service.

Creates and soft-deletes categories, subcategories and tags, and serves the
hierarchy views built from them.
"""

from typing import Optional

import logfire

from resdir.config import TaxonomySettings
from resdir.domain.error import DuplicateNameError, NotFoundError, ValidationFailedError
from resdir.domain.model import Category, Subcategory, Tag, TagHierarchy, TagPath
from resdir.domain.repository import (
    CategoryRepository,
    SubcategoryRepository,
    TagRepository,
)
from resdir.domain.value import CategoryId, HexColor, Slug, SubcategoryId, TagId
from resdir.domain.value.types import slugify

from .base import Service
from .hierarchy import build_hierarchy

# Column widths of the taxonomy tables
_MAX_NAME_LENGTH = 100
_MAX_SLUG_LENGTH = 150
_MAX_ICON_LENGTH = 50


def _derive_slug(name: str) -> Slug:
    slug = slugify(name)
    if not slug:
        raise ValidationFailedError(
            {"name": "Name must contain at least one letter or digit"}
        )
    if len(slug) > _MAX_SLUG_LENGTH:
        raise ValidationFailedError(
            {"name": f"Slug must be at most {_MAX_SLUG_LENGTH} characters"}
        )
    return Slug(slug)


def _parse_color(color: Optional[str]) -> Optional[HexColor]:
    if color is None:
        return None
    try:
        return HexColor(color)
    except ValueError:
        raise ValidationFailedError({"color": "Color must be a hex value like #3B82F6"})


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationFailedError({"name": "Name is required"})
    if len(cleaned) > _MAX_NAME_LENGTH:
        raise ValidationFailedError(
            {"name": f"Name must be at most {_MAX_NAME_LENGTH} characters"}
        )
    return cleaned


def _check_icon(icon: Optional[str]) -> Optional[str]:
    if icon is not None and len(icon) > _MAX_ICON_LENGTH:
        raise ValidationFailedError(
            {"icon": f"Icon must be at most {_MAX_ICON_LENGTH} characters"}
        )
    return icon


class TaxonomyService(Service):
    """Domain service for taxonomy management and hierarchy views."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        subcategory_repository: SubcategoryRepository,
        tag_repository: TagRepository,
        taxonomy_settings: TaxonomySettings,
    ) -> None:
        """Initialize taxonomy service.

        Args:
            category_repository: Category repository
            subcategory_repository: Subcategory repository
            tag_repository: Tag repository
            taxonomy_settings: Default color and direct-tag placement
        """
        self.category_repository = category_repository
        self.subcategory_repository = subcategory_repository
        self.tag_repository = tag_repository
        self.settings = taxonomy_settings

    async def get_hierarchy(
        self, public_only: bool = False
    ) -> tuple[list[TagPath], TagHierarchy]:
        """Build the admin or public hierarchy view.

        The admin view covers every active tag. The public view keeps only
        tags attached to at least one resource, so empty branches disappear.

        Args:
            public_only: Select the public view

        Returns:
            Flat tag paths (placed tags only) and the nested hierarchy
        """
        with logfire.span("taxonomy_service.get_hierarchy", public_only=public_only):
            rows = await self.tag_repository.find_hierarchy_rows(
                public_only=public_only
            )
            hierarchy = build_hierarchy(rows, self.settings.direct_tag_placement)

            placed = hierarchy.tag_ids()
            flat = [row.to_path() for row in rows if row.tag_id in placed]

            if hierarchy.orphans:
                logfire.warn(
                    "Hierarchy has orphaned tags",
                    count=len(hierarchy.orphans),
                    tag_ids=[orphan.row.tag_id for orphan in hierarchy.orphans],
                )
            logfire.info(
                "Hierarchy built",
                categories=len(hierarchy.categories),
                tags=len(flat),
            )
            return flat, hierarchy

    async def list_categories(self) -> list[Category]:
        """List active categories ordered by (sort_order, name)."""
        with logfire.span("taxonomy_service.list_categories"):
            return await self.category_repository.find_all()

    async def list_subcategories(
        self, category_id: Optional[CategoryId] = None
    ) -> list[Subcategory]:
        """List active subcategories, optionally for one category."""
        with logfire.span(
            "taxonomy_service.list_subcategories", category_id=category_id
        ):
            return await self.subcategory_repository.find_by_category(category_id)

    async def create_category(
        self,
        name: str,
        color: Optional[str] = None,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        sort_order: int = 0,
    ) -> Category:
        """Create a category.

        Args:
            name: Display name, the slug is derived from it
            color: Hex color, the configured default when omitted
            description: Optional description
            icon: Optional icon name
            sort_order: Display position

        Returns:
            Created category

        Raises:
            ValidationFailedError: If the name or color is unusable
            DuplicateNameError: If an active category has the same slug
        """
        with logfire.span("taxonomy_service.create_category", name=name):
            name = _clean_name(name)
            slug = _derive_slug(name)
            hex_color = _parse_color(color) or HexColor(self.settings.default_color)
            icon = _check_icon(icon)

            if await self.category_repository.slug_exists(slug):
                logfire.warn("Duplicate category", name=name, slug=slug.root)
                raise DuplicateNameError("Category", name, slug.root)

            saved = await self.category_repository.save(
                Category(
                    name=name,
                    slug=slug,
                    description=description,
                    color=hex_color,
                    icon=icon,
                    sort_order=sort_order,
                )
            )
            logfire.info("Category created", category_id=saved.id, slug=slug.root)
            return saved

    async def create_subcategory(
        self,
        category_id: CategoryId,
        name: str,
        color: Optional[str] = None,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        sort_order: int = 0,
    ) -> Subcategory:
        """Create a subcategory under an active category.

        Raises:
            NotFoundError: If the category is unknown or inactive
            ValidationFailedError: If the name or color is unusable
            DuplicateNameError: If the category already has an active
                subcategory with the same slug
        """
        with logfire.span(
            "taxonomy_service.create_subcategory", category_id=category_id, name=name
        ):
            name = _clean_name(name)
            slug = _derive_slug(name)
            hex_color = _parse_color(color)
            icon = _check_icon(icon)

            await self._require_category(category_id)

            if await self.subcategory_repository.slug_exists(category_id, slug):
                logfire.warn(
                    "Duplicate subcategory",
                    category_id=category_id,
                    name=name,
                    slug=slug.root,
                )
                raise DuplicateNameError("Subcategory", name, slug.root)

            saved = await self.subcategory_repository.save(
                Subcategory(
                    name=name,
                    slug=slug,
                    description=description,
                    category_id=category_id,
                    color=hex_color,
                    icon=icon,
                    sort_order=sort_order,
                )
            )
            logfire.info(
                "Subcategory created",
                subcategory_id=saved.id,
                category_id=category_id,
                slug=slug.root,
            )
            return saved

    async def create_tag(
        self,
        category_id: CategoryId,
        name: str,
        sub_category_id: Optional[SubcategoryId] = None,
        color: Optional[str] = None,
        description: Optional[str] = None,
        icon: Optional[str] = None,
        sort_order: int = 0,
    ) -> Tag:
        """Create a tag under a category and optionally a subcategory.

        Raises:
            NotFoundError: If the category or subcategory is unknown or inactive
            ValidationFailedError: If the subcategory belongs to another
                category, or the name or color is unusable
            DuplicateNameError: If the same parent scope already has an
                active tag with the same slug
        """
        with logfire.span(
            "taxonomy_service.create_tag",
            category_id=category_id,
            sub_category_id=sub_category_id,
            name=name,
        ):
            name = _clean_name(name)
            slug = _derive_slug(name)
            hex_color = _parse_color(color)
            icon = _check_icon(icon)

            await self._require_category(category_id)

            if sub_category_id is not None:
                subcategory = await self.subcategory_repository.find_by_id(
                    sub_category_id
                )
                if not subcategory or not subcategory.is_active:
                    logfire.warn(
                        "Subcategory not found", subcategory_id=sub_category_id
                    )
                    raise NotFoundError("Subcategory", sub_category_id)
                if subcategory.category_id != category_id:
                    logfire.warn(
                        "Subcategory belongs to another category",
                        subcategory_id=sub_category_id,
                        category_id=category_id,
                        owner_id=subcategory.category_id,
                    )
                    raise ValidationFailedError(
                        {
                            "sub_category_id": (
                                "Subcategory does not belong to the selected category"
                            )
                        }
                    )

            if await self.tag_repository.slug_exists(
                category_id, sub_category_id, slug
            ):
                logfire.warn("Duplicate tag", name=name, slug=slug.root)
                raise DuplicateNameError("Tag", name, slug.root)

            saved = await self.tag_repository.save(
                Tag(
                    name=name,
                    slug=slug,
                    description=description,
                    category_id=category_id,
                    sub_category_id=sub_category_id,
                    color=hex_color,
                    icon=icon,
                    sort_order=sort_order,
                )
            )
            logfire.info("Tag created", tag_id=saved.id, slug=slug.root)
            return saved

    async def deactivate_category(self, category_id: CategoryId) -> Category:
        """Soft delete a category.

        Raises:
            NotFoundError: If the category does not exist
        """
        with logfire.span(
            "taxonomy_service.deactivate_category", category_id=category_id
        ):
            category = await self.category_repository.find_by_id(category_id)
            if not category:
                logfire.warn("Category not found", category_id=category_id)
                raise NotFoundError("Category", category_id)
            saved = await self.category_repository.save(
                category.model_copy(update={"is_active": False})
            )
            logfire.info("Category deactivated", category_id=category_id)
            return saved

    async def deactivate_subcategory(
        self, subcategory_id: SubcategoryId
    ) -> Subcategory:
        """Soft delete a subcategory.

        Raises:
            NotFoundError: If the subcategory does not exist
        """
        with logfire.span(
            "taxonomy_service.deactivate_subcategory", subcategory_id=subcategory_id
        ):
            subcategory = await self.subcategory_repository.find_by_id(subcategory_id)
            if not subcategory:
                logfire.warn("Subcategory not found", subcategory_id=subcategory_id)
                raise NotFoundError("Subcategory", subcategory_id)
            saved = await self.subcategory_repository.save(
                subcategory.model_copy(update={"is_active": False})
            )
            logfire.info("Subcategory deactivated", subcategory_id=subcategory_id)
            return saved

    async def deactivate_tag(self, tag_id: TagId) -> Tag:
        """Soft delete a tag.

        Raises:
            NotFoundError: If the tag does not exist
        """
        with logfire.span("taxonomy_service.deactivate_tag", tag_id=tag_id):
            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                logfire.warn("Tag not found", tag_id=tag_id)
                raise NotFoundError("Tag", tag_id)
            saved = await self.tag_repository.save(
                tag.model_copy(update={"is_active": False})
            )
            logfire.info("Tag deactivated", tag_id=tag_id)
            return saved

    async def _require_category(self, category_id: CategoryId) -> Category:
        category = await self.category_repository.find_by_id(category_id)
        if not category or not category.is_active:
            logfire.warn("Category not found", category_id=category_id)
            raise NotFoundError("Category", category_id)
        return category
