"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import exists, func, insert, or_, select, update
from sqlalchemy.sql.expression import ColumnElement, Select

from resdir.domain.model import FlatTagRow, Tag
from resdir.domain.repository.tag import TagRepository
from resdir.domain.value import CategoryId, Slug, SubcategoryId, TagId
from resdir.persistence.mappers import row_to_flat_tag, row_to_tag, tag_to_dict
from resdir.persistence.tables import (
    categories_table,
    resource_tags_table,
    subcategories_table,
    tags_table,
)

from .base import PostgresRepository


def visible_tags_clause() -> ColumnElement[bool]:
    """Active tag under an active category and, if set, an active subcategory.

    Needs ``subcategories`` outer-joined and ``categories`` joined.
    """
    return (
        tags_table.c.is_active
        & categories_table.c.is_active
        & or_(
            tags_table.c.sub_category_id.is_(None),
            subcategories_table.c.is_active.is_(True),
        )
    )


def tag_path_select(*extra: ColumnElement, attached: bool = False) -> Select:
    """Select visible tags with their full parent chain, in taxonomy order.

    Column labels match what ``row_to_flat_tag`` expects. With ``attached``
    the select starts from ``resource_tags``, one row per attachment.
    """
    source = tags_table
    if attached:
        source = resource_tags_table.join(
            tags_table, resource_tags_table.c.tag_id == tags_table.c.id
        )
    return (
        select(
            *extra,
            categories_table.c.id.label("category_id"),
            categories_table.c.name.label("category_name"),
            categories_table.c.slug.label("category_slug"),
            categories_table.c.color.label("category_color"),
            subcategories_table.c.id.label("sub_category_id"),
            subcategories_table.c.name.label("sub_category_name"),
            subcategories_table.c.slug.label("sub_category_slug"),
            subcategories_table.c.color.label("sub_category_color"),
            subcategories_table.c.category_id.label("sub_category_parent_id"),
            tags_table.c.id.label("tag_id"),
            tags_table.c.name.label("tag_name"),
            tags_table.c.slug.label("tag_slug"),
            tags_table.c.color.label("tag_color"),
        )
        .select_from(
            source.join(
                categories_table, tags_table.c.category_id == categories_table.c.id
            ).outerjoin(
                subcategories_table,
                tags_table.c.sub_category_id == subcategories_table.c.id,
            )
        )
        .where(visible_tags_clause())
        .order_by(
            categories_table.c.sort_order,
            categories_table.c.name,
            categories_table.c.id,
            # Category-direct tags (no subcategory) come after the subcategories
            subcategories_table.c.sort_order.asc().nulls_last(),
            subcategories_table.c.name.asc().nulls_last(),
            subcategories_table.c.id.asc().nulls_last(),
            tags_table.c.sort_order,
            tags_table.c.name,
            tags_table.c.id,
        )
    )


class PostgresTagRepository(PostgresRepository, TagRepository):
    """PostgreSQL implementation of TagRepository."""

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        with logfire.span("tag_repository.save", tag_id=tag.id):
            values = tag_to_dict(tag)
            if tag.id is None:
                stmt = insert(tags_table).values(**values).returning(tags_table)
            else:
                stmt = (
                    update(tags_table)
                    .where(tags_table.c.id == tag.id)
                    .values(**values, updated_at=func.now())
                    .returning(tags_table)
                )
            result = await self._execute_unique_slug(
                stmt, "uq_tags_active_slug", "Tag", values
            )
            row = result.fetchone()
            await self.session.flush()
            return row_to_tag(row._asdict())

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_ids_by_names(self, names: list[str]) -> list[TagId]:
        """Resolve names to ids of visible tags in a single query."""
        if not names:
            return []

        stmt = (
            select(tags_table.c.id)
            .select_from(
                tags_table.join(
                    categories_table, tags_table.c.category_id == categories_table.c.id
                ).outerjoin(
                    subcategories_table,
                    tags_table.c.sub_category_id == subcategories_table.c.id,
                )
            )
            .where(tags_table.c.name.in_(names), visible_tags_clause())
            .order_by(tags_table.c.id)
        )
        result = await self._execute(stmt)
        return [TagId(tag_id) for tag_id in result.scalars().all()]

    async def slug_exists(
        self,
        category_id: CategoryId,
        sub_category_id: Optional[SubcategoryId],
        slug: Slug,
    ) -> bool:
        """Check if an active tag in the same parent scope uses the slug."""
        scope = (
            tags_table.c.sub_category_id.is_(None)
            if sub_category_id is None
            else tags_table.c.sub_category_id == sub_category_id
        )
        stmt = (
            select(func.count())
            .select_from(tags_table)
            .where(
                tags_table.c.category_id == category_id,
                scope,
                tags_table.c.slug == slug.root,
                tags_table.c.is_active,
            )
        )
        result = await self._execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_hierarchy_rows(self, public_only: bool = False) -> list[FlatTagRow]:
        """Load ordered rows for every visible tag."""
        with logfire.span(
            "tag_repository.find_hierarchy_rows", public_only=public_only
        ):
            stmt = tag_path_select()
            if public_only:
                stmt = stmt.where(
                    exists().where(resource_tags_table.c.tag_id == tags_table.c.id)
                )
            result = await self._execute(stmt)
            rows = [row_to_flat_tag(row._asdict()) for row in result.fetchall()]
            logfire.info("Hierarchy rows loaded", count=len(rows))
            return rows
