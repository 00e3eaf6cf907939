"""PostgreSQL implementation of Subcategory repository."""

from typing import Optional

import logfire
from sqlalchemy import func, insert, select, update

from resdir.domain.model import Subcategory
from resdir.domain.repository.subcategory import SubcategoryRepository
from resdir.domain.value import CategoryId, Slug, SubcategoryId
from resdir.persistence.mappers import row_to_subcategory, subcategory_to_dict
from resdir.persistence.tables import categories_table, subcategories_table

from .base import PostgresRepository


class PostgresSubcategoryRepository(PostgresRepository, SubcategoryRepository):
    """PostgreSQL implementation of SubcategoryRepository."""

    async def save(self, subcategory: Subcategory) -> Subcategory:
        """Save a subcategory (create or update)."""
        with logfire.span(
            "subcategory_repository.save", subcategory_id=subcategory.id
        ):
            values = subcategory_to_dict(subcategory)
            if subcategory.id is None:
                stmt = (
                    insert(subcategories_table)
                    .values(**values)
                    .returning(subcategories_table)
                )
            else:
                stmt = (
                    update(subcategories_table)
                    .where(subcategories_table.c.id == subcategory.id)
                    .values(**values, updated_at=func.now())
                    .returning(subcategories_table)
                )
            result = await self._execute_unique_slug(
                stmt, "uq_subcategories_active_slug", "Subcategory", values
            )
            row = result.fetchone()
            await self.session.flush()
            return row_to_subcategory(row._asdict())

    async def find_by_id(self, subcategory_id: SubcategoryId) -> Optional[Subcategory]:
        """Find a subcategory by ID."""
        stmt = select(subcategories_table).where(
            subcategories_table.c.id == subcategory_id
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_subcategory(row._asdict()) if row else None

    async def find_by_category(
        self, category_id: Optional[CategoryId] = None
    ) -> list[Subcategory]:
        """Find active subcategories of active categories.

        Ordered by the owning category's (sort_order, name), then by the
        subcategory's own (sort_order, name).
        """
        stmt = (
            select(subcategories_table)
            .join(
                categories_table,
                subcategories_table.c.category_id == categories_table.c.id,
            )
            .where(subcategories_table.c.is_active, categories_table.c.is_active)
            .order_by(
                categories_table.c.sort_order,
                categories_table.c.name,
                subcategories_table.c.sort_order,
                subcategories_table.c.name,
            )
        )
        if category_id is not None:
            stmt = stmt.where(subcategories_table.c.category_id == category_id)
        result = await self._execute(stmt)
        return [row_to_subcategory(row._asdict()) for row in result.fetchall()]

    async def slug_exists(self, category_id: CategoryId, slug: Slug) -> bool:
        """Check if an active subcategory of the category uses the slug."""
        stmt = (
            select(func.count())
            .select_from(subcategories_table)
            .where(
                subcategories_table.c.category_id == category_id,
                subcategories_table.c.slug == slug.root,
                subcategories_table.c.is_active,
            )
        )
        result = await self._execute(stmt)
        return (result.scalar() or 0) > 0
