"""PostgreSQL implementation of Category repository."""

from typing import Optional

import logfire
from sqlalchemy import func, insert, select, update

from resdir.domain.model import Category
from resdir.domain.repository.category import CategoryRepository
from resdir.domain.value import CategoryId, Slug
from resdir.persistence.mappers import category_to_dict, row_to_category
from resdir.persistence.tables import categories_table

from .base import PostgresRepository


class PostgresCategoryRepository(PostgresRepository, CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        with logfire.span("category_repository.save", category_id=category.id):
            values = category_to_dict(category)
            if category.id is None:
                stmt = (
                    insert(categories_table)
                    .values(**values)
                    .returning(categories_table)
                )
            else:
                stmt = (
                    update(categories_table)
                    .where(categories_table.c.id == category.id)
                    .values(**values, updated_at=func.now())
                    .returning(categories_table)
                )
            result = await self._execute_unique_slug(
                stmt, "uq_categories_active_slug", "Category", values
            )
            row = result.fetchone()
            await self.session.flush()
            return row_to_category(row._asdict())

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_all(self, include_inactive: bool = False) -> list[Category]:
        """Find categories ordered by (sort_order, name)."""
        stmt = select(categories_table).order_by(
            categories_table.c.sort_order, categories_table.c.name
        )
        if not include_inactive:
            stmt = stmt.where(categories_table.c.is_active)
        result = await self._execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if an active category uses the slug."""
        stmt = (
            select(func.count())
            .select_from(categories_table)
            .where(categories_table.c.slug == slug.root, categories_table.c.is_active)
        )
        result = await self._execute(stmt)
        return (result.scalar() or 0) > 0
