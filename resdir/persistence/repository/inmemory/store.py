"""Shared in-memory tables for the in-memory repositories.

One store backs every in-memory repository so joins (tag paths, attachments)
see the same data, the way they would in the database.
"""

from datetime import datetime
from itertools import count
from typing import Iterator, Optional

from resdir.domain.error import StoreUnavailableError
from resdir.domain.model import Category, FlatTagRow, Resource, Subcategory, Tag
from resdir.domain.value import CategoryId, ResourceId, SubcategoryId, TagId


class InMemoryStore:
    """Process-local tables with identity counters."""

    def __init__(self) -> None:
        self.categories: dict[CategoryId, Category] = {}
        self.subcategories: dict[SubcategoryId, Subcategory] = {}
        self.tags: dict[TagId, Tag] = {}
        self.resources: dict[ResourceId, Resource] = {}
        self.resource_tags: dict[ResourceId, list[TagId]] = {}
        self._ids: dict[str, Iterator[int]] = {}
        # Flip to False to simulate an unreachable database
        self.available = True

    def next_id(self, table: str) -> int:
        if table not in self._ids:
            self._ids[table] = count(1)
        return next(self._ids[table])

    def check_available(self) -> None:
        if not self.available:
            raise StoreUnavailableError()

    @staticmethod
    def stamp(created: bool) -> dict[str, datetime]:
        """Timestamps the database would set on insert or update."""
        now = datetime.now()
        if created:
            return {"created_at": now, "updated_at": now}
        return {"updated_at": now}

    def tag_row(self, tag: Tag) -> Optional[FlatTagRow]:
        """Join a tag with its parents, or None when it is not visible."""
        category = self.categories.get(tag.category_id)
        if not tag.is_active or category is None or not category.is_active:
            return None

        subcategory = None
        if tag.sub_category_id is not None:
            subcategory = self.subcategories.get(tag.sub_category_id)
            if subcategory is None or not subcategory.is_active:
                return None

        return FlatTagRow(
            category_id=category.id,
            category_name=category.name,
            category_slug=category.slug.root,
            category_color=category.color.root,
            sub_category_id=subcategory.id if subcategory else None,
            sub_category_name=subcategory.name if subcategory else None,
            sub_category_slug=subcategory.slug.root if subcategory else None,
            sub_category_color=(
                subcategory.color.root if subcategory and subcategory.color else None
            ),
            sub_category_parent_id=subcategory.category_id if subcategory else None,
            tag_id=tag.id,
            tag_name=tag.name,
            tag_slug=tag.slug.root,
            tag_color=tag.color.root if tag.color else None,
        )

    def taxonomy_key(self, row: FlatTagRow) -> tuple:
        """Sort key matching the database's taxonomy order."""
        category = self.categories[row.category_id]
        tag = self.tags[row.tag_id]
        if row.sub_category_id is None:
            sub_key: tuple = (1, 0, "", 0)
        else:
            subcategory = self.subcategories[row.sub_category_id]
            sub_key = (0, subcategory.sort_order, subcategory.name, subcategory.id)
        return (
            category.sort_order,
            category.name,
            category.id,
            *sub_key,
            tag.sort_order,
            tag.name,
            tag.id,
        )

    def visible_rows(self, tag_ids: Optional[set[TagId]] = None) -> list[FlatTagRow]:
        """Visible tag rows in taxonomy order, optionally limited to some ids."""
        rows = []
        for tag in self.tags.values():
            if tag_ids is not None and tag.id not in tag_ids:
                continue
            row = self.tag_row(tag)
            if row is not None:
                rows.append(row)
        rows.sort(key=self.taxonomy_key)
        return rows
