"""Taxonomy hierarchy builder.

Turns the flat, pre-sorted tag rows the store produces into the nested
category -> subcategory -> tag tree. Pure and deterministic; no I/O.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from resdir.domain.model.hierarchy import (
    FlatTagRow,
    HierarchyCategory,
    HierarchySubcategory,
    HierarchyTag,
    OrphanedTag,
    OrphanReason,
    TagHierarchy,
)
from resdir.domain.value import CategoryId, DirectTagPlacement, SubcategoryId, TagId


@dataclass
class _SubcategoryNode:
    id: SubcategoryId
    name: str
    slug: str
    color: str
    tags: list[HierarchyTag] = field(default_factory=list)


@dataclass
class _CategoryNode:
    id: CategoryId
    name: str
    slug: str
    color: str
    subcategories: dict[str, _SubcategoryNode] = field(default_factory=dict)
    direct_tags: list[HierarchyTag] = field(default_factory=list)


def _leaf(row: FlatTagRow) -> HierarchyTag:
    return HierarchyTag(
        id=row.tag_id,
        name=row.tag_name,
        slug=row.tag_slug,
        color=row.effective_color,
        category_id=row.category_id,
        sub_category_id=row.sub_category_id,
    )


def build_hierarchy(
    rows: Sequence[FlatTagRow],
    placement: DirectTagPlacement = DirectTagPlacement.BUCKET,
) -> TagHierarchy:
    """Build the nested taxonomy tree from flat tag rows.

    Categories and subcategories keep the order in which they are first seen,
    so callers pre-sort rows by (sort_order, name) at each level. The builder
    never re-sorts and never repairs broken parent chains:

    - a row whose subcategory belongs to another category is reported as an
      orphan instead of being nested under the wrong category;
    - a row without a subcategory goes to the category's ``direct_tags`` with
      ``DirectTagPlacement.BUCKET``, or to the orphans with ``DROP``;
    - a category (or subcategory) name reused by a different id cannot share
      the name-keyed slot, so its rows are reported as orphans;
    - a tag id seen more than once keeps its first occurrence.

    Categories and subcategories only exist once a tag lands in them, so empty
    branches never appear.

    Args:
        rows: Denormalized tag rows, pre-sorted
        placement: Where category-direct tags go

    Returns:
        The tree plus every row that could not be placed
    """
    categories: dict[str, _CategoryNode] = {}
    orphans: list[OrphanedTag] = []
    seen: set[TagId] = set()

    for row in rows:
        if row.tag_id in seen:
            continue
        seen.add(row.tag_id)

        reason = _orphan_reason(row, categories, placement)
        if reason is not None:
            orphans.append(OrphanedTag(row=row, reason=reason))
            continue

        category = categories.get(row.category_name)
        if category is None:
            category = _CategoryNode(
                id=row.category_id,
                name=row.category_name,
                slug=row.category_slug,
                color=row.category_color,
            )
            categories[row.category_name] = category

        if row.sub_category_id is None:
            category.direct_tags.append(_leaf(row))
            continue

        sub_name = row.sub_category_name or ""
        subcategory = category.subcategories.get(sub_name)
        if subcategory is None:
            subcategory = _SubcategoryNode(
                id=row.sub_category_id,
                name=sub_name,
                slug=row.sub_category_slug or "",
                color=row.sub_category_color or row.category_color,
            )
            category.subcategories[sub_name] = subcategory
        subcategory.tags.append(_leaf(row))

    return TagHierarchy(
        categories={
            name: HierarchyCategory(
                id=node.id,
                name=node.name,
                slug=node.slug,
                color=node.color,
                subcategories={
                    sub_name: HierarchySubcategory(
                        id=sub.id,
                        name=sub.name,
                        slug=sub.slug,
                        color=sub.color,
                        tags=sub.tags,
                    )
                    for sub_name, sub in node.subcategories.items()
                },
                direct_tags=node.direct_tags,
            )
            for name, node in categories.items()
        },
        orphans=orphans,
    )


def _orphan_reason(
    row: FlatTagRow,
    categories: dict[str, _CategoryNode],
    placement: DirectTagPlacement,
) -> Optional[OrphanReason]:
    """Why the row cannot be placed, or None when it can."""
    if (
        row.sub_category_id is not None
        and row.sub_category_parent_id is not None
        and row.sub_category_parent_id != row.category_id
    ):
        return OrphanReason.SUBCATEGORY_CATEGORY_MISMATCH

    if row.sub_category_id is None and placement == DirectTagPlacement.DROP:
        return OrphanReason.NO_SUBCATEGORY

    category = categories.get(row.category_name)
    if category is None:
        return None
    if category.id != row.category_id:
        return OrphanReason.DUPLICATE_CATEGORY_NAME

    if row.sub_category_id is not None:
        subcategory = category.subcategories.get(row.sub_category_name or "")
        if subcategory is not None and subcategory.id != row.sub_category_id:
            return OrphanReason.DUPLICATE_SUBCATEGORY_NAME

    return None
