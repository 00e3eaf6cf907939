"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from resdir.domain.model import (
    Category,
    FlatTagRow,
    Resource,
    ResourceWithTags,
    Subcategory,
    Tag,
    TagPath,
)
from resdir.domain.value import (
    CategoryId,
    HexColor,
    ResourceId,
    ResourceStatus,
    Slug,
    SubcategoryId,
    TagId,
)

# Store-managed columns, never written from the domain model
_GENERATED = {"id", "created_at", "updated_at"}


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        color=HexColor(row["color"]),
        icon=row.get("icon"),
        sort_order=row["sort_order"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to a dict of writable columns."""
    return category.model_dump(exclude=_GENERATED)


def row_to_subcategory(row: Dict[str, Any]) -> Subcategory:
    """Convert database row to Subcategory domain model."""
    return Subcategory(
        id=SubcategoryId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        category_id=CategoryId(row["category_id"]),
        color=HexColor(row["color"]) if row.get("color") else None,
        icon=row.get("icon"),
        sort_order=row["sort_order"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def subcategory_to_dict(subcategory: Subcategory) -> Dict[str, Any]:
    """Convert Subcategory domain model to a dict of writable columns."""
    return subcategory.model_dump(exclude=_GENERATED)


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    sub_category_id = row.get("sub_category_id")
    return Tag(
        id=TagId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        category_id=CategoryId(row["category_id"]),
        sub_category_id=(
            SubcategoryId(sub_category_id) if sub_category_id is not None else None
        ),
        color=HexColor(row["color"]) if row.get("color") else None,
        icon=row.get("icon"),
        sort_order=row["sort_order"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to a dict of writable columns."""
    return tag.model_dump(exclude=_GENERATED)


def row_to_flat_tag(row: Dict[str, Any]) -> FlatTagRow:
    """Convert a joined tag/subcategory/category row to a FlatTagRow.

    Expects the labelled columns produced by the hierarchy query.
    """
    return FlatTagRow(
        category_id=CategoryId(row["category_id"]),
        category_name=row["category_name"],
        category_slug=row["category_slug"],
        category_color=row["category_color"],
        sub_category_id=row.get("sub_category_id"),
        sub_category_name=row.get("sub_category_name"),
        sub_category_slug=row.get("sub_category_slug"),
        sub_category_color=row.get("sub_category_color"),
        sub_category_parent_id=row.get("sub_category_parent_id"),
        tag_id=TagId(row["tag_id"]),
        tag_name=row["tag_name"],
        tag_slug=row["tag_slug"],
        tag_color=row.get("tag_color"),
    )


def row_to_tag_path(row: Dict[str, Any]) -> TagPath:
    """Convert a joined attachment row to a TagPath."""
    return row_to_flat_tag(row).to_path()


def row_to_resource(row: Dict[str, Any]) -> Resource:
    """Convert database row to Resource domain model."""
    return Resource(
        id=ResourceId(row["id"]),
        submitted_by=row["submitted_by"],
        date=row["date"],
        author=row.get("author"),
        title=row["title"],
        description=row.get("description"),
        url_link=row.get("url_link"),
        download_link=row.get("download_link"),
        linkedin_profile=row.get("linkedin_profile"),
        submitter_email=row.get("submitter_email"),
        status=ResourceStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_resource_with_tags(
    row: Dict[str, Any], tags: list[TagPath]
) -> ResourceWithTags:
    """Convert database row plus its tag paths to ResourceWithTags."""
    return ResourceWithTags(**row_to_resource(row).model_dump(), tags=tags)


def resource_to_dict(resource: Resource) -> Dict[str, Any]:
    """Convert Resource domain model to a dict of writable columns.

    ``tags`` (on ResourceWithTags) lives in the join table and is excluded.
    """
    data = resource.model_dump(exclude=_GENERATED | {"tags"})
    data["status"] = resource.status.value
    return data
