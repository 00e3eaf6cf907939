"""Test configuration and shared helpers."""

import datetime as dt
from typing import Optional

from resdir.domain.model import FlatTagRow, ResourceFields
from resdir.domain.service import TaxonomyService
from resdir.domain.value import CategoryId, SubcategoryId, TagId


def make_fields(title: str = "Study A", **overrides) -> ResourceFields:
    """Build a complete, valid set of resource form fields."""
    values = {
        "submitted_by": "Ada Researcher",
        "date": dt.date(2024, 3, 1),
        "title": title,
        "author": "A. Researcher",
        "description": "A study worth reading",
        "url_link": "https://example.org/study",
        "submitter_email": "ada@example.org",
    }
    values.update(overrides)
    return ResourceFields(**values)


def make_row(
    tag_id: int,
    tag_name: str,
    category_id: int = 1,
    category_name: str = "Research",
    sub_category_id: Optional[int] = 1,
    sub_category_name: Optional[str] = "Methods",
    sub_category_parent_id: Optional[int] = None,
    category_color: str = "#3B82F6",
    sub_category_color: Optional[str] = None,
    tag_color: Optional[str] = None,
) -> FlatTagRow:
    """Build a flat hierarchy row, defaulting to Research > Methods."""
    if sub_category_id is not None and sub_category_parent_id is None:
        sub_category_parent_id = category_id
    return FlatTagRow(
        category_id=CategoryId(category_id),
        category_name=category_name,
        category_slug=category_name.lower().replace(" ", "-"),
        category_color=category_color,
        sub_category_id=(
            SubcategoryId(sub_category_id) if sub_category_id is not None else None
        ),
        sub_category_name=sub_category_name if sub_category_id is not None else None,
        sub_category_slug=(
            sub_category_name.lower().replace(" ", "-")
            if sub_category_id is not None and sub_category_name
            else None
        ),
        sub_category_color=sub_category_color,
        sub_category_parent_id=(
            CategoryId(sub_category_parent_id)
            if sub_category_parent_id is not None
            else None
        ),
        tag_id=TagId(tag_id),
        tag_name=tag_name,
        tag_slug=tag_name.lower().replace(" ", "-"),
        tag_color=tag_color,
    )


async def seed_taxonomy(taxonomy_service: TaxonomyService) -> dict[str, int]:
    """Create a small taxonomy and return tag ids by name.

    Research > Methods > Qualitative, Quantitative
    Research > Data > Surveys
    Health > Public Health > Qualitative
    Health (direct) > Books
    """
    research = await taxonomy_service.create_category(name="Research", sort_order=0)
    health = await taxonomy_service.create_category(
        name="Health", color="#10B981", sort_order=1
    )
    methods = await taxonomy_service.create_subcategory(
        category_id=research.id, name="Methods", sort_order=0
    )
    data = await taxonomy_service.create_subcategory(
        category_id=research.id, name="Data", sort_order=1
    )
    public_health = await taxonomy_service.create_subcategory(
        category_id=health.id, name="Public Health"
    )

    qualitative = await taxonomy_service.create_tag(
        category_id=research.id, sub_category_id=methods.id, name="Qualitative"
    )
    quantitative = await taxonomy_service.create_tag(
        category_id=research.id, sub_category_id=methods.id, name="Quantitative"
    )
    surveys = await taxonomy_service.create_tag(
        category_id=research.id, sub_category_id=data.id, name="Surveys"
    )
    health_qualitative = await taxonomy_service.create_tag(
        category_id=health.id, sub_category_id=public_health.id, name="Qualitative"
    )
    books = await taxonomy_service.create_tag(category_id=health.id, name="Books")

    return {
        "qualitative": qualitative.id,
        "quantitative": quantitative.id,
        "surveys": surveys.id,
        "health_qualitative": health_qualitative.id,
        "books": books.id,
    }
