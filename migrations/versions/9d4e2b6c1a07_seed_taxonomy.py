"""seed_taxonomy

Revision ID: 9d4e2b6c1a07
Revises: 3c1f0d9a7b42
Create Date: 2026-10-12 11:02:47.551093

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d4e2b6c1a07"
down_revision: Union[str, Sequence[str], None] = "3c1f0d9a7b42"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (category, slug, color, {subcategory: [tags]}, [category-direct tags])
TAXONOMY = [
    (
        "Health",
        "health",
        "#10B981",
        {
            "Public Health": ["Public Health", "Health Disparities"],
            "Aging": ["Gerontology"],
        },
        [],
    ),
    (
        "Research",
        "research",
        "#3B82F6",
        {"Academic": ["Academic Research", "University Research"]},
        [],
    ),
    (
        "Education",
        "education",
        "#8B5CF6",
        {"Higher Education": ["Doctoral Education"]},
        ["Education"],
    ),
    (
        "Regions",
        "regions",
        "#F59E0B",
        {"Africa": ["African Studies", "Sub-Saharan Africa"]},
        [],
    ),
    ("Formats", "formats", "#EF4444", {}, ["Books"]),
]


def _slug(name: str) -> str:
    return "-".join("".join(c if c.isalnum() else " " for c in name.lower()).split())


def upgrade() -> None:
    """Seed the starter taxonomy."""
    bind = op.get_bind()

    insert_category = sa.text(
        "INSERT INTO categories (name, slug, color, sort_order) "
        "VALUES (:name, :slug, :color, :sort_order) RETURNING id"
    )
    insert_subcategory = sa.text(
        "INSERT INTO subcategories (name, slug, category_id, sort_order) "
        "VALUES (:name, :slug, :category_id, :sort_order) RETURNING id"
    )
    insert_tag = sa.text(
        "INSERT INTO tags (name, slug, category_id, sub_category_id, sort_order) "
        "VALUES (:name, :slug, :category_id, :sub_category_id, :sort_order)"
    )

    for position, (name, slug, color, subcategories, direct_tags) in enumerate(
        TAXONOMY
    ):
        category_id = bind.execute(
            insert_category,
            {"name": name, "slug": slug, "color": color, "sort_order": position},
        ).scalar_one()

        for sub_position, (sub_name, tags) in enumerate(subcategories.items()):
            sub_category_id = bind.execute(
                insert_subcategory,
                {
                    "name": sub_name,
                    "slug": _slug(sub_name),
                    "category_id": category_id,
                    "sort_order": sub_position,
                },
            ).scalar_one()
            for tag_position, tag_name in enumerate(tags):
                bind.execute(
                    insert_tag,
                    {
                        "name": tag_name,
                        "slug": _slug(tag_name),
                        "category_id": category_id,
                        "sub_category_id": sub_category_id,
                        "sort_order": tag_position,
                    },
                )

        for tag_position, tag_name in enumerate(direct_tags):
            bind.execute(
                insert_tag,
                {
                    "name": tag_name,
                    "slug": _slug(tag_name),
                    "category_id": category_id,
                    "sub_category_id": None,
                    "sort_order": tag_position,
                },
            )


def downgrade() -> None:
    """Remove the seeded taxonomy."""
    slugs = ", ".join(f"'{slug}'" for _, slug, _, _, _ in TAXONOMY)
    op.execute(f"""
        DELETE FROM tags WHERE category_id IN (
            SELECT id FROM categories WHERE slug IN ({slugs})
        )
    """)
    op.execute(f"""
        DELETE FROM subcategories WHERE category_id IN (
            SELECT id FROM categories WHERE slug IN ({slugs})
        )
    """)
    op.execute(f"DELETE FROM categories WHERE slug IN ({slugs})")
