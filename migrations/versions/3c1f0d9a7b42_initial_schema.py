"""initial_schema

Create the resource directory schema:
- Categories, subcategories and tags (three-level taxonomy, soft delete)
- Resources (moderated submissions)
- Resource tags (many-to-many join)

Revision ID: 3c1f0d9a7b42
Revises:
Create Date: 2026-10-12 10:14:02.318824

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d9a7b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE resource_status AS ENUM
                ('draft', 'pending_review', 'published', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "color", sa.String(7), nullable=False, server_default="#3B82F6"
        ),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    # Slugs only need to be unique among active entries
    op.create_index(
        "uq_categories_active_slug",
        "categories",
        ["slug"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )
    op.create_index("idx_categories_sort", "categories", ["sort_order", "name"])

    # ========================================================================
    # SUBCATEGORIES table
    # ========================================================================
    op.create_table(
        "subcategories",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(7), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_subcategories_active_slug",
        "subcategories",
        ["category_id", "slug"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )
    op.create_index(
        "idx_subcategories_category_id", "subcategories", ["category_id"]
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("sub_category_id", sa.Integer(), nullable=True),
        sa.Column("color", sa.String(7), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["sub_category_id"], ["subcategories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Category-direct tags share one scope per category
    op.execute("""
        CREATE UNIQUE INDEX uq_tags_active_slug
        ON tags (category_id, COALESCE(sub_category_id, 0), slug)
        WHERE is_active
    """)
    op.create_index("idx_tags_name", "tags", ["name"])
    op.create_index("idx_tags_category_id", "tags", ["category_id"])
    op.create_index("idx_tags_sub_category_id", "tags", ["sub_category_id"])

    # ========================================================================
    # RESOURCES table
    # ========================================================================
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("submitted_by", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("url_link", sa.Text(), nullable=True),
        sa.Column("download_link", sa.Text(), nullable=True),
        sa.Column("linkedin_profile", sa.Text(), nullable=True),
        sa.Column("submitter_email", sa.String(255), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(name="resource_status", create_type=False),
            nullable=False,
            server_default=sa.text("'pending_review'"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_resources_status", "resources", ["status"])
    op.create_index("idx_resources_date", "resources", ["date"])

    # ========================================================================
    # RESOURCE_TAGS table (many-to-many)
    # ========================================================================
    op.create_table(
        "resource_tags",
        sa.Column("resource_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["resource_id"], ["resources.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("resource_id", "tag_id", name="pk_resource_tags"),
    )
    op.create_index("idx_resource_tags_tag_id", "resource_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("resource_tags")
    op.drop_table("resources")
    op.drop_table("tags")
    op.drop_table("subcategories")
    op.drop_table("categories")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS resource_status")
