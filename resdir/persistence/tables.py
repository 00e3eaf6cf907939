"""SQLAlchemy table definitions for the resource directory.

These table definitions are used by the repositories through SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

resource_status_enum = postgresql.ENUM(
    "draft",
    "pending_review",
    "published",
    "rejected",
    name="resource_status",
    create_type=False,
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(150), nullable=False),
    Column("description", Text, nullable=True),
    Column("color", String(7), nullable=False, server_default="#3B82F6"),
    Column("icon", String(50), nullable=True),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Slugs are unique among active entries only; soft-deleted names can be reused
Index(
    "uq_categories_active_slug",
    categories_table.c.slug,
    unique=True,
    postgresql_where=categories_table.c.is_active,
)
Index(
    "idx_categories_sort", categories_table.c.sort_order, categories_table.c.name
)

# ============================================================================
# SUBCATEGORIES TABLE
# ============================================================================
subcategories_table = Table(
    "subcategories",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(150), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("color", String(7), nullable=True),  # Falls back to the category color
    Column("icon", String(50), nullable=True),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "uq_subcategories_active_slug",
    subcategories_table.c.category_id,
    subcategories_table.c.slug,
    unique=True,
    postgresql_where=subcategories_table.c.is_active,
)
Index("idx_subcategories_category_id", subcategories_table.c.category_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(150), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "sub_category_id",
        Integer,
        ForeignKey("subcategories.id", ondelete="RESTRICT"),
        nullable=True,  # NULL for tags attached directly to a category
    ),
    Column("color", String(7), nullable=True),
    Column("icon", String(50), nullable=True),
    Column("sort_order", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "uq_tags_active_slug",
    tags_table.c.category_id,
    func.coalesce(tags_table.c.sub_category_id, 0),
    tags_table.c.slug,
    unique=True,
    postgresql_where=tags_table.c.is_active,
)
Index("idx_tags_name", tags_table.c.name)
Index("idx_tags_category_id", tags_table.c.category_id)
Index("idx_tags_sub_category_id", tags_table.c.sub_category_id)

# ============================================================================
# RESOURCES TABLE
# ============================================================================
resources_table = Table(
    "resources",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("submitted_by", String(255), nullable=False),
    Column("date", Date, nullable=False),  # Original submission date, never updated
    Column("author", Text, nullable=True),
    Column("title", String(500), nullable=False),
    Column("description", Text, nullable=True),
    Column("url_link", Text, nullable=True),
    Column("download_link", Text, nullable=True),
    Column("linkedin_profile", Text, nullable=True),
    Column("submitter_email", String(255), nullable=True),  # Never public
    Column(
        "status",
        resource_status_enum,
        nullable=False,
        server_default=text("'pending_review'"),
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_resources_status", resources_table.c.status)
Index("idx_resources_date", resources_table.c.date)

# ============================================================================
# RESOURCE_TAGS TABLE (Many-to-many join)
# ============================================================================
resource_tags_table = Table(
    "resource_tags",
    metadata,
    Column(
        "resource_id",
        Integer,
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "tag_id", Integer, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("resource_id", "tag_id", name="pk_resource_tags"),
)

Index("idx_resource_tags_tag_id", resource_tags_table.c.tag_id)
