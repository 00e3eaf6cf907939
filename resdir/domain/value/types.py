"""Domain value objects for the resource directory.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from resdir.domain.value.common import RootValueObject


def slugify(name: str) -> str:
    """Derive a URL-safe slug from a display name.

    - Converts to lowercase
    - Collapses every run of non-alphanumeric chars into one hyphen
    - Strips leading/trailing hyphens

    Args:
        name: Display name

    Returns:
        Slug string (empty if the name has no alphanumeric chars)
    """
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class Slug(RootValueObject[str]):
    """URL-safe slug for taxonomy entries.

    Examples: 'public-health', 'qualitative-methods'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 150:
            raise ValueError("Slug must be 1-150 characters")
        return v

    @classmethod
    def from_name(cls, name: str) -> "Slug":
        """Build a slug from a display name.

        Raises:
            ValueError: If the name has no alphanumeric characters
        """
        return cls(slugify(name))


class HexColor(RootValueObject[str]):
    """Display color in ``#RRGGBB`` form."""

    @field_validator("root")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Validate color format."""
        if not re.match(r"^#[0-9A-Fa-f]{6}$", v):
            raise ValueError("Color must be a hex value like #3B82F6")
        return v


class ResourceStatus(str, Enum):
    """Lifecycle state of a resource.

    draft --(submit)--> pending_review --(approve)--> published
    pending_review --(reject)--> rejected
    published --(unpublish)--> rejected
    """

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"
    REJECTED = "rejected"

    def can_transition_to(self, target: "ResourceStatus") -> bool:
        """Whether moving to ``target`` is allowed.

        Re-applying the current status is allowed so the write stays idempotent.
        """
        return target == self or target in _STATUS_TRANSITIONS[self]


_STATUS_TRANSITIONS: dict[ResourceStatus, frozenset[ResourceStatus]] = {
    ResourceStatus.DRAFT: frozenset({ResourceStatus.PENDING_REVIEW}),
    ResourceStatus.PENDING_REVIEW: frozenset(
        {ResourceStatus.PUBLISHED, ResourceStatus.REJECTED}
    ),
    ResourceStatus.PUBLISHED: frozenset({ResourceStatus.REJECTED}),
    ResourceStatus.REJECTED: frozenset(),
}


class ResourceSortField(str, Enum):
    """Sortable resource columns."""

    TITLE = "title"
    SUBMITTED_BY = "submitted_by"
    CREATED_AT = "created_at"
    DATE = "date"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class DirectTagPlacement(str, Enum):
    """Where the hierarchy puts tags attached directly to a category."""

    BUCKET = "bucket"  # Kept in the category's direct_tags list
    DROP = "drop"  # Left out of the tree and reported as orphans
