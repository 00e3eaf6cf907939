"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from resdir.domain.value import HexColor, ResourceStatus, Slug
from resdir.domain.value.types import slugify


class TestSlugify:
    """Tests for slug derivation."""

    def test_lowercases_and_hyphenates(self):
        """Spaces and punctuation collapse into single hyphens."""
        assert slugify("Public Health") == "public-health"
        assert slugify("Sub-Saharan  Africa!") == "sub-saharan-africa"

    def test_strips_leading_and_trailing_separators(self):
        """No hyphen at either end."""
        assert slugify("  --Doctoral Education--  ") == "doctoral-education"

    def test_name_without_alphanumerics_gives_empty_slug(self):
        """A name made only of symbols has nothing to keep."""
        assert slugify("!!! ???") == ""

    def test_slug_from_name(self):
        """Slug.from_name derives and validates in one step."""
        assert Slug.from_name("Qualitative Methods").root == "qualitative-methods"

    def test_slug_from_unusable_name_raises(self):
        """An empty derived slug is rejected."""
        with pytest.raises(ValidationError):
            Slug.from_name("***")


class TestHexColor:
    """Tests for HexColor."""

    def test_accepts_six_digit_hex(self):
        assert HexColor("#3B82F6").root == "#3B82F6"

    @pytest.mark.parametrize("value", ["3B82F6", "#3B8", "#GGGGGG", "blue"])
    def test_rejects_other_formats(self, value):
        with pytest.raises(ValidationError):
            HexColor(value)


class TestResourceStatusTransitions:
    """Tests for the resource lifecycle guard."""

    @pytest.mark.parametrize(
        "current,target",
        [
            (ResourceStatus.DRAFT, ResourceStatus.PENDING_REVIEW),
            (ResourceStatus.PENDING_REVIEW, ResourceStatus.PUBLISHED),
            (ResourceStatus.PENDING_REVIEW, ResourceStatus.REJECTED),
            (ResourceStatus.PUBLISHED, ResourceStatus.REJECTED),
        ],
    )
    def test_allowed_moves(self, current, target):
        assert current.can_transition_to(target)

    @pytest.mark.parametrize(
        "current,target",
        [
            (ResourceStatus.DRAFT, ResourceStatus.PUBLISHED),
            (ResourceStatus.REJECTED, ResourceStatus.PUBLISHED),
            (ResourceStatus.REJECTED, ResourceStatus.PENDING_REVIEW),
            (ResourceStatus.PUBLISHED, ResourceStatus.DRAFT),
        ],
    )
    def test_rejected_moves(self, current, target):
        assert not current.can_transition_to(target)

    def test_same_status_is_allowed(self):
        """Re-applying the current status is idempotent."""
        assert ResourceStatus.PUBLISHED.can_transition_to(ResourceStatus.PUBLISHED)
