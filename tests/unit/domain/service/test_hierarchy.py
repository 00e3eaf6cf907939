"""Unit tests for the taxonomy hierarchy builder."""

from resdir.domain.model import OrphanReason
from resdir.domain.service import build_hierarchy
from resdir.domain.value import DirectTagPlacement
from tests.conftest import make_row


class TestBuildHierarchy:
    """Tests for nesting, ordering and colors."""

    def test_nests_rows_by_category_and_subcategory(self):
        """Every row lands under its own category and subcategory."""
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Quantitative"),
            make_row(3, "Surveys", sub_category_id=2, sub_category_name="Data"),
            make_row(
                4,
                "Gerontology",
                category_id=2,
                category_name="Health",
                sub_category_id=3,
                sub_category_name="Aging",
            ),
        ]

        hierarchy = build_hierarchy(rows)

        assert list(hierarchy.categories) == ["Research", "Health"]
        research = hierarchy.categories["Research"]
        assert list(research.subcategories) == ["Methods", "Data"]
        assert [t.name for t in research.subcategories["Methods"].tags] == [
            "Qualitative",
            "Quantitative",
        ]
        assert [t.id for t in research.subcategories["Data"].tags] == [3]
        assert hierarchy.categories["Health"].subcategories["Aging"].tags[0].id == 4
        assert hierarchy.orphans == []

    def test_flattening_gives_back_every_input_tag(self):
        """Tree and input rows describe the same set of tags."""
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Surveys", sub_category_id=2, sub_category_name="Data"),
            make_row(3, "Books", sub_category_id=None, sub_category_name=None),
        ]

        hierarchy = build_hierarchy(rows)

        assert hierarchy.tag_ids() == {1, 2, 3}
        assert [t.id for t in hierarchy.iter_tags()] == [1, 2, 3]

    def test_keeps_first_seen_order_without_resorting(self):
        """Callers decide order; the builder preserves it."""
        rows = [
            make_row(
                5,
                "Zeta",
                category_id=9,
                category_name="Zoology",
                sub_category_id=9,
                sub_category_name="Z",
            ),
            make_row(1, "Alpha"),
        ]

        hierarchy = build_hierarchy(rows)

        assert list(hierarchy.categories) == ["Zoology", "Research"]

    def test_same_input_gives_same_output(self):
        """The builder is deterministic."""
        rows = [make_row(1, "Qualitative"), make_row(2, "Quantitative")]

        assert build_hierarchy(rows) == build_hierarchy(list(rows))

    def test_empty_input_gives_empty_tree(self):
        hierarchy = build_hierarchy([])

        assert hierarchy.categories == {}
        assert hierarchy.orphans == []

    def test_duplicate_tag_ids_keep_first_occurrence(self):
        rows = [make_row(1, "Qualitative"), make_row(1, "Qualitative")]

        hierarchy = build_hierarchy(rows)

        assert [t.id for t in hierarchy.iter_tags()] == [1]


class TestEffectiveColors:
    """Tests for color inheritance."""

    def test_tag_without_color_inherits_category_color(self):
        hierarchy = build_hierarchy([make_row(1, "Qualitative")])

        methods = hierarchy.categories["Research"].subcategories["Methods"]
        assert methods.color == "#3B82F6"
        assert methods.tags[0].color == "#3B82F6"

    def test_subcategory_color_overrides_category_color(self):
        row = make_row(1, "Qualitative", sub_category_color="#10B981")

        hierarchy = build_hierarchy([row])

        methods = hierarchy.categories["Research"].subcategories["Methods"]
        assert methods.color == "#10B981"
        assert methods.tags[0].color == "#10B981"

    def test_tag_color_wins(self):
        row = make_row(
            1, "Qualitative", sub_category_color="#10B981", tag_color="#EF4444"
        )

        hierarchy = build_hierarchy([row])

        tag = hierarchy.categories["Research"].subcategories["Methods"].tags[0]
        assert tag.color == "#EF4444"


class TestDirectTagsAndOrphans:
    """Tests for rows that do not fit the three-level shape."""

    def test_direct_tags_are_bucketed_by_default(self):
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Books", sub_category_id=None, sub_category_name=None),
        ]

        hierarchy = build_hierarchy(rows)

        research = hierarchy.categories["Research"]
        assert [t.name for t in research.direct_tags] == ["Books"]
        assert hierarchy.orphans == []

    def test_direct_tags_are_reported_when_dropped(self):
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Books", sub_category_id=None, sub_category_name=None),
        ]

        hierarchy = build_hierarchy(rows, DirectTagPlacement.DROP)

        assert hierarchy.categories["Research"].direct_tags == []
        assert [(o.row.tag_id, o.reason) for o in hierarchy.orphans] == [
            (2, OrphanReason.NO_SUBCATEGORY)
        ]

    def test_category_of_only_dropped_tags_is_absent(self):
        """No empty branches."""
        rows = [make_row(2, "Books", sub_category_id=None, sub_category_name=None)]

        hierarchy = build_hierarchy(rows, DirectTagPlacement.DROP)

        assert hierarchy.categories == {}

    def test_subcategory_from_another_category_is_an_orphan(self):
        """A broken parent chain is surfaced, not silently re-parented."""
        rows = [
            make_row(1, "Qualitative"),
            make_row(
                2,
                "Misplaced",
                category_id=1,
                sub_category_id=7,
                sub_category_name="Aging",
                sub_category_parent_id=2,
            ),
        ]

        hierarchy = build_hierarchy(rows)

        assert "Aging" not in hierarchy.categories["Research"].subcategories
        assert hierarchy.orphans[0].reason == OrphanReason.SUBCATEGORY_CATEGORY_MISMATCH
        assert hierarchy.orphans[0].row.tag_id == 2

    def test_reused_category_name_is_an_orphan(self):
        """Two categories with one name cannot share the name-keyed slot."""
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Other", category_id=5, sub_category_id=8),
        ]

        hierarchy = build_hierarchy(rows)

        assert hierarchy.categories["Research"].id == 1
        assert hierarchy.orphans[0].reason == OrphanReason.DUPLICATE_CATEGORY_NAME

    def test_reused_subcategory_name_is_an_orphan(self):
        rows = [
            make_row(1, "Qualitative"),
            make_row(2, "Other", sub_category_id=8, sub_category_name="Methods"),
        ]

        hierarchy = build_hierarchy(rows)

        assert [t.id for t in hierarchy.iter_tags()] == [1]
        assert hierarchy.orphans[0].reason == OrphanReason.DUPLICATE_SUBCATEGORY_NAME
