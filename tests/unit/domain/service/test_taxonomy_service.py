"""Unit tests for TaxonomyService."""

import pytest

from resdir.domain.error import DuplicateNameError, NotFoundError, ValidationFailedError
from resdir.domain.model import OrphanReason
from resdir.domain.service import ResourceService, TaxonomyService
from resdir.domain.service.taxonomy_service import _derive_slug
from resdir.domain.value import CategoryId, DirectTagPlacement, ResourceStatus
from tests.conftest import make_fields, seed_taxonomy
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateEntries:
    """Tests for creating categories, subcategories and tags."""

    @pytest.mark.asyncio
    async def test_create_category_derives_slug_and_default_color(self, unit_env):
        """Slug comes from the name, color from settings when omitted."""
        service = await unit_env.get(TaxonomyService)

        category = await service.create_category(name="  Public Health  ")

        assert category.id is not None
        assert category.name == "Public Health"
        assert category.slug.root == "public-health"
        assert category.color.root == service.settings.default_color

    @pytest.mark.asyncio
    async def test_duplicate_category_slug_is_rejected(self, unit_env):
        """Names that slugify the same collide."""
        service = await unit_env.get(TaxonomyService)
        await service.create_category(name="Public Health")

        with pytest.raises(DuplicateNameError) as exc_info:
            await service.create_category(name="public-health")

        assert exc_info.value.kind == "duplicate_name"

    @pytest.mark.asyncio
    async def test_deactivated_category_frees_its_slug(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        category = await service.create_category(name="Research")
        await service.deactivate_category(category.id)

        again = await service.create_category(name="Research")

        assert again.id != category.id

    @pytest.mark.asyncio
    async def test_unusable_name_is_a_validation_error(self, unit_env):
        service = await unit_env.get(TaxonomyService)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_category(name="???")

        assert "name" in exc_info.value.fields

    @pytest.mark.asyncio
    async def test_bad_color_is_a_validation_error(self, unit_env):
        service = await unit_env.get(TaxonomyService)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_category(name="Research", color="blue")

        assert "color" in exc_info.value.fields

    @pytest.mark.asyncio
    async def test_overlong_name_is_a_validation_error(self, unit_env):
        service = await unit_env.get(TaxonomyService)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_category(name="a" * 160)

        assert "name" in exc_info.value.fields

    @pytest.mark.asyncio
    async def test_overlong_subcategory_and_tag_names_are_rejected(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        category = await service.create_category(name="Research")

        with pytest.raises(ValidationFailedError) as sub_info:
            await service.create_subcategory(category.id, name="b" * 101)
        with pytest.raises(ValidationFailedError) as tag_info:
            await service.create_tag(category.id, name="c" * 101)

        assert "name" in sub_info.value.fields
        assert "name" in tag_info.value.fields

    @pytest.mark.asyncio
    async def test_overlong_icon_is_a_validation_error(self, unit_env):
        service = await unit_env.get(TaxonomyService)

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_category(name="Research", icon="i" * 51)

        assert "icon" in exc_info.value.fields

    def test_overlong_slug_is_a_validation_error(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            _derive_slug("a" * 151)

        assert "name" in exc_info.value.fields

    @pytest.mark.asyncio
    async def test_subcategory_requires_active_category(self, unit_env):
        service = await unit_env.get(TaxonomyService)

        with pytest.raises(NotFoundError):
            await service.create_subcategory(category_id=CategoryId(99), name="Methods")

    @pytest.mark.asyncio
    async def test_same_subcategory_name_allowed_in_other_category(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        research = await service.create_category(name="Research")
        health = await service.create_category(name="Health")

        first = await service.create_subcategory(research.id, name="Methods")
        second = await service.create_subcategory(health.id, name="Methods")

        assert first.slug == second.slug
        with pytest.raises(DuplicateNameError):
            await service.create_subcategory(research.id, name="Methods")

    @pytest.mark.asyncio
    async def test_tag_subcategory_must_belong_to_category(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        research = await service.create_category(name="Research")
        health = await service.create_category(name="Health")
        aging = await service.create_subcategory(health.id, name="Aging")

        with pytest.raises(ValidationFailedError) as exc_info:
            await service.create_tag(
                category_id=research.id, sub_category_id=aging.id, name="Gerontology"
            )

        assert "sub_category_id" in exc_info.value.fields

    @pytest.mark.asyncio
    async def test_tag_names_are_unique_per_subcategory_only(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        ids = await seed_taxonomy(service)
        research = (await service.list_categories())[0]
        methods = (await service.list_subcategories(research.id))[0]

        # "Qualitative" exists under Research > Methods and Health > Public Health
        assert ids["qualitative"] != ids["health_qualitative"]
        with pytest.raises(DuplicateNameError):
            await service.create_tag(
                category_id=research.id, sub_category_id=methods.id, name="Qualitative"
            )


class TestListing:
    """Tests for list operations."""

    @pytest.mark.asyncio
    async def test_categories_listed_in_sort_order(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        await service.create_category(name="Zoology", sort_order=0)
        await service.create_category(name="Art", sort_order=1)
        await service.create_category(name="Biology", sort_order=0)

        names = [c.name for c in await service.list_categories()]

        assert names == ["Biology", "Zoology", "Art"]

    @pytest.mark.asyncio
    async def test_inactive_subcategories_not_listed(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        research = await service.create_category(name="Research")
        methods = await service.create_subcategory(research.id, name="Methods")
        await service.create_subcategory(research.id, name="Data")
        await service.deactivate_subcategory(methods.id)

        names = [s.name for s in await service.list_subcategories(research.id)]

        assert names == ["Data"]


class TestGetHierarchy:
    """Tests for the admin and public hierarchy views."""

    @pytest.mark.asyncio
    async def test_admin_view_lists_every_active_tag(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        ids = await seed_taxonomy(service)

        flat, hierarchy = await service.get_hierarchy()

        assert [p.tag_id for p in flat] == [
            ids["qualitative"],
            ids["quantitative"],
            ids["surveys"],
            ids["health_qualitative"],
            ids["books"],
        ]
        assert list(hierarchy.categories) == ["Research", "Health"]
        assert list(hierarchy.categories["Research"].subcategories) == [
            "Methods",
            "Data",
        ]
        assert [t.name for t in hierarchy.categories["Health"].direct_tags] == [
            "Books"
        ]
        assert flat[0].full_path == "Research > Methods > Qualitative"

    @pytest.mark.asyncio
    async def test_public_view_prunes_unattached_tags(self, unit_env):
        """Only tags used by a resource appear; empty branches disappear."""
        taxonomy = await unit_env.get(TaxonomyService)
        resources = await unit_env.get(ResourceService)
        ids = await seed_taxonomy(taxonomy)
        await resources.create_resource(
            make_fields(),
            status=ResourceStatus.PUBLISHED,
            tag_ids=[ids["surveys"]],
        )

        flat, hierarchy = await taxonomy.get_hierarchy(public_only=True)

        assert [p.tag_id for p in flat] == [ids["surveys"]]
        assert list(hierarchy.categories) == ["Research"]
        assert list(hierarchy.categories["Research"].subcategories) == ["Data"]

    @pytest.mark.asyncio
    async def test_deactivated_tag_disappears_from_both_views(self, unit_env):
        taxonomy = await unit_env.get(TaxonomyService)
        resources = await unit_env.get(ResourceService)
        ids = await seed_taxonomy(taxonomy)
        await resources.create_resource(
            make_fields(), status=ResourceStatus.PUBLISHED, tag_ids=[ids["surveys"]]
        )

        await taxonomy.deactivate_tag(ids["surveys"])

        admin_flat, _ = await taxonomy.get_hierarchy()
        public_flat, _ = await taxonomy.get_hierarchy(public_only=True)
        assert ids["surveys"] not in [p.tag_id for p in admin_flat]
        assert public_flat == []

    @pytest.mark.asyncio
    async def test_deactivated_category_hides_its_tags(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        await seed_taxonomy(service)
        health = (await service.list_categories())[1]

        await service.deactivate_category(health.id)

        _, hierarchy = await service.get_hierarchy()
        assert list(hierarchy.categories) == ["Research"]

    @pytest.mark.asyncio
    async def test_dropped_direct_tags_are_reported(self, unit_env):
        service = await unit_env.get(TaxonomyService)
        ids = await seed_taxonomy(service)
        service.settings = service.settings.model_copy(
            update={"direct_tag_placement": DirectTagPlacement.DROP}
        )

        flat, hierarchy = await service.get_hierarchy()

        assert ids["books"] not in [p.tag_id for p in flat]
        assert [(o.row.tag_id, o.reason) for o in hierarchy.orphans] == [
            (ids["books"], OrphanReason.NO_SUBCATEGORY)
        ]
