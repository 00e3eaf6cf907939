"""Moderation scenario driven through the use cases."""

import datetime as dt

import pytest

from resdir.application.usecase.resource import (
    ListAdminResourcesRequest,
    ListAdminResourcesUseCase,
    ListResourcesRequest,
    ListResourcesUseCase,
    SetResourceStatusRequest,
    SetResourceStatusUseCase,
    SetResourceTagsRequest,
    SetResourceTagsUseCase,
    SubmitResourceRequest,
    SubmitResourceUseCase,
)
from resdir.application.usecase.taxonomy import (
    CreateCategoryRequest,
    CreateCategoryUseCase,
    CreateSubcategoryRequest,
    CreateSubcategoryUseCase,
    CreateTagRequest,
    CreateTagUseCase,
    GetTagHierarchyRequest,
    GetTagHierarchyUseCase,
)
from resdir.domain.error import InvalidStatusError
from resdir.domain.value import ResourceStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_qualitative_tag(env) -> int:
    """Research > Methods > Qualitative, returning the tag id."""
    create_category = await env.get(CreateCategoryUseCase)
    create_subcategory = await env.get(CreateSubcategoryUseCase)
    create_tag = await env.get(CreateTagUseCase)

    category = await create_category.execute(
        CreateCategoryRequest(name="Research", color="#3B82F6")
    )
    subcategory = await create_subcategory.execute(
        CreateSubcategoryRequest(category_id=category.category.id, name="Methods")
    )
    tag = await create_tag.execute(
        CreateTagRequest(
            category_id=category.category.id,
            sub_category_id=subcategory.subcategory.id,
            name="Qualitative",
        )
    )
    return tag.tag.id


class TestModerationScenario:
    """A visitor submits, an admin tags and approves."""

    @pytest.mark.asyncio
    async def test_submission_becomes_public_after_approval(self, unit_env):
        """Should only expose the resource publicly once published."""
        tag_id = await _create_qualitative_tag(unit_env)
        submit = await unit_env.get(SubmitResourceUseCase)
        set_tags = await unit_env.get(SetResourceTagsUseCase)
        set_status = await unit_env.get(SetResourceStatusUseCase)
        list_public = await unit_env.get(ListResourcesUseCase)
        list_admin = await unit_env.get(ListAdminResourcesUseCase)
        hierarchy = await unit_env.get(GetTagHierarchyUseCase)

        submitted = await submit.execute(
            SubmitResourceRequest(
                submitted_by="Ada Researcher",
                date=dt.date(2024, 3, 1),
                title="Study A",
                submitter_email="ada@example.org",
            )
        )
        resource_id = submitted.resource.id
        assert submitted.resource.status == ResourceStatus.PENDING_REVIEW

        # Pending submissions stay out of the public listing
        public = await list_public.execute(ListResourcesRequest())
        assert public.total == 0

        tagged = await set_tags.execute(
            SetResourceTagsRequest(resource_id=resource_id, tag_ids=[tag_id])
        )
        assert [t.full_path for t in tagged.resource.tags] == [
            "Research > Methods > Qualitative"
        ]

        view = await hierarchy.execute(GetTagHierarchyRequest(public_only=True))
        methods = view.hierarchy["Research"].subcategories["Methods"]
        assert [t.name for t in methods.tags] == ["Qualitative"]

        pending = await list_admin.execute(
            ListAdminResourcesRequest(status=ResourceStatus.PENDING_REVIEW)
        )
        assert [r.id for r in pending.resources] == [resource_id]
        assert pending.resources[0].submitter_email == "ada@example.org"
        assert pending.resources[0].tags[0].tag_name == "Qualitative"

        approved = await set_status.execute(
            SetResourceStatusRequest(resource_id=resource_id, status="published")
        )
        assert approved.status == ResourceStatus.PUBLISHED

        public = await list_public.execute(ListResourcesRequest(tags=["Qualitative"]))
        assert [r.id for r in public.resources] == [resource_id]
        assert "submitter_email" not in public.resources[0].model_dump()

        pending = await list_admin.execute(
            ListAdminResourcesRequest(status=ResourceStatus.PENDING_REVIEW)
        )
        assert pending.total == 0

    @pytest.mark.asyncio
    async def test_rejected_resource_cannot_be_published(self, unit_env):
        submit = await unit_env.get(SubmitResourceUseCase)
        set_status = await unit_env.get(SetResourceStatusUseCase)
        submitted = await submit.execute(
            SubmitResourceRequest(
                submitted_by="Ada", date=dt.date(2024, 3, 1), title="Study B"
            )
        )
        resource_id = submitted.resource.id

        await set_status.execute(
            SetResourceStatusRequest(resource_id=resource_id, status="rejected")
        )

        with pytest.raises(InvalidStatusError):
            await set_status.execute(
                SetResourceStatusRequest(resource_id=resource_id, status="published")
            )

    @pytest.mark.asyncio
    async def test_public_listing_ignores_other_statuses(self, unit_env):
        submit = await unit_env.get(SubmitResourceUseCase)
        list_public = await unit_env.get(ListResourcesUseCase)
        list_admin = await unit_env.get(ListAdminResourcesUseCase)
        await submit.execute(
            SubmitResourceRequest(
                submitted_by="Ada", date=dt.date(2024, 3, 1), title="Study C"
            )
        )

        public = await list_public.execute(ListResourcesRequest())
        every = await list_admin.execute(ListAdminResourcesRequest())

        assert public.resources == []
        assert every.total == 1
