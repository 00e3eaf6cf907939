"""Submit resource use case (public)."""

import logfire
from pydantic import BaseModel, Field

from resdir.application.usecase.base import BaseUseCase
from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceStatus, TagId

from .common import PublicResourceItem, ResourceFieldsRequest


class SubmitResourceRequest(ResourceFieldsRequest):
    """Public submission request."""

    tag_ids: list[int] = Field(default_factory=list)


class SubmitResourceResponse(BaseModel):
    """Public submission response."""

    resource: PublicResourceItem


class SubmitResourceUseCase(
    BaseUseCase[SubmitResourceRequest, SubmitResourceResponse]
):
    """Use case for visitor submissions.

    Submissions always start in ``pending_review`` and wait for moderation.
    """

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize submit resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: SubmitResourceRequest) -> SubmitResourceResponse:
        """Execute submission flow.

        Raises:
            ValidationFailedError: If required fields are missing
            TagAttachmentFailedError: If a selected tag is unknown or inactive
        """
        with logfire.span(
            "submit_resource.execute", title=request.title, tag_ids=request.tag_ids
        ):
            resource = await self.resource_service.create_resource(
                request.to_fields(),
                status=ResourceStatus.PENDING_REVIEW,
                tag_ids=[TagId(tag_id) for tag_id in request.tag_ids],
            )
            logfire.info("Resource submitted", resource_id=resource.id)
            return SubmitResourceResponse(
                resource=PublicResourceItem.from_domain(resource)
            )
