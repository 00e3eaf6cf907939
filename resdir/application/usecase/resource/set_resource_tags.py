"""Set resource tags use case (admin)."""

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceId, TagId

from .common import AdminResourceItem


class SetResourceTagsRequest(BaseModel):
    """Replace-all tag request. An empty list removes every tag."""

    resource_id: int = 0  # Set from the path
    tag_ids: list[int]


class SetResourceTagsResponse(BaseModel):
    """Replace-all tag response."""

    resource: AdminResourceItem


class SetResourceTagsUseCase:
    """Use case for replacing a resource's whole tag set."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: SetResourceTagsRequest) -> SetResourceTagsResponse:
        """Execute replace-all.

        Raises:
            NotFoundError: If the resource does not exist
            TagAttachmentFailedError: If a tag is unknown or inactive
        """
        with logfire.span(
            "set_resource_tags.execute",
            resource_id=request.resource_id,
            tag_ids=request.tag_ids,
        ):
            resource = await self.resource_service.set_tags(
                ResourceId(request.resource_id),
                [TagId(tag_id) for tag_id in request.tag_ids],
            )
            return SetResourceTagsResponse(
                resource=AdminResourceItem.from_domain(resource)
            )
