"""Update resource use case (admin)."""

from typing import Optional

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceId, TagId

from .common import AdminResourceItem, ResourceFieldsRequest


class UpdateResourceRequest(ResourceFieldsRequest):
    """Admin update request.

    ``date`` is accepted for form symmetry but never changes the stored
    submission date. Omitting ``tag_ids`` keeps the current tag set.
    """

    resource_id: int = 0  # Set from the path
    tag_ids: Optional[list[int]] = None


class UpdateResourceResponse(BaseModel):
    """Admin update response."""

    resource: AdminResourceItem


class UpdateResourceUseCase:
    """Use case for editing a resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize update resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: UpdateResourceRequest) -> UpdateResourceResponse:
        """Execute update flow.

        Raises:
            NotFoundError: If the resource does not exist
            ValidationFailedError: If required fields are missing
            TagAttachmentFailedError: If a tag is unknown or inactive
        """
        with logfire.span(
            "update_resource.execute", resource_id=request.resource_id
        ):
            tag_ids = (
                [TagId(tag_id) for tag_id in request.tag_ids]
                if request.tag_ids is not None
                else None
            )
            resource = await self.resource_service.update_resource(
                ResourceId(request.resource_id),
                request.to_fields(),
                tag_ids=tag_ids,
            )
            return UpdateResourceResponse(
                resource=AdminResourceItem.from_domain(resource)
            )
