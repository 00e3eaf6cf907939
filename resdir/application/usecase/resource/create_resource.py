"""Create resource use case (admin)."""

import logfire
from pydantic import BaseModel, Field

from resdir.application.usecase.base import BaseUseCase
from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceStatus, TagId

from .common import AdminResourceItem, ResourceFieldsRequest


class CreateResourceRequest(ResourceFieldsRequest):
    """Admin create request."""

    status: ResourceStatus = ResourceStatus.PUBLISHED
    tag_ids: list[int] = Field(default_factory=list)


class CreateResourceResponse(BaseModel):
    """Admin create response."""

    resource: AdminResourceItem


class CreateResourceUseCase(
    BaseUseCase[CreateResourceRequest, CreateResourceResponse]
):
    """Use case for resources entered by an administrator."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: CreateResourceRequest) -> CreateResourceResponse:
        with logfire.span(
            "create_resource.execute", title=request.title, status=request.status.value
        ):
            resource = await self.resource_service.create_resource(
                request.to_fields(),
                status=request.status,
                tag_ids=[TagId(tag_id) for tag_id in request.tag_ids],
            )
            return CreateResourceResponse(
                resource=AdminResourceItem.from_domain(resource)
            )
