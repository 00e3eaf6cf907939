"""Get resource use case (admin)."""

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceId

from .common import AdminResourceItem


class GetResourceRequest(BaseModel):
    """Get resource request."""

    resource_id: int


class GetResourceResponse(BaseModel):
    """Get resource response."""

    resource: AdminResourceItem


class GetResourceUseCase:
    """Use case for loading one resource with its tags."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: GetResourceRequest) -> GetResourceResponse:
        with logfire.span("get_resource.execute", resource_id=request.resource_id):
            resource = await self.resource_service.get_resource(
                ResourceId(request.resource_id)
            )
            return GetResourceResponse(resource=AdminResourceItem.from_domain(resource))
