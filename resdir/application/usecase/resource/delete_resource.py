"""Delete resource use case (admin)."""

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceId


class DeleteResourceRequest(BaseModel):
    """Delete resource request."""

    resource_id: int


class DeleteResourceUseCase:
    """Use case for hard deleting a resource and its tag attachments."""

    def __init__(self, resource_service: ResourceService) -> None:
        self.resource_service = resource_service

    async def execute(self, request: DeleteResourceRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the resource does not exist
        """
        with logfire.span("delete_resource.execute", resource_id=request.resource_id):
            await self.resource_service.delete_resource(
                ResourceId(request.resource_id)
            )
