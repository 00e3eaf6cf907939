"""Set resource status use case (moderation)."""

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceService
from resdir.domain.value import ResourceId, ResourceStatus


class SetResourceStatusRequest(BaseModel):
    """Set status request.

    ``status`` is kept as plain text so unknown values reach the state
    machine and are rejected as invalid transitions.
    """

    resource_id: int = 0  # Set from the path
    status: str


class SetResourceStatusResponse(BaseModel):
    """Set status response."""

    resource_id: int
    status: ResourceStatus


class SetResourceStatusUseCase:
    """Use case for approving, rejecting and unpublishing resources."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize set status use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(
        self, request: SetResourceStatusRequest
    ) -> SetResourceStatusResponse:
        """Execute status change.

        Raises:
            NotFoundError: If the resource does not exist
            InvalidStatusError: If the transition is not allowed
        """
        with logfire.span(
            "set_resource_status.execute",
            resource_id=request.resource_id,
            status=request.status,
        ):
            resource = await self.resource_service.set_status(
                ResourceId(request.resource_id), request.status
            )
            return SetResourceStatusResponse(
                resource_id=request.resource_id, status=resource.status
            )
