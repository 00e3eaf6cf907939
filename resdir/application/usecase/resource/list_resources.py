"""List resources use cases (public and admin)."""

from typing import Optional

import logfire
from pydantic import BaseModel

from resdir.domain.service import ResourceFilter, ResourceQueryService
from resdir.domain.value import ResourceSortField, ResourceStatus, SortOrder

from .common import AdminResourceItem, PublicResourceItem


class ListResourcesRequest(BaseModel):
    """Public listing request."""

    tags: Optional[list[str]] = None  # Tag names, any of them matches
    sort_by: ResourceSortField = ResourceSortField.DATE
    sort_order: SortOrder = SortOrder.DESC
    search: Optional[str] = None


class ListResourcesResponse(BaseModel):
    """Public listing response."""

    resources: list[PublicResourceItem]
    total: int


class ListAdminResourcesRequest(ListResourcesRequest):
    """Admin listing request."""

    status: Optional[ResourceStatus] = None  # None lists every status


class ListAdminResourcesResponse(BaseModel):
    """Admin listing response."""

    resources: list[AdminResourceItem]
    total: int


class ListResourcesUseCase:
    """Use case for the public listing: published resources only."""

    def __init__(self, resource_query_service: ResourceQueryService) -> None:
        """Initialize list resources use case.

        Args:
            resource_query_service: Resource listing domain service
        """
        self.resource_query_service = resource_query_service

    async def execute(self, request: ListResourcesRequest) -> ListResourcesResponse:
        """Execute public listing flow.

        Args:
            request: Tag names, search text and sort

        Returns:
            Published resources, without submitter emails
        """
        with logfire.span(
            "list_resources.execute",
            tags=request.tags,
            sort_by=request.sort_by.value,
            sort_order=request.sort_order.value,
        ):
            resources = await self.resource_query_service.list_resources(
                ResourceFilter(
                    tag_names=request.tags,
                    status=ResourceStatus.PUBLISHED,
                    search=request.search,
                    sort_by=request.sort_by,
                    sort_order=request.sort_order,
                )
            )
            items = [PublicResourceItem.from_domain(r) for r in resources]
            return ListResourcesResponse(resources=items, total=len(items))


class ListAdminResourcesUseCase:
    """Use case for the moderation listing, any status."""

    def __init__(self, resource_query_service: ResourceQueryService) -> None:
        self.resource_query_service = resource_query_service

    async def execute(
        self, request: ListAdminResourcesRequest
    ) -> ListAdminResourcesResponse:
        with logfire.span(
            "list_admin_resources.execute",
            tags=request.tags,
            status=request.status.value if request.status else None,
        ):
            resources = await self.resource_query_service.list_resources(
                ResourceFilter(
                    tag_names=request.tags,
                    status=request.status,
                    search=request.search,
                    sort_by=request.sort_by,
                    sort_order=request.sort_order,
                )
            )
            items = [AdminResourceItem.from_domain(r) for r in resources]
            return ListAdminResourcesResponse(resources=items, total=len(items))
