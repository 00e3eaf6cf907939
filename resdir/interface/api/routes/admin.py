"""Admin resource routes: moderation and editing."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel

from resdir.application.usecase.resource import (
    CreateResourceRequest,
    CreateResourceResponse,
    CreateResourceUseCase,
    DeleteResourceRequest,
    DeleteResourceUseCase,
    GetResourceRequest,
    GetResourceResponse,
    GetResourceUseCase,
    ListAdminResourcesRequest,
    ListAdminResourcesResponse,
    ListAdminResourcesUseCase,
    ResourceFieldsRequest,
    SetResourceStatusRequest,
    SetResourceStatusResponse,
    SetResourceStatusUseCase,
    SetResourceTagsRequest,
    SetResourceTagsResponse,
    SetResourceTagsUseCase,
    UpdateResourceRequest,
    UpdateResourceResponse,
    UpdateResourceUseCase,
)
from resdir.domain.error import DomainError
from resdir.domain.value import ResourceSortField, ResourceStatus, SortOrder
from resdir.interface.api.query import split_tag_names
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(
    prefix="/admin/resources", tags=["admin"], route_class=DishkaRoute
)


class UpdateResourceAPIRequest(ResourceFieldsRequest):
    """API request for editing a resource."""

    tag_ids: Optional[list[int]] = None


class SetStatusAPIRequest(BaseModel):
    """API request for a status change."""

    status: str


class SetTagsAPIRequest(BaseModel):
    """API request for replacing a resource's tags."""

    tag_ids: list[int]


@router.get("", response_model=ListAdminResourcesResponse)
async def list_admin_resources(
    use_case: FromDishka[ListAdminResourcesUseCase],
    status_filter: Optional[ResourceStatus] = Query(default=None, alias="status"),
    tags: Optional[str] = Query(default=None, description="Comma-joined tag names"),
    sort_by: ResourceSortField = Query(default=ResourceSortField.DATE, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.DESC, alias="sortOrder"),
    search: Optional[str] = None,
) -> ListAdminResourcesResponse:
    """List resources in any status, including submitter emails."""
    try:
        return await use_case.execute(
            ListAdminResourcesRequest(
                status=status_filter,
                tags=split_tag_names(tags),
                sort_by=sort_by,
                sort_order=sort_order,
                search=search,
            )
        )
    except DomainError as e:
        logfire.warn("Admin listing domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing admin resources", error=str(e))
        raise internal_error("Failed to list resources")


@router.post(
    "", response_model=CreateResourceResponse, status_code=status.HTTP_201_CREATED
)
async def create_resource(
    request: CreateResourceRequest,
    use_case: FromDishka[CreateResourceUseCase],
) -> CreateResourceResponse:
    """Create a resource directly, published unless another status is given."""
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Resource creation domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating resource", error=str(e))
        raise internal_error("Failed to create resource")


@router.get("/{resource_id}", response_model=GetResourceResponse)
async def get_resource(
    resource_id: int,
    use_case: FromDishka[GetResourceUseCase],
) -> GetResourceResponse:
    """Get one resource with its tags."""
    try:
        return await use_case.execute(GetResourceRequest(resource_id=resource_id))
    except DomainError as e:
        logfire.warn("Resource lookup domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error loading resource", error=str(e))
        raise internal_error("Failed to load resource")


@router.put("/{resource_id}", response_model=UpdateResourceResponse)
async def update_resource(
    resource_id: int,
    request: UpdateResourceAPIRequest,
    use_case: FromDishka[UpdateResourceUseCase],
) -> UpdateResourceResponse:
    """Edit a resource's fields and, when ``tag_ids`` is given, its tags.

    Args:
        resource_id: Resource ID
        request: Full set of editable fields
        use_case: Update resource use case from DI

    Returns:
        Updated resource

    Raises:
        HTTPException: 404 if missing, 422 on invalid fields or tags
    """
    try:
        return await use_case.execute(
            UpdateResourceRequest(**request.model_dump(), resource_id=resource_id)
        )
    except DomainError as e:
        logfire.warn("Resource update domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating resource", error=str(e))
        raise internal_error("Failed to update resource")


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: int,
    use_case: FromDishka[DeleteResourceUseCase],
) -> Response:
    """Delete a resource and its tag attachments."""
    try:
        await use_case.execute(DeleteResourceRequest(resource_id=resource_id))
    except DomainError as e:
        logfire.warn("Resource deletion domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting resource", error=str(e))
        raise internal_error("Failed to delete resource")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{resource_id}/status", response_model=SetResourceStatusResponse)
async def set_resource_status(
    resource_id: int,
    request: SetStatusAPIRequest,
    use_case: FromDishka[SetResourceStatusUseCase],
) -> SetResourceStatusResponse:
    """Move a resource through moderation.

    Allowed: draft to pending_review, pending_review to published or
    rejected, published to rejected. Repeating the current status is a
    no-op.

    Raises:
        HTTPException: 404 if missing, 422 if the transition is not allowed
    """
    try:
        return await use_case.execute(
            SetResourceStatusRequest(resource_id=resource_id, status=request.status)
        )
    except DomainError as e:
        logfire.warn("Status change domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error changing status", error=str(e))
        raise internal_error("Failed to change status")


@router.put("/{resource_id}/tags", response_model=SetResourceTagsResponse)
async def set_resource_tags(
    resource_id: int,
    request: SetTagsAPIRequest,
    use_case: FromDishka[SetResourceTagsUseCase],
) -> SetResourceTagsResponse:
    """Replace a resource's tag set. All or nothing."""
    try:
        return await use_case.execute(
            SetResourceTagsRequest(resource_id=resource_id, tag_ids=request.tag_ids)
        )
    except DomainError as e:
        logfire.warn("Tag replacement domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error replacing tags", error=str(e))
        raise internal_error("Failed to replace tags")
