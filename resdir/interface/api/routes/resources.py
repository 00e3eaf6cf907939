"""Public resource routes: browsing and submission."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from resdir.application.usecase.resource import (
    ListResourcesRequest,
    ListResourcesResponse,
    ListResourcesUseCase,
    SubmitResourceRequest,
    SubmitResourceResponse,
    SubmitResourceUseCase,
)
from resdir.domain.error import DomainError
from resdir.domain.value import ResourceSortField, SortOrder
from resdir.interface.api.query import split_tag_names
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/resources", tags=["resources"], route_class=DishkaRoute)


@router.get("", response_model=ListResourcesResponse)
async def list_resources(
    use_case: FromDishka[ListResourcesUseCase],
    tags: Optional[str] = Query(default=None, description="Comma-joined tag names"),
    sort_by: ResourceSortField = Query(default=ResourceSortField.DATE, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.DESC, alias="sortOrder"),
    search: Optional[str] = None,
) -> ListResourcesResponse:
    """List published resources.

    A resource matches the tag filter when it carries any of the named tags.

    Args:
        use_case: List resources use case from DI
        tags: Comma-joined tag names
        sort_by: Sort column
        sort_order: Sort direction
        search: Case-insensitive text searched in title, description and author

    Returns:
        Published resources with their tag paths
    """
    try:
        return await use_case.execute(
            ListResourcesRequest(
                tags=split_tag_names(tags),
                sort_by=sort_by,
                sort_order=sort_order,
                search=search,
            )
        )
    except DomainError as e:
        logfire.warn("Resource listing domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing resources", error=str(e))
        raise internal_error("Failed to list resources")


@router.post(
    "", response_model=SubmitResourceResponse, status_code=status.HTTP_201_CREATED
)
async def submit_resource(
    request: SubmitResourceRequest,
    use_case: FromDishka[SubmitResourceUseCase],
) -> SubmitResourceResponse:
    """Submit a resource for review.

    The resource is stored as ``pending_review`` and is not listed publicly
    until an administrator publishes it.

    Raises:
        HTTPException: 422 if fields are missing or a tag cannot be attached
    """
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Resource submission domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error submitting resource", error=str(e))
        raise internal_error("Failed to submit resource")
