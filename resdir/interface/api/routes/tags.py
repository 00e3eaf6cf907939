"""Tag routes: the taxonomy views plus tag management."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from resdir.application.usecase.taxonomy import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    DeactivateEntryRequest,
    DeactivateEntryResponse,
    DeactivateEntryUseCase,
    EntryKind,
    GetTagHierarchyRequest,
    GetTagHierarchyResponse,
    GetTagHierarchyUseCase,
)
from resdir.domain.error import DomainError
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=GetTagHierarchyResponse)
async def get_tag_hierarchy(
    use_case: FromDishka[GetTagHierarchyUseCase],
    public_only: bool = False,
) -> GetTagHierarchyResponse:
    """Get the tag taxonomy as a flat list and as a nested tree.

    Args:
        use_case: Get tag hierarchy use case from DI
        public_only: Only tags attached to at least one resource

    Returns:
        Flat tag paths, the tree keyed by name, and any orphaned tags
    """
    try:
        return await use_case.execute(GetTagHierarchyRequest(public_only=public_only))
    except DomainError as e:
        logfire.warn("Tag hierarchy domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error loading tag hierarchy", error=str(e))
        raise internal_error("Failed to load tags")


@router.post("", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagRequest,
    use_case: FromDishka[CreateTagUseCase],
) -> CreateTagResponse:
    """Create a tag under a category, optionally inside a subcategory."""
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Tag creation domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating tag", error=str(e))
        raise internal_error("Failed to create tag")


@router.delete("/{tag_id}", response_model=DeactivateEntryResponse)
async def delete_tag(
    tag_id: int,
    use_case: FromDishka[DeactivateEntryUseCase],
) -> DeactivateEntryResponse:
    """Soft delete a tag. Existing attachments stay but are hidden."""
    try:
        return await use_case.execute(
            DeactivateEntryRequest(kind=EntryKind.TAG, id=tag_id)
        )
    except DomainError as e:
        logfire.warn("Tag deletion domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting tag", error=str(e))
        raise internal_error("Failed to delete tag")
