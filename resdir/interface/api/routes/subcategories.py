"""Subcategory routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from resdir.application.usecase.taxonomy import (
    CreateSubcategoryRequest,
    CreateSubcategoryResponse,
    CreateSubcategoryUseCase,
    DeactivateEntryRequest,
    DeactivateEntryResponse,
    DeactivateEntryUseCase,
    EntryKind,
    ListSubcategoriesRequest,
    ListSubcategoriesResponse,
    ListSubcategoriesUseCase,
)
from resdir.domain.error import DomainError
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(
    prefix="/subcategories", tags=["taxonomy"], route_class=DishkaRoute
)


@router.get("", response_model=ListSubcategoriesResponse)
async def list_subcategories(
    use_case: FromDishka[ListSubcategoriesUseCase],
    category_id: Optional[int] = None,
) -> ListSubcategoriesResponse:
    """List active subcategories, optionally for one category."""
    try:
        return await use_case.execute(
            ListSubcategoriesRequest(category_id=category_id)
        )
    except DomainError as e:
        logfire.warn("Subcategory listing domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing subcategories", error=str(e))
        raise internal_error("Failed to list subcategories")


@router.post(
    "", response_model=CreateSubcategoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_subcategory(
    request: CreateSubcategoryRequest,
    use_case: FromDishka[CreateSubcategoryUseCase],
) -> CreateSubcategoryResponse:
    """Create a subcategory under an active category."""
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Subcategory creation domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating subcategory", error=str(e))
        raise internal_error("Failed to create subcategory")


@router.delete("/{subcategory_id}", response_model=DeactivateEntryResponse)
async def delete_subcategory(
    subcategory_id: int,
    use_case: FromDishka[DeactivateEntryUseCase],
) -> DeactivateEntryResponse:
    """Soft delete a subcategory. Its tags become hidden."""
    try:
        return await use_case.execute(
            DeactivateEntryRequest(kind=EntryKind.SUBCATEGORY, id=subcategory_id)
        )
    except DomainError as e:
        logfire.warn("Subcategory deletion domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting subcategory", error=str(e))
        raise internal_error("Failed to delete subcategory")
