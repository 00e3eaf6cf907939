"""Category routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from resdir.application.usecase.taxonomy import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
    DeactivateEntryRequest,
    DeactivateEntryResponse,
    DeactivateEntryUseCase,
    EntryKind,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from resdir.domain.error import DomainError
from resdir.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/categories", tags=["taxonomy"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List active categories in display order."""
    try:
        return await use_case.execute()
    except DomainError as e:
        logfire.warn("Category listing domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing categories", error=str(e))
        raise internal_error("Failed to list categories")


@router.post(
    "", response_model=CreateCategoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_category(
    request: CreateCategoryRequest,
    use_case: FromDishka[CreateCategoryUseCase],
) -> CreateCategoryResponse:
    """Create a category.

    Args:
        request: Category name and display fields
        use_case: Create category use case from DI

    Returns:
        Created category

    Raises:
        HTTPException: 409 if the name is taken, 422 if it is unusable
    """
    try:
        return await use_case.execute(request)
    except DomainError as e:
        logfire.warn("Category creation domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating category", error=str(e))
        raise internal_error("Failed to create category")


@router.delete("/{category_id}", response_model=DeactivateEntryResponse)
async def delete_category(
    category_id: int,
    use_case: FromDishka[DeactivateEntryUseCase],
) -> DeactivateEntryResponse:
    """Soft delete a category. Its subcategories and tags become hidden."""
    try:
        return await use_case.execute(
            DeactivateEntryRequest(kind=EntryKind.CATEGORY, id=category_id)
        )
    except DomainError as e:
        logfire.warn("Category deletion domain error", kind=e.kind, error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting category", error=str(e))
        raise internal_error("Failed to delete category")
