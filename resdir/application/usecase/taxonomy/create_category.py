"""Create category use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from resdir.domain.service import TaxonomyService

from .common import CategoryItem


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str = Field(min_length=1, max_length=100)
    color: Optional[str] = None  # Defaults to the configured color
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=50)
    sort_order: int = 0


class CreateCategoryResponse(BaseModel):
    """Create category response."""

    category: CategoryItem


class CreateCategoryUseCase:
    """Use case for creating a category."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize create category use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: CreateCategoryRequest) -> CreateCategoryResponse:
        """Execute create category flow.

        Raises:
            ValidationFailedError: If the name or color is unusable
            DuplicateNameError: If the slug is taken
        """
        with logfire.span("create_category.execute", name=request.name):
            category = await self.taxonomy_service.create_category(
                name=request.name,
                color=request.color,
                description=request.description,
                icon=request.icon,
                sort_order=request.sort_order,
            )
            return CreateCategoryResponse(category=CategoryItem.from_domain(category))
