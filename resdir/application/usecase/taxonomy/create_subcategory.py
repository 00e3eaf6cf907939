"""Create subcategory use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from resdir.domain.service import TaxonomyService
from resdir.domain.value import CategoryId

from .common import SubcategoryItem


class CreateSubcategoryRequest(BaseModel):
    """Create subcategory request."""

    category_id: int
    name: str = Field(min_length=1, max_length=100)
    color: Optional[str] = None  # Inherits the category color when omitted
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=50)
    sort_order: int = 0


class CreateSubcategoryResponse(BaseModel):
    """Create subcategory response."""

    subcategory: SubcategoryItem


class CreateSubcategoryUseCase:
    """Use case for creating a subcategory."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize create subcategory use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(
        self, request: CreateSubcategoryRequest
    ) -> CreateSubcategoryResponse:
        """Execute create subcategory flow.

        Raises:
            NotFoundError: If the category is unknown or inactive
            ValidationFailedError: If the name or color is unusable
            DuplicateNameError: If the slug is taken within the category
        """
        with logfire.span(
            "create_subcategory.execute",
            category_id=request.category_id,
            name=request.name,
        ):
            subcategory = await self.taxonomy_service.create_subcategory(
                category_id=CategoryId(request.category_id),
                name=request.name,
                color=request.color,
                description=request.description,
                icon=request.icon,
                sort_order=request.sort_order,
            )
            return CreateSubcategoryResponse(
                subcategory=SubcategoryItem.from_domain(subcategory)
            )
