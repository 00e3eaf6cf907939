"""Create tag use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from resdir.domain.service import TaxonomyService
from resdir.domain.value import CategoryId, SubcategoryId

from .common import TagItem


class CreateTagRequest(BaseModel):
    """Create tag request."""

    category_id: int
    sub_category_id: Optional[int] = None  # None attaches the tag to the category
    name: str = Field(min_length=1, max_length=100)
    color: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=50)
    sort_order: int = 0


class CreateTagResponse(BaseModel):
    """Create tag response."""

    tag: TagItem


class CreateTagUseCase:
    """Use case for creating a tag."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize create tag use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Raises:
            NotFoundError: If a parent is unknown or inactive
            ValidationFailedError: If the subcategory belongs to another
                category, or the name or color is unusable
            DuplicateNameError: If the slug is taken in the parent scope
        """
        with logfire.span(
            "create_tag.execute",
            category_id=request.category_id,
            sub_category_id=request.sub_category_id,
            name=request.name,
        ):
            sub_category_id = (
                SubcategoryId(request.sub_category_id)
                if request.sub_category_id is not None
                else None
            )
            tag = await self.taxonomy_service.create_tag(
                category_id=CategoryId(request.category_id),
                sub_category_id=sub_category_id,
                name=request.name,
                color=request.color,
                description=request.description,
                icon=request.icon,
                sort_order=request.sort_order,
            )
            return CreateTagResponse(tag=TagItem.from_domain(tag))
