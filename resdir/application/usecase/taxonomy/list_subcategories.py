"""List subcategories use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from resdir.domain.service import TaxonomyService
from resdir.domain.value import CategoryId

from .common import SubcategoryItem


class ListSubcategoriesRequest(BaseModel):
    """List subcategories request."""

    category_id: Optional[int] = None  # None lists every category's


class ListSubcategoriesResponse(BaseModel):
    """List subcategories response."""

    subcategories: list[SubcategoryItem]


class ListSubcategoriesUseCase:
    """Use case for listing active subcategories in display order."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        self.taxonomy_service = taxonomy_service

    async def execute(
        self, request: ListSubcategoriesRequest
    ) -> ListSubcategoriesResponse:
        with logfire.span(
            "list_subcategories.execute", category_id=request.category_id
        ):
            category_id = (
                CategoryId(request.category_id)
                if request.category_id is not None
                else None
            )
            subcategories = await self.taxonomy_service.list_subcategories(category_id)
            logfire.info("Subcategories listed", count=len(subcategories))
            return ListSubcategoriesResponse(
                subcategories=[SubcategoryItem.from_domain(s) for s in subcategories]
            )
