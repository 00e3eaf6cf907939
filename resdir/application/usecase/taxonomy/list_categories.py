"""List categories use case."""

import logfire
from pydantic import BaseModel

from resdir.domain.service import TaxonomyService

from .common import CategoryItem


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryItem]


class ListCategoriesUseCase:
    """Use case for listing active categories in display order."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        self.taxonomy_service = taxonomy_service

    async def execute(self) -> ListCategoriesResponse:
        with logfire.span("list_categories.execute"):
            categories = await self.taxonomy_service.list_categories()
            logfire.info("Categories listed", count=len(categories))
            return ListCategoriesResponse(
                categories=[CategoryItem.from_domain(c) for c in categories]
            )
