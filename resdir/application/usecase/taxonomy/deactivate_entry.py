"""Deactivate taxonomy entry use case."""

from enum import Enum

import logfire
from pydantic import BaseModel

from resdir.domain.service import TaxonomyService
from resdir.domain.value import CategoryId, SubcategoryId, TagId


class EntryKind(str, Enum):
    """Taxonomy level of the entry."""

    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    TAG = "tag"


class DeactivateEntryRequest(BaseModel):
    """Deactivate entry request."""

    kind: EntryKind
    id: int


class DeactivateEntryResponse(BaseModel):
    """Deactivate entry response."""

    kind: EntryKind
    id: int
    is_active: bool


class DeactivateEntryUseCase:
    """Use case for soft deleting a category, subcategory or tag.

    Entries are never hard deleted; resources keep their join rows, but the
    entry disappears from every view.
    """

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize deactivate entry use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: DeactivateEntryRequest) -> DeactivateEntryResponse:
        """Execute deactivate flow.

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span(
            "deactivate_entry.execute", kind=request.kind.value, id=request.id
        ):
            if request.kind == EntryKind.CATEGORY:
                entry = await self.taxonomy_service.deactivate_category(
                    CategoryId(request.id)
                )
            elif request.kind == EntryKind.SUBCATEGORY:
                entry = await self.taxonomy_service.deactivate_subcategory(
                    SubcategoryId(request.id)
                )
            else:
                entry = await self.taxonomy_service.deactivate_tag(TagId(request.id))

            return DeactivateEntryResponse(
                kind=request.kind, id=request.id, is_active=entry.is_active
            )
