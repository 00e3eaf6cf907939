"""Get tag hierarchy use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from resdir.domain.model import HierarchyCategory, OrphanReason, TagPath
from resdir.domain.service import TaxonomyService


class OrphanItem(BaseModel):
    """A tag left out of the tree, and why."""

    tag_id: int
    tag_name: str
    category_id: int
    category_name: str
    sub_category_id: Optional[int]
    sub_category_name: Optional[str]
    reason: OrphanReason


class GetTagHierarchyRequest(BaseModel):
    """Get tag hierarchy request."""

    public_only: bool = False  # Only tags attached to at least one resource


class GetTagHierarchyResponse(BaseModel):
    """Flat tag list plus the nested tree.

    ``hierarchy`` is keyed by category name, then subcategory name.
    """

    flat: list[TagPath]
    hierarchy: dict[str, HierarchyCategory]
    orphans: list[OrphanItem]


class GetTagHierarchyUseCase:
    """Use case for the admin and public taxonomy views."""

    def __init__(self, taxonomy_service: TaxonomyService) -> None:
        """Initialize get tag hierarchy use case.

        Args:
            taxonomy_service: Taxonomy domain service
        """
        self.taxonomy_service = taxonomy_service

    async def execute(self, request: GetTagHierarchyRequest) -> GetTagHierarchyResponse:
        """Execute get tag hierarchy flow.

        Args:
            request: View selector

        Returns:
            The view, with any orphaned rows listed separately
        """
        with logfire.span("get_tag_hierarchy.execute", public_only=request.public_only):
            flat, hierarchy = await self.taxonomy_service.get_hierarchy(
                public_only=request.public_only
            )

            orphans = [
                OrphanItem(
                    tag_id=orphan.row.tag_id,
                    tag_name=orphan.row.tag_name,
                    category_id=orphan.row.category_id,
                    category_name=orphan.row.category_name,
                    sub_category_id=orphan.row.sub_category_id,
                    sub_category_name=orphan.row.sub_category_name,
                    reason=orphan.reason,
                )
                for orphan in hierarchy.orphans
            ]

            return GetTagHierarchyResponse(
                flat=flat, hierarchy=hierarchy.categories, orphans=orphans
            )
