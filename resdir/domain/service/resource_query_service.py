"""Resource listing service.

Resolves tag names to ids and hands one composed query (tag union, status,
search, sort) to the repository.
"""

from typing import Optional

import logfire
from pydantic import BaseModel, ConfigDict

from resdir.domain.model import ResourceWithTags
from resdir.domain.repository import ResourceQuery, ResourceRepository, TagRepository
from resdir.domain.value import ResourceSortField, ResourceStatus, SortOrder

from .base import Service


class ResourceFilter(BaseModel):
    """Listing criteria as seen by callers."""

    model_config = ConfigDict(frozen=True)

    tag_names: Optional[list[str]] = None
    status: Optional[ResourceStatus] = None
    search: Optional[str] = None
    sort_by: ResourceSortField = ResourceSortField.DATE
    sort_order: SortOrder = SortOrder.DESC


class ResourceQueryService(Service):
    """Domain service for filtered, sorted resource listings."""

    def __init__(
        self, resource_repository: ResourceRepository, tag_repository: TagRepository
    ) -> None:
        """Initialize resource query service.

        Args:
            resource_repository: Resource repository
            tag_repository: Tag repository, used for name resolution
        """
        self.resource_repository = resource_repository
        self.tag_repository = tag_repository

    async def list_resources(self, filter: ResourceFilter) -> list[ResourceWithTags]:
        """List resources matching any of the requested tags.

        Tag names are matched exactly against active tags. When names are
        given but none resolve, nothing matches and the store is not queried
        for resources.

        Args:
            filter: Tag names, status, search text and sort

        Returns:
            Resources with their tag paths, sorted then tie-broken by id
        """
        with logfire.span(
            "resource_query_service.list_resources",
            tag_names=filter.tag_names,
            status=filter.status.value if filter.status else None,
            search=filter.search,
            sort_by=filter.sort_by.value,
            sort_order=filter.sort_order.value,
        ):
            tag_ids = None
            names = [name for name in filter.tag_names or [] if name]
            if names:
                tag_ids = await self.tag_repository.find_ids_by_names(names)
                if not tag_ids:
                    logfire.info("No tags matched filter", tag_names=names)
                    return []

            search = (filter.search or "").strip() or None
            resources = await self.resource_repository.find_all(
                ResourceQuery(
                    tag_ids=tag_ids,
                    status=filter.status,
                    search=search,
                    sort_by=filter.sort_by,
                    sort_order=filter.sort_order,
                )
            )
            logfire.info("Resources listed", count=len(resources))
            return resources
