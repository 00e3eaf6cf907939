"""Resource repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict

from resdir.domain.model.resource import Resource, ResourceWithTags
from resdir.domain.value import (
    ResourceId,
    ResourceSortField,
    ResourceStatus,
    SortOrder,
    TagId,
)


class ResourceQuery(BaseModel):
    """Storage-level listing criteria.

    ``tag_ids`` of None means no tag filter; an empty list matches nothing.
    """

    model_config = ConfigDict(frozen=True)

    tag_ids: Optional[list[TagId]] = None
    status: Optional[ResourceStatus] = None
    search: Optional[str] = None
    sort_by: ResourceSortField = ResourceSortField.DATE
    sort_order: SortOrder = SortOrder.DESC


class ResourceRepository(ABC):
    """Repository for the Resource aggregate and its tag set."""

    @abstractmethod
    async def save(self, resource: Resource) -> Resource:
        """Save a resource (create or update).

        Updating never touches the stored ``date``.

        Args:
            resource: Resource to save

        Returns:
            Saved resource
        """
        pass

    @abstractmethod
    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID.

        Args:
            resource_id: The resource's unique identifier

        Returns:
            The resource if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_with_tags(
        self, resource_id: ResourceId
    ) -> Optional[ResourceWithTags]:
        """Find a resource by ID together with its active tag paths."""
        pass

    @abstractmethod
    async def find_all(self, query: ResourceQuery) -> list[ResourceWithTags]:
        """List resources matching the query.

        A resource matches the tag filter if any of its tags is in
        ``query.tag_ids``. Results are sorted by the requested column, then
        by id ascending. Tag paths for all results are fetched in one batch.

        Args:
            query: Filter, search and sort criteria

        Returns:
            Matching resources with their tag paths
        """
        pass

    @abstractmethod
    async def update_status(
        self, resource_id: ResourceId, status: ResourceStatus
    ) -> None:
        """Write a new status and bump ``updated_at``."""
        pass

    @abstractmethod
    async def replace_tags(self, resource_id: ResourceId, tag_ids: list[TagId]) -> None:
        """Replace the resource's whole tag set atomically.

        Args:
            resource_id: Resource to retag
            tag_ids: New tag set, already deduplicated

        Raises:
            NotFoundError: If the resource does not exist
            TagAttachmentFailedError: If any id is unknown or inactive; the
                previous tag set is left untouched
        """
        pass

    @abstractmethod
    async def delete(self, resource_id: ResourceId) -> None:
        """Hard delete a resource; its join rows go with it."""
        pass
