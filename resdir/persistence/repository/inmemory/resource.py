"""In-memory implementation of Resource repository for testing."""

from typing import Any, Optional

from resdir.domain.error import NotFoundError, TagAttachmentFailedError
from resdir.domain.model import Resource, ResourceWithTags
from resdir.domain.repository.resource import ResourceQuery, ResourceRepository
from resdir.domain.value import ResourceId, ResourceStatus, SortOrder, TagId

from .store import InMemoryStore


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _with_tags(self, resource: Resource) -> ResourceWithTags:
        tag_ids = set(self.store.resource_tags.get(resource.id, []))
        paths = [row.to_path() for row in self.store.visible_rows(tag_ids)]
        return ResourceWithTags(**resource.model_dump(), tags=paths)

    async def save(self, resource: Resource) -> Resource:
        """Save a resource, keeping the stored date on update."""
        self.store.check_available()
        if resource.id is None:
            resource = Resource(
                **resource.model_dump(
                    exclude={"id", "created_at", "updated_at", "tags"}
                ),
                id=ResourceId(self.store.next_id("resources")),
                **self.store.stamp(created=True),
            )
        else:
            existing = self.store.resources.get(resource.id)
            if existing is None:
                raise NotFoundError("Resource", resource.id)
            resource = Resource(
                **resource.model_dump(exclude={"date", "updated_at", "tags"}),
                date=existing.date,
                **self.store.stamp(created=False),
            )
        self.store.resources[resource.id] = resource
        return resource

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID."""
        self.store.check_available()
        return self.store.resources.get(resource_id)

    async def find_with_tags(
        self, resource_id: ResourceId
    ) -> Optional[ResourceWithTags]:
        """Find a resource with its tag paths."""
        self.store.check_available()
        resource = self.store.resources.get(resource_id)
        return self._with_tags(resource) if resource else None

    async def find_all(self, query: ResourceQuery) -> list[ResourceWithTags]:
        """List resources matching the query."""
        self.store.check_available()
        resources = sorted(self.store.resources.values(), key=lambda r: r.id)

        if query.tag_ids is not None:
            wanted = set(query.tag_ids)
            resources = [
                r
                for r in resources
                if wanted.intersection(self.store.resource_tags.get(r.id, []))
            ]

        if query.status is not None:
            resources = [r for r in resources if r.status == query.status]

        if query.search:
            needle = query.search.casefold()
            resources = [
                r
                for r in resources
                if any(
                    needle in (value or "").casefold()
                    for value in (r.title, r.description, r.author)
                )
            ]

        def sort_key(resource: Resource) -> Any:
            value = getattr(resource, query.sort_by.value)
            return value.casefold() if isinstance(value, str) else value

        # Stable sort keeps the id order among equal keys, in both directions
        resources.sort(key=sort_key, reverse=query.sort_order == SortOrder.DESC)
        return [self._with_tags(r) for r in resources]

    async def update_status(
        self, resource_id: ResourceId, status: ResourceStatus
    ) -> None:
        """Write a new status."""
        self.store.check_available()
        resource = self.store.resources[resource_id]
        self.store.resources[resource_id] = resource.model_copy(
            update={"status": status, **self.store.stamp(created=False)}
        )

    async def replace_tags(self, resource_id: ResourceId, tag_ids: list[TagId]) -> None:
        """Replace the tag set, all or nothing."""
        self.store.check_available()
        if resource_id not in self.store.resources:
            raise NotFoundError("Resource", resource_id)

        for tag_id in tag_ids:
            tag = self.store.tags.get(tag_id)
            if tag is None or self.store.tag_row(tag) is None:
                raise TagAttachmentFailedError(resource_id, tag_id)

        self.store.resource_tags[resource_id] = list(tag_ids)

    async def delete(self, resource_id: ResourceId) -> None:
        """Delete a resource and its attachments."""
        self.store.check_available()
        self.store.resources.pop(resource_id, None)
        self.store.resource_tags.pop(resource_id, None)
