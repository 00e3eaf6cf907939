"""PostgreSQL implementation of Resource repository."""

from collections import defaultdict
from typing import Optional

import logfire
from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError

from resdir.domain.error import NotFoundError, TagAttachmentFailedError
from resdir.domain.model import Resource, ResourceWithTags, TagPath
from resdir.domain.repository.resource import ResourceQuery, ResourceRepository
from resdir.domain.value import ResourceId, ResourceStatus, SortOrder, TagId
from resdir.persistence.mappers import (
    resource_to_dict,
    row_to_resource,
    row_to_resource_with_tags,
    row_to_tag_path,
)
from resdir.persistence.tables import resource_tags_table, resources_table, tags_table

from .base import PostgresRepository
from .tag import tag_path_select


def _like_pattern(search: str) -> str:
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresResourceRepository(PostgresRepository, ResourceRepository):
    """PostgreSQL implementation of ResourceRepository."""

    async def _fetch_tags_for_resources(
        self, resource_ids: list[ResourceId]
    ) -> dict[ResourceId, list[TagPath]]:
        """Fetch tag paths for multiple resources in a single query.

        Args:
            resource_ids: List of resource IDs

        Returns:
            Dict mapping resource_id -> tag paths in taxonomy order
        """
        if not resource_ids:
            return {}

        stmt = (
            tag_path_select(resource_tags_table.c.resource_id, attached=True)
            .where(resource_tags_table.c.resource_id.in_(resource_ids))
        )
        result = await self._execute(stmt)

        # Build lookup: resource_id -> [tag paths]
        resource_tag_map: dict[ResourceId, list[TagPath]] = defaultdict(list)
        for row in result.fetchall():
            resource_tag_map[row.resource_id].append(row_to_tag_path(row._asdict()))

        return resource_tag_map

    async def save(self, resource: Resource) -> Resource:
        """Save a resource (create or update)."""
        with logfire.span("resource_repository.save", resource_id=resource.id):
            values = resource_to_dict(resource)
            if resource.id is None:
                stmt = (
                    insert(resources_table).values(**values).returning(resources_table)
                )
            else:
                values.pop("date")  # Submission date is immutable
                stmt = (
                    update(resources_table)
                    .where(resources_table.c.id == resource.id)
                    .values(**values, updated_at=func.now())
                    .returning(resources_table)
                )
            result = await self._execute(stmt)
            row = result.fetchone()
            if not row:
                raise NotFoundError("Resource", resource.id)
            await self.session.flush()
            return row_to_resource(row._asdict())

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID."""
        stmt = select(resources_table).where(resources_table.c.id == resource_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_resource(row._asdict()) if row else None

    async def find_with_tags(
        self, resource_id: ResourceId
    ) -> Optional[ResourceWithTags]:
        """Find a resource with its tag paths."""
        with logfire.span(
            "resource_repository.find_with_tags", resource_id=resource_id
        ):
            stmt = select(resources_table).where(resources_table.c.id == resource_id)
            result = await self._execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Resource not found", resource_id=resource_id)
                return None

            resource_tag_map = await self._fetch_tags_for_resources([row.id])
            return row_to_resource_with_tags(
                row._asdict(), resource_tag_map.get(row.id, [])
            )

    async def find_all(self, query: ResourceQuery) -> list[ResourceWithTags]:
        """List resources matching the query, with their tag paths."""
        with logfire.span(
            "resource_repository.find_all",
            tag_ids=query.tag_ids,
            status=query.status.value if query.status else None,
            search=query.search,
            sort_by=query.sort_by.value,
            sort_order=query.sort_order.value,
        ):
            stmt = select(resources_table)

            # Union filter: any attached tag in the set
            if query.tag_ids is not None:
                tagged = select(resource_tags_table.c.resource_id).where(
                    resource_tags_table.c.tag_id.in_(query.tag_ids)
                )
                stmt = stmt.where(resources_table.c.id.in_(tagged))

            if query.status is not None:
                stmt = stmt.where(resources_table.c.status == query.status.value)

            if query.search:
                pattern = _like_pattern(query.search)
                stmt = stmt.where(
                    or_(
                        resources_table.c.title.ilike(pattern, escape="\\"),
                        resources_table.c.description.ilike(pattern, escape="\\"),
                        resources_table.c.author.ilike(pattern, escape="\\"),
                    )
                )

            column = resources_table.c[query.sort_by.value]
            if query.sort_order == SortOrder.DESC:
                primary = column.desc()
            else:
                primary = column.asc()
            stmt = stmt.order_by(primary, resources_table.c.id.asc())

            result = await self._execute(stmt)
            resource_rows = result.fetchall()

            if not resource_rows:
                logfire.info("No resources found")
                return []

            # Fetch tags for all resources in a single query
            resource_ids = [row.id for row in resource_rows]
            resource_tag_map = await self._fetch_tags_for_resources(resource_ids)

            resources = [
                row_to_resource_with_tags(
                    row._asdict(), resource_tag_map.get(row.id, [])
                )
                for row in resource_rows
            ]
            logfire.info("Found resources", count=len(resources))
            return resources

    async def update_status(
        self, resource_id: ResourceId, status: ResourceStatus
    ) -> None:
        """Write a new status."""
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == resource_id)
            .values(status=status.value, updated_at=func.now())
        )
        await self._execute(stmt)
        await self.session.flush()

    async def replace_tags(self, resource_id: ResourceId, tag_ids: list[TagId]) -> None:
        """Replace the tag set: lock, delete all, insert all, in one savepoint."""
        with logfire.span(
            "resource_repository.replace_tags", resource_id=resource_id, tag_ids=tag_ids
        ):
            # Serializes concurrent replace-alls on the same resource
            lock = (
                select(resources_table.c.id)
                .where(resources_table.c.id == resource_id)
                .with_for_update()
            )
            result = await self._execute(lock)
            if result.fetchone() is None:
                logfire.warn("Resource not found", resource_id=resource_id)
                raise NotFoundError("Resource", resource_id)

            await self._ensure_attachable(resource_id, tag_ids)

            try:
                async with self.session.begin_nested():
                    await self._execute(
                        delete(resource_tags_table).where(
                            resource_tags_table.c.resource_id == resource_id
                        )
                    )
                    if tag_ids:
                        await self._execute(
                            insert(resource_tags_table),
                            [
                                {"resource_id": resource_id, "tag_id": tag_id}
                                for tag_id in tag_ids
                            ],
                        )
            except IntegrityError as e:
                # A tag vanished between the check and the insert
                logfire.warn(
                    "Tag attachment rejected by database",
                    resource_id=resource_id,
                    error=str(e),
                )
                await self._ensure_attachable(resource_id, tag_ids)
                raise TagAttachmentFailedError(resource_id, tag_ids[0]) from e

            logfire.info(
                "Resource tags replaced", resource_id=resource_id, count=len(tag_ids)
            )

    async def _ensure_attachable(
        self, resource_id: ResourceId, tag_ids: list[TagId]
    ) -> None:
        """Raise for the first id that is not a visible tag."""
        if not tag_ids:
            return

        stmt = (
            tag_path_select()
            .with_only_columns(tags_table.c.id)
            .where(tags_table.c.id.in_(tag_ids))
            .order_by(None)
        )
        result = await self._execute(stmt)
        found = set(result.scalars().all())

        for tag_id in tag_ids:
            if tag_id not in found:
                logfire.warn(
                    "Tag cannot be attached", resource_id=resource_id, tag_id=tag_id
                )
                raise TagAttachmentFailedError(resource_id, tag_id)

    async def delete(self, resource_id: ResourceId) -> None:
        """Delete a resource (hard delete, join rows cascade)."""
        stmt = delete(resources_table).where(resources_table.c.id == resource_id)
        await self._execute(stmt)
        await self.session.flush()
