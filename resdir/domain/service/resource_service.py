"""Resource domain service.

Owns resource writes: field validation, the status state machine and the
replace-all tag set.
"""

from datetime import datetime
from typing import Optional

import logfire

from resdir.domain.error import InvalidStatusError, NotFoundError, ValidationFailedError
from resdir.domain.model import Resource, ResourceFields, ResourceWithTags
from resdir.domain.repository import ResourceRepository
from resdir.domain.value import ResourceId, ResourceStatus, TagId

from .base import Service

_REQUIRED = {
    "submitted_by": "Submitter name is required",
    "title": "Title is required",
}
_MAX_LENGTHS = {"submitted_by": 255, "title": 500, "submitter_email": 255}


def dedupe_tag_ids(tag_ids: list[TagId]) -> list[TagId]:
    """Collapse repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(tag_ids))


class ResourceService(Service):
    """Domain service for resource operations."""

    def __init__(self, resource_repository: ResourceRepository) -> None:
        """Initialize resource service.

        Args:
            resource_repository: Resource repository
        """
        self.resource_repository = resource_repository

    def validate_fields(
        self, fields: ResourceFields, require_date: bool = True
    ) -> None:
        """Check required fields and formats, reporting every problem at once.

        Args:
            fields: Submitted form fields
            require_date: Whether ``date`` must be present (creation only)

        Raises:
            ValidationFailedError: With one message per offending field
        """
        errors: dict[str, str] = {}

        for name, message in _REQUIRED.items():
            value = getattr(fields, name)
            if value is None or not value.strip():
                errors[name] = message
            elif len(value.strip()) > _MAX_LENGTHS[name]:
                errors[name] = f"Must be at most {_MAX_LENGTHS[name]} characters"

        if require_date and fields.date is None:
            errors["date"] = "Date is required"

        email = (fields.submitter_email or "").strip()
        if email:
            local, _, domain = email.partition("@")
            if not local or not domain:
                errors["submitter_email"] = "Email address is not valid"
            elif len(email) > _MAX_LENGTHS["submitter_email"]:
                errors["submitter_email"] = (
                    f"Must be at most {_MAX_LENGTHS['submitter_email']} characters"
                )

        if errors:
            logfire.warn("Resource validation failed", fields=sorted(errors))
            raise ValidationFailedError(errors)

    async def create_resource(
        self,
        fields: ResourceFields,
        status: ResourceStatus,
        tag_ids: Optional[list[TagId]] = None,
    ) -> ResourceWithTags:
        """Create a resource and attach its tags.

        Args:
            fields: Form fields
            status: Initial status
            tag_ids: Tags to attach (duplicates collapsed)

        Returns:
            The created resource with its tag paths

        Raises:
            ValidationFailedError: If fields are missing or malformed
            TagAttachmentFailedError: If any tag id is unknown or inactive
        """
        with logfire.span(
            "resource_service.create_resource", title=fields.title, status=status.value
        ):
            self.validate_fields(fields)

            resource = await self.resource_repository.save(
                Resource(
                    submitted_by=(fields.submitted_by or "").strip(),
                    date=fields.date,
                    author=fields.author,
                    title=(fields.title or "").strip(),
                    description=fields.description,
                    url_link=fields.url_link,
                    download_link=fields.download_link,
                    linkedin_profile=fields.linkedin_profile,
                    submitter_email=(fields.submitter_email or "").strip() or None,
                    status=status,
                )
            )

            if tag_ids:
                await self.resource_repository.replace_tags(
                    resource.id, dedupe_tag_ids(tag_ids)
                )

            logfire.info(
                "Resource created",
                resource_id=resource.id,
                status=status.value,
                tag_count=len(tag_ids or []),
            )
            return await self.get_resource(resource.id)

    async def update_resource(
        self,
        resource_id: ResourceId,
        fields: ResourceFields,
        tag_ids: Optional[list[TagId]] = None,
    ) -> ResourceWithTags:
        """Replace a resource's editable fields.

        ``date`` and ``status`` are never changed here. When ``tag_ids`` is
        given the tag set is replaced wholesale; None leaves it untouched.

        Raises:
            NotFoundError: If the resource does not exist
            ValidationFailedError: If fields are missing or malformed
            TagAttachmentFailedError: If any tag id is unknown or inactive
        """
        with logfire.span("resource_service.update_resource", resource_id=resource_id):
            existing = await self._require(resource_id)
            self.validate_fields(fields, require_date=False)

            updated = existing.model_copy(
                update={
                    "submitted_by": (fields.submitted_by or "").strip(),
                    "author": fields.author,
                    "title": (fields.title or "").strip(),
                    "description": fields.description,
                    "url_link": fields.url_link,
                    "download_link": fields.download_link,
                    "linkedin_profile": fields.linkedin_profile,
                    "submitter_email": (fields.submitter_email or "").strip() or None,
                    "updated_at": datetime.now(),
                }
            )
            await self.resource_repository.save(updated)

            if tag_ids is not None:
                await self.resource_repository.replace_tags(
                    resource_id, dedupe_tag_ids(tag_ids)
                )

            logfire.info(
                "Resource updated",
                resource_id=resource_id,
                tags_replaced=tag_ids is not None,
            )
            return await self.get_resource(resource_id)

    async def get_resource(self, resource_id: ResourceId) -> ResourceWithTags:
        """Get one resource with its tag paths.

        Raises:
            NotFoundError: If the resource does not exist
        """
        with logfire.span("resource_service.get_resource", resource_id=resource_id):
            resource = await self.resource_repository.find_with_tags(resource_id)
            if not resource:
                logfire.warn("Resource not found", resource_id=resource_id)
                raise NotFoundError("Resource", resource_id)
            return resource

    async def delete_resource(self, resource_id: ResourceId) -> None:
        """Hard delete a resource and its tag attachments.

        Raises:
            NotFoundError: If the resource does not exist
        """
        with logfire.span("resource_service.delete_resource", resource_id=resource_id):
            await self._require(resource_id)
            await self.resource_repository.delete(resource_id)
            logfire.info("Resource deleted", resource_id=resource_id)

    async def set_tags(
        self, resource_id: ResourceId, tag_ids: list[TagId]
    ) -> ResourceWithTags:
        """Replace the resource's tag set.

        An empty list clears every tag. Applying the same set twice leaves
        the same state.

        Raises:
            NotFoundError: If the resource does not exist
            TagAttachmentFailedError: If any id is unknown or inactive; the
                previous set is kept
        """
        with logfire.span(
            "resource_service.set_tags", resource_id=resource_id, tag_ids=tag_ids
        ):
            unique = dedupe_tag_ids(tag_ids)
            await self.resource_repository.replace_tags(resource_id, unique)
            logfire.info(
                "Resource tags replaced", resource_id=resource_id, count=len(unique)
            )
            return await self.get_resource(resource_id)

    async def set_status(self, resource_id: ResourceId, target: str) -> Resource:
        """Move a resource through its lifecycle.

        Allowed moves are draft -> pending_review, pending_review ->
        published, pending_review -> rejected and published -> rejected.
        Re-applying the current status is a no-op.

        Args:
            resource_id: Resource to update
            target: Requested status value

        Returns:
            The resource after the change

        Raises:
            NotFoundError: If the resource does not exist
            InvalidStatusError: If the value is unknown or the move is not
                allowed; the resource is left unchanged
        """
        with logfire.span(
            "resource_service.set_status", resource_id=resource_id, target=target
        ):
            resource = await self._require(resource_id)

            try:
                status = ResourceStatus(target)
            except ValueError:
                logfire.warn("Unknown status", resource_id=resource_id, target=target)
                raise InvalidStatusError(resource.status.value, target)

            if status == resource.status:
                logfire.info(
                    "Status unchanged", resource_id=resource_id, status=status.value
                )
                return resource

            if not resource.status.can_transition_to(status):
                logfire.warn(
                    "Status transition rejected",
                    resource_id=resource_id,
                    current=resource.status.value,
                    target=status.value,
                )
                raise InvalidStatusError(resource.status.value, status.value)

            await self.resource_repository.update_status(resource_id, status)
            logfire.info(
                "Status changed",
                resource_id=resource_id,
                previous=resource.status.value,
                status=status.value,
            )
            return resource.model_copy(
                update={"status": status, "updated_at": datetime.now()}
            )

    async def _require(self, resource_id: ResourceId) -> Resource:
        resource = await self.resource_repository.find_by_id(resource_id)
        if not resource:
            logfire.warn("Resource not found", resource_id=resource_id)
            raise NotFoundError("Resource", resource_id)
        return resource
