"""Domain layer errors.

Every error carries a machine-readable ``kind`` so callers can react to the
condition without parsing messages.
"""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    kind: str = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_detail(self) -> dict[str, Any]:
        """Structured representation for API responses."""
        return {"kind": self.kind, "message": self.message}


class NotFoundError(DomainError):
    """Raised when a requested resource, tag, or taxonomy entry does not exist."""

    kind = "not_found"

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")


class DuplicateNameError(DomainError):
    """Raised when a derived slug collides with an active entry in the same scope."""

    kind = "duplicate_name"

    def __init__(self, entity: str, name: str, slug: str):
        self.entity = entity
        self.name = name
        self.slug = slug
        super().__init__(f"{entity} '{name}' already exists (slug '{slug}')")


class InvalidStatusError(DomainError):
    """Raised when a resource cannot move to the requested status."""

    kind = "invalid_status"

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot change status from '{current}' to '{target}'")


class TagAttachmentFailedError(DomainError):
    """Raised when a replace-all of a resource's tags is aborted."""

    kind = "tag_attachment_failed"

    def __init__(self, resource_id: int, tag_id: int):
        self.resource_id = resource_id
        self.tag_id = tag_id
        super().__init__(
            f"Could not attach tag {tag_id} to resource {resource_id}: "
            "tag does not exist or is inactive"
        )


class ValidationFailedError(DomainError):
    """Raised when required fields are missing or malformed.

    ``fields`` maps each offending field to a message so forms can point at it.
    """

    kind = "validation_failed"

    def __init__(self, fields: dict[str, str]):
        self.fields = dict(fields)
        names = ", ".join(sorted(self.fields))
        super().__init__(f"Validation failed for: {names}")

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["fields"] = self.fields
        return detail


class StoreUnavailableError(DomainError):
    """Raised when the storage collaborator cannot be reached."""

    kind = "store_unavailable"

    def __init__(self, message: str = "Storage is unavailable"):
        super().__init__(message)
