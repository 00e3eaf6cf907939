"""Request fields and response items shared by the resource use cases."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from resdir.domain.model import ResourceFields, ResourceWithTags, TagPath
from resdir.domain.value import ResourceStatus


class ResourceFieldsRequest(BaseModel):
    """Editable resource fields as posted by a form.

    Required fields are checked by the domain so every missing field is
    reported at once.
    """

    submitted_by: Optional[str] = None
    date: Optional[dt.date] = None
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url_link: Optional[str] = None
    download_link: Optional[str] = None
    linkedin_profile: Optional[str] = None
    submitter_email: Optional[str] = None

    def to_fields(self) -> ResourceFields:
        return ResourceFields(
            submitted_by=self.submitted_by,
            date=self.date,
            author=self.author,
            title=self.title,
            description=self.description,
            url_link=self.url_link,
            download_link=self.download_link,
            linkedin_profile=self.linkedin_profile,
            submitter_email=self.submitter_email,
        )


class PublicResourceItem(BaseModel):
    """Resource as shown to visitors. Never carries the submitter's email."""

    id: int
    submitted_by: str
    date: dt.date
    author: Optional[str]
    title: str
    description: Optional[str]
    url_link: Optional[str]
    download_link: Optional[str]
    linkedin_profile: Optional[str]
    status: ResourceStatus
    created_at: dt.datetime
    updated_at: dt.datetime
    tags: list[TagPath] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, resource: ResourceWithTags) -> "PublicResourceItem":
        data = resource.model_dump(exclude={"submitter_email", "tags"})
        return cls(**data, tags=resource.tags)


class AdminResourceItem(PublicResourceItem):
    """Resource as shown to administrators."""

    submitter_email: Optional[str]

    @classmethod
    def from_domain(cls, resource: ResourceWithTags) -> "AdminResourceItem":
        return cls(**resource.model_dump(exclude={"tags"}), tags=resource.tags)
