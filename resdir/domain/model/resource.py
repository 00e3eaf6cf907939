"""Resource aggregate root.

Resources are the listed items (articles, tools, papers) visitors browse and
submit. The tag set lives in the ``resource_tags`` join table and is always
replaced wholesale.
"""

import datetime as dt
from typing import Optional

from pydantic import Field

from resdir.domain.model.common import DomainModel
from resdir.domain.model.hierarchy import TagPath
from resdir.domain.value import ResourceId, ResourceStatus


class ResourceFields(DomainModel):
    """Editable resource fields as received from a form.

    Everything is optional here; ``ResourceService.validate_fields`` reports
    the missing ones field by field.
    """

    submitted_by: Optional[str] = None
    date: Optional[dt.date] = None
    author: Optional[str] = None  # Free text, may hold several names
    title: Optional[str] = None
    description: Optional[str] = None
    url_link: Optional[str] = None
    download_link: Optional[str] = None
    linkedin_profile: Optional[str] = None
    submitter_email: Optional[str] = None


class Resource(DomainModel):
    """A listed resource.

    ``date`` is the original submission date and never changes after
    creation. ``submitter_email`` is private and must never reach public
    responses.
    """

    id: Optional[ResourceId] = None  # Assigned by the store on first save
    submitted_by: str = Field(min_length=1, max_length=255)
    date: dt.date
    author: Optional[str] = None
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = None
    url_link: Optional[str] = None
    download_link: Optional[str] = None
    linkedin_profile: Optional[str] = None
    submitter_email: Optional[str] = None
    status: ResourceStatus = ResourceStatus.PENDING_REVIEW
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.now)


class ResourceWithTags(Resource):
    """Resource joined with the full paths of its attached tags."""

    tags: list[TagPath] = []
