"""Tag suggestion models exchanged with the external classifier."""

from typing import Optional

from pydantic import Field

from resdir.domain.model.common import DomainModel
from resdir.domain.value import TagId


class SuggestionCandidate(DomainModel):
    """An active tag the classifier may pick from."""

    tag_id: TagId
    tag_name: str
    category_name: str
    sub_category_name: Optional[str] = None
    full_path: str


class RawTagSuggestion(DomainModel):
    """Classifier output before the directory accepts it.

    Classifiers may answer with a tag id, a tag name, or both.
    """

    tag_id: Optional[TagId] = None
    tag_name: str = ""
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str = ""


class TagSuggestion(DomainModel):
    """Accepted suggestion, resolved against the active taxonomy."""

    tag_id: TagId
    tag_name: str
    category_name: str
    sub_category_name: Optional[str] = None
    confidence: float
    reasoning: str
