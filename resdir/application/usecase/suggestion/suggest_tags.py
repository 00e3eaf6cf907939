"""Suggest tags use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from resdir.domain.model import TagSuggestion
from resdir.domain.service import SuggestionService


class SuggestTagsRequest(BaseModel):
    """Draft submission fields to classify."""

    title: Optional[str] = None
    description: Optional[str] = None
    submitted_by: Optional[str] = None
    url_link: Optional[str] = None


class SuggestTagsResponse(BaseModel):
    """Suggested tags, highest confidence first. May be empty."""

    suggestions: list[TagSuggestion]


class SuggestTagsUseCase:
    """Use case for suggesting tags while a resource is being submitted."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        """Initialize suggest tags use case.

        Args:
            suggestion_service: Suggestion domain service
        """
        self.suggestion_service = suggestion_service

    async def execute(self, request: SuggestTagsRequest) -> SuggestTagsResponse:
        """Execute suggestion flow.

        Never fails because of the classifier: an unavailable classifier
        gives an empty list.
        """
        with logfire.span("suggest_tags.execute", title=request.title):
            suggestions = await self.suggestion_service.suggest(
                title=request.title,
                description=request.description,
                submitted_by=request.submitted_by,
                url_link=request.url_link,
            )
            return SuggestTagsResponse(suggestions=suggestions)
