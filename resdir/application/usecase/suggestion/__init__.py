"""Tag suggestion use cases."""

from .suggest_tags import SuggestTagsRequest, SuggestTagsResponse, SuggestTagsUseCase

__all__ = ["SuggestTagsRequest", "SuggestTagsResponse", "SuggestTagsUseCase"]
