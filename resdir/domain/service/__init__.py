"""Domain services."""

from .base import Service
from .hierarchy import build_hierarchy
from .resource_query_service import ResourceFilter, ResourceQueryService
from .resource_service import ResourceService
from .suggestion_service import ClassifierError, SuggestionService, TagClassifier
from .taxonomy_service import TaxonomyService

__all__ = [
    "ClassifierError",
    "ResourceFilter",
    "ResourceQueryService",
    "ResourceService",
    "Service",
    "SuggestionService",
    "TagClassifier",
    "TaxonomyService",
    "build_hierarchy",
]
