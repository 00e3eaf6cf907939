"""Domain model entities for the resource directory."""

from resdir.domain.model.category import Category
from resdir.domain.model.hierarchy import (
    FlatTagRow,
    HierarchyCategory,
    HierarchySubcategory,
    HierarchyTag,
    OrphanedTag,
    OrphanReason,
    TagHierarchy,
    TagPath,
)
from resdir.domain.model.resource import Resource, ResourceFields, ResourceWithTags
from resdir.domain.model.subcategory import Subcategory
from resdir.domain.model.suggestion import (
    RawTagSuggestion,
    SuggestionCandidate,
    TagSuggestion,
)
from resdir.domain.model.tag import Tag

__all__ = [
    "Category",
    "Subcategory",
    "Tag",
    "Resource",
    "ResourceFields",
    "ResourceWithTags",
    "FlatTagRow",
    "TagPath",
    "TagHierarchy",
    "HierarchyCategory",
    "HierarchySubcategory",
    "HierarchyTag",
    "OrphanedTag",
    "OrphanReason",
    "SuggestionCandidate",
    "RawTagSuggestion",
    "TagSuggestion",
]
