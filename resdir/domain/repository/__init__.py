"""Repository interfaces for the resource directory domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from resdir.domain.repository.category import CategoryRepository
from resdir.domain.repository.resource import ResourceQuery, ResourceRepository
from resdir.domain.repository.subcategory import SubcategoryRepository
from resdir.domain.repository.tag import TagRepository

__all__ = [
    "CategoryRepository",
    "SubcategoryRepository",
    "TagRepository",
    "ResourceRepository",
    "ResourceQuery",
]
