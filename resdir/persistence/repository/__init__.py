"""PostgreSQL repository implementations."""

from resdir.persistence.repository.category import PostgresCategoryRepository
from resdir.persistence.repository.resource import PostgresResourceRepository
from resdir.persistence.repository.subcategory import PostgresSubcategoryRepository
from resdir.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresSubcategoryRepository",
    "PostgresTagRepository",
    "PostgresResourceRepository",
]
