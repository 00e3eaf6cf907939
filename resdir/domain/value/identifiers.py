"""Strongly typed identifiers for directory entities.

All entities use database-generated integer keys; NewType keeps a tag id
from being passed where a resource id is expected.
"""

from typing import NewType

CategoryId = NewType("CategoryId", int)
SubcategoryId = NewType("SubcategoryId", int)
TagId = NewType("TagId", int)
ResourceId = NewType("ResourceId", int)
