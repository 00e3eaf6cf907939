"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from resdir.domain.model import FlatTagRow, Tag
from resdir.domain.repository.tag import TagRepository
from resdir.domain.value import CategoryId, Slug, SubcategoryId, TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self.store.check_available()
        if tag.id is None:
            tag = tag.model_copy(
                update={
                    "id": TagId(self.store.next_id("tags")),
                    **self.store.stamp(created=True),
                }
            )
        else:
            tag = tag.model_copy(update=self.store.stamp(created=False))
        self.store.tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        self.store.check_available()
        return self.store.tags.get(tag_id)

    async def find_ids_by_names(self, names: list[str]) -> list[TagId]:
        """Resolve names to ids of visible tags."""
        self.store.check_available()
        wanted = set(names)
        return sorted(
            tag.id
            for tag in self.store.tags.values()
            if tag.name in wanted and self.store.tag_row(tag) is not None
        )

    async def slug_exists(
        self,
        category_id: CategoryId,
        sub_category_id: Optional[SubcategoryId],
        slug: Slug,
    ) -> bool:
        """Check if an active tag in the same parent scope uses the slug."""
        self.store.check_available()
        return any(
            t.category_id == category_id
            and t.sub_category_id == sub_category_id
            and t.slug == slug
            and t.is_active
            for t in self.store.tags.values()
        )

    async def find_hierarchy_rows(self, public_only: bool = False) -> list[FlatTagRow]:
        """Visible tag rows in taxonomy order."""
        self.store.check_available()
        attached = None
        if public_only:
            attached = {
                tag_id
                for tag_ids in self.store.resource_tags.values()
                for tag_id in tag_ids
            }
        return self.store.visible_rows(attached)
