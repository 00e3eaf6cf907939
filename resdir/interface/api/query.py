"""Query string helpers shared by the listing routes."""

from typing import Optional


def split_tag_names(tags: Optional[str]) -> Optional[list[str]]:
    """Split a comma-joined tag name list.

    Blank items are dropped. ``None`` or an all-blank value means no tag
    filter.
    """
    if tags is None:
        return None
    names = [name.strip() for name in tags.split(",")]
    names = [name for name in names if name]
    return names or None
