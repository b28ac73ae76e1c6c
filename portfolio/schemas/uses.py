"""Uses schema: tools and tech stack documentation."""

from __future__ import annotations

from enum import StrEnum

from portfolio.schemas.content import ContentInt, ContentModel, ContentStr, ContentUrl


class UsesCategory(StrEnum):
    TOOLS = "tools"
    STACK = "stack"


class UsesItem(ContentModel):
    name: ContentStr
    description: ContentStr
    url: ContentUrl | None = None


class UsesGroup(ContentModel):
    """A validated group of uses items.

    ``items`` keeps display order; ``order`` sorts groups within a category.
    """

    category: UsesCategory
    items: list[UsesItem]
    order: ContentInt
