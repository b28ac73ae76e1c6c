"""Journey timeline schema: milestones, learning moments, career transitions."""

from __future__ import annotations

from enum import StrEnum

from portfolio.schemas.content import ContentDate, ContentModel, ContentStr


class JourneyEntryType(StrEnum):
    MILESTONE = "milestone"
    LEARNING = "learning"
    TRANSITION = "transition"


class JourneyEntry(ContentModel):
    """A validated timeline entry."""

    date: ContentDate
    title: ContentStr
    type: JourneyEntryType
    description: ContentStr
    skills: list[ContentStr] | None = None
