"""Testimonial schema: endorsements from colleagues and clients."""

from __future__ import annotations

from portfolio.schemas.content import (
    ContentBool,
    ContentDate,
    ContentModel,
    ContentStr,
    ContentUrl,
)


class Testimonial(ContentModel):
    """A validated testimonial."""

    name: ContentStr
    role: ContentStr
    company: ContentStr
    relationship: ContentStr  # e.g. "Worked together at Company X"
    quote: ContentStr
    linkedin: ContentUrl | None = None
    featured: ContentBool = False
    date: ContentDate
