"""Page-related schemas."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PageId(StrEnum):
    """Static pages that carry their own SEO metadata."""

    HOME = "home"
    PROJECTS = "projects"
    JOURNEY = "journey"
    USES = "uses"
    CONTACT = "contact"


class PageMeta(BaseModel):
    """SEO metadata for a static page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    heading: str | None = None  # rendered as h1; falls back to title
    intro: str | None = None

    @property
    def display_heading(self) -> str:
        return self.heading or self.title
