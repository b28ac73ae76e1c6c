"""Project case-study schema.

Case studies follow a narrative format: overview, problem, constraints,
approach, tech stack, impact, learnings.
"""

from __future__ import annotations

from enum import StrEnum

from portfolio.schemas.content import (
    ContentBool,
    ContentInt,
    ContentModel,
    ContentStr,
    ContentUrl,
)


class ProjectStatus(StrEnum):
    COMPLETED = "completed"
    ONGOING = "ongoing"
    ARCHIVED = "archived"


class ImpactMetric(ContentModel):
    """A quantitative impact figure, e.g. label="Report time", value="-40%"."""

    label: ContentStr
    value: ContentStr


class ProjectImpact(ContentModel):
    """Project impact and results."""

    qualitative: ContentStr
    metrics: list[ImpactMetric] | None = None


class ProjectRecord(ContentModel):
    """A validated project case study."""

    title: ContentStr
    role: ContentStr
    year: ContentInt
    duration: ContentStr | None = None  # e.g. "3 months"
    team_size: ContentInt | None = None
    outcome_summary: ContentStr
    overview: ContentStr
    problem: ContentStr
    constraints: list[ContentStr]
    approach: ContentStr
    tech_stack: list[ContentStr]
    impact: ProjectImpact
    learnings: list[ContentStr]
    featured: ContentBool = False
    status: ProjectStatus = ProjectStatus.COMPLETED
    order: ContentInt | None = None  # lower numbers first
    # Slugs of other projects; existence is not checked here
    related_projects: list[ContentStr] | None = None
    github_url: ContentUrl | None = None
