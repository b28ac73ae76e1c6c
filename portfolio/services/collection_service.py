"""Collection queries used by the page templates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from portfolio.schemas.uses import UsesCategory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from portfolio.filesystem.content_manager import ContentEntry
    from portfolio.schemas.journey import JourneyEntry
    from portfolio.schemas.project import ProjectRecord
    from portfolio.schemas.testimonial import Testimonial
    from portfolio.schemas.uses import UsesGroup

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _project_sort_key(entry: ContentEntry[ProjectRecord]) -> tuple[bool, int, int, str]:
    # Curated order first (lower wins), then newest year, then slug for stability
    order = entry.data.order
    return (order is None, order if order is not None else 0, -entry.data.year, entry.slug)


def sort_projects(
    entries: Sequence[ContentEntry[ProjectRecord]],
) -> list[ContentEntry[ProjectRecord]]:
    """Projects in display order.

    Projects with an ``order`` come first, lowest first; the rest follow
    newest ``year`` first.
    """
    return sorted(entries, key=_project_sort_key)


def featured_projects(
    entries: Sequence[ContentEntry[ProjectRecord]],
) -> list[ContentEntry[ProjectRecord]]:
    """Projects flagged for the home page, in display order."""
    return sort_projects([e for e in entries if e.data.featured])


def find_entry(entries: Sequence[ContentEntry[T]], slug: str) -> ContentEntry[T] | None:
    """Find an entry by slug."""
    return next((e for e in entries if e.slug == slug), None)


def related_projects(
    project: ContentEntry[ProjectRecord],
    entries: Sequence[ContentEntry[ProjectRecord]],
) -> list[ContentEntry[ProjectRecord]]:
    """Resolve a project's ``relatedProjects`` slugs against the loaded projects.

    Unknown slugs and self-references are logged and left out.
    """
    by_slug = {e.slug: e for e in entries}
    resolved: list[ContentEntry[ProjectRecord]] = []
    for slug in project.data.related_projects or []:
        related = by_slug.get(slug)
        if related is None:
            logger.warning("Project %s references unknown project %r", project.slug, slug)
            continue
        if related.slug == project.slug:
            logger.warning("Project %s lists itself as related", project.slug)
            continue
        if all(r.slug != related.slug for r in resolved):
            resolved.append(related)
    return resolved


def journey_timeline(
    entries: Sequence[ContentEntry[JourneyEntry]],
) -> list[ContentEntry[JourneyEntry]]:
    """Timeline entries, newest first."""
    return sorted(entries, key=lambda e: (e.data.date, e.slug), reverse=True)


def uses_by_category(
    entries: Sequence[ContentEntry[UsesGroup]],
) -> dict[UsesCategory, list[ContentEntry[UsesGroup]]]:
    """Uses groups per category, each list sorted by ``order``.

    Every category is present, possibly with an empty list.
    """
    grouped: dict[UsesCategory, list[ContentEntry[UsesGroup]]] = {
        category: [] for category in UsesCategory
    }
    for entry in entries:
        grouped[entry.data.category].append(entry)
    for groups in grouped.values():
        groups.sort(key=lambda e: (e.data.order, e.slug))
    return grouped


def featured_testimonials(
    entries: Sequence[ContentEntry[Testimonial]],
) -> list[ContentEntry[Testimonial]]:
    """Testimonials flagged for the home page, newest first."""
    featured = [e for e in entries if e.data.featured]
    return sorted(featured, key=lambda e: (e.data.date, e.slug), reverse=True)
