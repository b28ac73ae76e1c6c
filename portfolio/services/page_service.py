"""Page service: SEO metadata for the static pages.

Dynamic pages (individual projects) build their metadata from content.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from portfolio.schemas.page import PageId, PageMeta

if TYPE_CHECKING:
    from collections.abc import Mapping

PAGES: Mapping[PageId, PageMeta] = MappingProxyType(
    {
        # The home page represents the site itself; its title is a tab label only
        PageId.HOME: PageMeta(
            title="Home",
            description=(
                "Engineering leader specializing in system architecture, technical "
                "decision-making, and delivering measurable business impact."
            ),
        ),
        PageId.PROJECTS: PageMeta(
            title="Projects",
            description=(
                "Data analysis projects showcasing problem-solving approach, analytical "
                "methods, and measurable impact across various domains."
            ),
            heading="Projects",
            intro=(
                "Projects that demonstrate how I approach data problems, apply analytical "
                "methods, and deliver actionable insights. Each project tells the story of "
                "the challenge, the data, the analysis performed, and the outcomes achieved."
            ),
        ),
        PageId.JOURNEY: PageMeta(
            title="Journey - Career Growth & Learning Timeline",
            description=(
                "A chronological timeline of my professional journey, highlighting key "
                "milestones, learning moments, and career transitions that shaped my "
                "growth as a Data Analyst."
            ),
            heading="Journey",
            intro=(
                "A timeline of my professional growth and learning progression. This "
                "isn't a resume. It's a story of how I've evolved as a Data Analyst, the "
                "pivotal moments that shaped my thinking, and the skills I've developed "
                "along the way."
            ),
        ),
        PageId.USES: PageMeta(
            title="Uses - Tools & Tech Stack",
            description=(
                "A comprehensive list of the tools and technologies I use for "
                "development work."
            ),
            heading="Uses",
            intro=(
                "A transparent look at the tools and technologies that power my "
                "development workflow. This page documents what I use and why, helping "
                "other engineers discover useful tools and understand my technical context."
            ),
        ),
        PageId.CONTACT: PageMeta(
            title="Contact - Get in Touch",
            description=(
                "Get in touch to discuss opportunities, collaborations, or technical "
                "challenges."
            ),
            heading="Let's Talk",
        ),
    }
)


def lookup(page_id: PageId) -> PageMeta:
    """Return the SEO metadata for a static page."""
    return PAGES[page_id]
