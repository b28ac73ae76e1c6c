"""Build entry point: configure logging and load the site content."""

from __future__ import annotations

import logging
import sys

from portfolio.config import Settings
from portfolio.filesystem.content_manager import ContentIndex, ContentManager

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure content-build logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )


def load_content(settings: Settings | None = None) -> ContentIndex:
    """Load and validate every content collection.

    Returns the index of valid entries. With ``strict_content`` set, the
    first invalid file raises instead of being skipped.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.debug)

    content_dir = settings.content_dir
    if not content_dir.is_dir():
        logger.warning("Content directory %s does not exist; no content loaded", content_dir)
        return ContentIndex()

    logger.info("Loading content from %s (strict=%s)", content_dir, settings.strict_content)
    manager = ContentManager(content_dir=content_dir, strict=settings.strict_content)
    index = manager.build_index()
    logger.info(
        "Loaded %d projects, %d journey entries, %d uses groups, %d testimonials",
        len(index.projects),
        len(index.journey),
        len(index.uses),
        len(index.testimonials),
    )
    return index
