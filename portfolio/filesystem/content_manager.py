"""Content directory scanner: MDX files -> validated collection entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic

from portfolio.exceptions import ContentLoadError, ContentValidationError
from portfolio.filesystem.frontmatter import parse_raw_entry
from portfolio.services.slug_service import slug_from_path
from portfolio.services.validation_service import ContentKind, RecordT, validate

if TYPE_CHECKING:
    from pathlib import Path

    from portfolio.schemas.journey import JourneyEntry
    from portfolio.schemas.project import ProjectRecord
    from portfolio.schemas.testimonial import Testimonial
    from portfolio.schemas.uses import UsesGroup

logger = logging.getLogger(__name__)

CONTENT_PATTERN = "*.mdx"


@dataclass
class ContentEntry(Generic[RecordT]):
    """A validated record together with where it came from."""

    slug: str
    file_path: str
    data: RecordT
    body: str = ""


@dataclass
class ContentIndex:
    """Every valid entry of every collection in the content directory."""

    projects: list[ContentEntry[ProjectRecord]] = field(default_factory=list)
    journey: list[ContentEntry[JourneyEntry]] = field(default_factory=list)
    uses: list[ContentEntry[UsesGroup]] = field(default_factory=list)
    testimonials: list[ContentEntry[Testimonial]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # relative paths of rejected files


def discover_entries(content_dir: Path, kind: ContentKind) -> list[Path]:
    """Recursively discover content files of one collection."""
    collection_dir = content_dir / kind.value
    if not collection_dir.is_dir():
        return []
    return sorted(p for p in collection_dir.rglob(CONTENT_PATTERN) if p.is_file())


@dataclass
class ContentManager:
    """Reads content collections from the content directory.

    Invalid files are logged and skipped unless ``strict`` is set, in which
    case the first invalid file raises.
    """

    content_dir: Path
    strict: bool = False

    def _read_entry(self, kind: ContentKind, path: Path) -> ContentEntry[Any] | None:
        collection_dir = self.content_dir / kind.value
        rel_path = path.relative_to(collection_dir).as_posix()
        display_path = f"{kind.value}/{rel_path}"

        try:
            raw_content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            if self.strict:
                raise ContentLoadError(display_path, str(exc)) from exc
            logger.exception("Skipping %s: cannot read file", display_path)
            return None

        try:
            raw = parse_raw_entry(raw_content, file_path=display_path)
        except ContentLoadError:
            if self.strict:
                raise
            logger.exception("Skipping %s due to parse error", display_path)
            return None

        result = validate(kind, raw.metadata)
        if not result.ok:
            if self.strict:
                raise ContentValidationError(display_path, result.violations)
            logger.warning(
                "Skipping %s: %d invalid field(s)\n%s",
                display_path,
                len(result.violations),
                "\n".join(f"  - {v.describe()}" for v in result.violations),
            )
            return None

        # A front matter slug overrides the path-derived one
        custom_slug = raw.metadata.get("slug")
        slug = custom_slug if isinstance(custom_slug, str) and custom_slug else None
        return ContentEntry(
            slug=slug or slug_from_path(rel_path),
            file_path=display_path,
            data=result.record,
            body=raw.body,
        )

    def load_collection(
        self, kind: ContentKind, skipped: list[str] | None = None
    ) -> list[ContentEntry[Any]]:
        """Load and validate every entry of one collection.

        Paths of rejected files are appended to *skipped* when given.
        """
        entries: list[ContentEntry[Any]] = []
        seen: dict[str, str] = {}
        for path in discover_entries(self.content_dir, kind):
            entry = self._read_entry(kind, path)
            if entry is None:
                if skipped is not None:
                    rel = path.relative_to(self.content_dir).as_posix()
                    skipped.append(rel)
                continue
            if entry.slug in seen:
                logger.warning(
                    "Duplicate slug %r in %s (already used by %s)",
                    entry.slug,
                    entry.file_path,
                    seen[entry.slug],
                )
            seen[entry.slug] = entry.file_path
            entries.append(entry)
        logger.debug("Loaded %d %s entries", len(entries), kind.value)
        return entries

    def build_index(self) -> ContentIndex:
        """Load every collection from the filesystem."""
        skipped: list[str] = []
        index = ContentIndex(
            projects=self.load_collection(ContentKind.PROJECTS, skipped),
            journey=self.load_collection(ContentKind.JOURNEY, skipped),
            uses=self.load_collection(ContentKind.USES, skipped),
            testimonials=self.load_collection(ContentKind.TESTIMONIALS, skipped),
            skipped=skipped,
        )
        if skipped:
            logger.warning("Skipped %d invalid content file(s)", len(skipped))
        return index
