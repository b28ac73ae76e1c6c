"""Slug derivation for content entries."""

from __future__ import annotations

import re
import unicodedata
from pathlib import PurePosixPath


def slugify(text: str) -> str:
    """Turn one path segment or title into a URL-safe slug.

    - Normalize unicode to ASCII (NFKD)
    - Lowercase, strip
    - Replace runs of non-alphanumeric chars with a single hyphen
    - Strip leading/trailing hyphens
    """
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = text.lower().strip()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def slug_from_path(rel_path: str) -> str:
    """Derive an entry slug from its path relative to the collection directory.

    ``2023/Data Pipeline.mdx`` becomes ``2023/data-pipeline``. An ``index``
    file takes the slug of its directory.
    """
    path = PurePosixPath(rel_path.replace("\\", "/"))
    parts = [*path.parent.parts, path.stem]
    if len(parts) > 1 and parts[-1] == "index":
        parts.pop()
    segments = [slugify(part) for part in parts if part not in ("", ".")]
    slug = "/".join(segment for segment in segments if segment)
    if not slug:
        raise ValueError(f"Cannot derive a slug from {rel_path!r}")
    return slug
