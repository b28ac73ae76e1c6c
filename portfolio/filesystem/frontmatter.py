"""YAML front matter reader for MDX content files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import frontmatter
import yaml

from portfolio.exceptions import ContentLoadError


@dataclass
class RawEntry:
    """An unvalidated content file: its front matter and MDX body."""

    file_path: str
    metadata: dict[str, Any]
    body: str


def parse_raw_entry(raw_content: str, file_path: str = "") -> RawEntry:
    """Split a content file into front matter and body.

    The front matter is returned as authored; YAML dates arrive as ``date``
    objects. Raises ``ContentLoadError`` when the front matter is not valid
    YAML or holds a value YAML cannot construct, such as an impossible date.
    """
    try:
        post = frontmatter.loads(raw_content)
    except (yaml.YAMLError, ValueError) as exc:
        # PyYAML raises a bare ValueError for impossible dates like 2023-02-30
        raise ContentLoadError(file_path, f"invalid YAML front matter: {exc}") from exc
    return RawEntry(file_path=file_path, metadata=dict(post.metadata), body=post.content)
