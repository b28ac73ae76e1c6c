"""Content-layer exception types.

Convention:
- Validators never raise for bad content. They return a ``ValidationResult``
  and only ``ValidationResult.unwrap()`` turns a failure into
  ``ContentValidationError``.
- ``ContentLoadError`` is for content files that cannot be read or whose
  front matter cannot be parsed at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from portfolio.services.validation_service import FieldViolation


class ContentValidationError(ValueError):
    """Raised when a caller insists on a valid record and the record is not.

    The message lists every violation so a content author can fix the file
    in one pass.
    """

    def __init__(self, source: str, violations: Sequence[FieldViolation]) -> None:
        self.source = source
        self.violations = tuple(violations)
        lines = "\n".join(f"  - {v.describe()}" for v in self.violations)
        super().__init__(f"Invalid content in {source}:\n{lines}")


class ContentLoadError(Exception):
    """Raised for content files that cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")
