"""Content validation: raw content records -> typed records or violation reports.

Validation never raises for bad content. Every call returns a
``ValidationResult`` holding either the typed record or every field-level
violation found in the raw record.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from portfolio.exceptions import ContentValidationError
from portfolio.schemas.journey import JourneyEntry
from portfolio.schemas.project import ProjectRecord
from portfolio.schemas.testimonial import Testimonial
from portfolio.schemas.uses import UsesGroup

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

RecordT = TypeVar("RecordT", bound=BaseModel)

MISSING = "missing"


class ContentKind(StrEnum):
    """Content collections, named after their directory in the content store."""

    PROJECTS = "projects"
    JOURNEY = "journey"
    USES = "uses"
    TESTIMONIALS = "testimonials"


SCHEMAS: Mapping[ContentKind, type[BaseModel]] = {
    ContentKind.PROJECTS: ProjectRecord,
    ContentKind.JOURNEY: JourneyEntry,
    ContentKind.USES: UsesGroup,
    ContentKind.TESTIMONIALS: Testimonial,
}


class ViolationKind(StrEnum):
    MISSING = "missing"
    TYPE_MISMATCH = "type_mismatch"
    FORMAT = "format"
    ENUMERATION = "enumeration"


@dataclass(frozen=True)
class FieldViolation:
    """One field that breaks its schema."""

    path: str
    kind: ViolationKind
    expected: str
    actual: str

    def describe(self) -> str:
        """One-line message a content author can act on."""
        if self.kind is ViolationKind.MISSING:
            return f"{self.path}: required field is missing"
        return f"{self.path}: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class ValidationResult(Generic[RecordT]):
    """Either a typed record or the violations that prevented one."""

    record: RecordT | None = None
    violations: tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.record is not None

    def unwrap(self, source: str = "content record") -> RecordT:
        """Return the record, or raise ``ContentValidationError`` listing every violation."""
        if self.record is None:
            raise ContentValidationError(source, self.violations)
        return self.record


_FORMAT_ERRORS: dict[str, str] = {
    "url_format": "valid URL",
    "date_format": "calendar date",
    "date_parsing": "calendar date",
    "date_from_datetime_inexact": "calendar date",
    "date_from_datetime_parsing": "calendar date",
}

_TYPE_ERRORS: dict[str, str] = {
    "string_type": "string",
    "string_unicode": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "list",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "date_type": "calendar date",
    "null_value": "a value (leave the field out instead of empty)",
}

_ENUM_ERRORS = frozenset({"enum", "literal_error"})


def format_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``impact.metrics[0].label``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "<record>"


def _enum_expectation(error: ErrorDetails) -> str:
    expected = error.get("ctx", {}).get("expected", "")
    members = re.findall(r"'([^']*)'", str(expected))
    return "one of {" + ", ".join(members) + "}"


def to_violation(error: ErrorDetails) -> FieldViolation:
    """Translate one pydantic error into a content violation."""
    error_type = error["type"]
    path = format_path(error["loc"])
    if error_type == "missing":
        return FieldViolation(path, ViolationKind.MISSING, "required field", MISSING)

    actual = repr(error["input"])
    if error_type in _ENUM_ERRORS:
        return FieldViolation(path, ViolationKind.ENUMERATION, _enum_expectation(error), actual)
    if error_type in _FORMAT_ERRORS:
        return FieldViolation(path, ViolationKind.FORMAT, _FORMAT_ERRORS[error_type], actual)
    expected = _TYPE_ERRORS.get(error_type, error["msg"])
    return FieldViolation(path, ViolationKind.TYPE_MISMATCH, expected, actual)


def _validate(schema: type[RecordT], raw: object) -> ValidationResult[RecordT]:
    try:
        record = schema.model_validate(raw)
    except ValidationError as exc:
        violations = tuple(to_violation(error) for error in exc.errors(include_url=False))
        return ValidationResult(violations=violations)
    return ValidationResult(record=record)


def validate_project(raw: object) -> ValidationResult[ProjectRecord]:
    return _validate(ProjectRecord, raw)


def validate_journey_entry(raw: object) -> ValidationResult[JourneyEntry]:
    return _validate(JourneyEntry, raw)


def validate_uses_group(raw: object) -> ValidationResult[UsesGroup]:
    return _validate(UsesGroup, raw)


def validate_testimonial(raw: object) -> ValidationResult[Testimonial]:
    return _validate(Testimonial, raw)


def validate(kind: ContentKind, raw: object) -> ValidationResult[Any]:
    """Validate a raw record against the schema of its collection."""
    return _validate(SCHEMAS[kind], raw)


def validate_many(kind: ContentKind, raws: Iterable[object]) -> list[ValidationResult[Any]]:
    """Validate a batch of raw records; results keep input order."""
    schema = SCHEMAS[kind]
    return [_validate(schema, raw) for raw in raws]
