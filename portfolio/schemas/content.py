"""Shared base model and field types for content collection schemas.

Content files are authored with camelCase keys (``outcomeSummary``,
``githubUrl``); models expose snake_case attributes and report errors
under the authored key.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from portfolio.services.datetime_service import parse_date

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _reject_bool(value: object) -> object:
    """Keep ``true``/``false`` from passing as 1/0."""
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _check_url(value: str) -> str:
    """Require an absolute, well-formed URL and keep the authored string."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError(
            "url_format", "Input should be a valid absolute URL"
        ) from None
    return value


def _coerce_date(value: object) -> object:
    if not isinstance(value, str | date):
        raise PydanticCustomError("date_type", "Input should be a date or a date string")
    try:
        return parse_date(value)
    except ValueError as exc:
        raise PydanticCustomError(
            "date_format",
            "Input should be a recognizable date: {reason}",
            {"reason": str(exc)},
        ) from None


ContentInt = Annotated[int, BeforeValidator(_reject_bool)]
ContentUrl = Annotated[StrictStr, AfterValidator(_check_url)]
ContentDate = Annotated[date, BeforeValidator(_coerce_date)]
ContentBool = StrictBool
# Authored text; bytes and numbers are type mismatches
ContentStr = StrictStr


class ContentModel(BaseModel):
    """Base for validated content records: immutable, camelCase input."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Reject explicit nulls; an absent field must be left out."""
        _ = cls
        if value is None:
            raise PydanticCustomError(
                "null_value", "Field is empty; give it a value or remove it"
            )
        return value
