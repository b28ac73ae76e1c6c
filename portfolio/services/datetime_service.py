"""Date parsing: lax input -> calendar date."""

from __future__ import annotations

from datetime import date, datetime

import pendulum
from dateutil import parser as dateutil_parser

# dateutil fills components a lax string leaves out from its default.
# Parsing against two defaults that differ in every component shows which
# components the string actually supplied.
_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)


def _parse_lax(value_str: str) -> date:
    """Parse a non-ISO date string, requiring an explicit year and month.

    A missing day resolves to the first of the month ("May 2023" ->
    2023-05-01). Strings that name no year or no month ("3pm", "Tuesday",
    "10") are rejected.
    """
    try:
        first = dateutil_parser.parse(value_str, default=_FILL_A, fuzzy=False)
        second = dateutil_parser.parse(value_str, default=_FILL_B, fuzzy=False)
    except OverflowError as exc:
        raise ValueError(f"Date out of range: {value_str!r}") from exc

    if first.year != second.year:
        raise ValueError(f"Date has no year: {value_str!r}")
    if first.month != second.month:
        raise ValueError(f"Date has no month: {value_str!r}")
    return date(first.year, first.month, first.day)


def parse_date(value: str | date | datetime) -> date:
    """Parse a lax date value into a calendar date.

    Accepts:
    - ``date`` and ``datetime`` objects (YAML front matter produces these)
    - 2023-05-01
    - 2023/05/01
    - May 1, 2023
    - 1 May 2023
    - May 2023 (day defaults to the 1st)
    - ISO 8601 datetimes such as 2023-05-01T09:30:00+02:00

    A datetime keeps the calendar day of its own timezone.

    Raises ``ValueError`` when the value cannot be read as a date, including
    strings without a year or month and bare numbers such as ``2023``.
    """
    if isinstance(value, date):
        # datetime is a date subclass; either way keep only the calendar day
        return date(value.year, value.month, value.day)

    value_str = value.strip()
    if not value_str:
        raise ValueError("Empty date string")
    if value_str.lower() == "now":
        # pendulum resolves "now" to the clock; content dates must be fixed
        raise ValueError("Relative date 'now' is not allowed")
    if value_str.isdigit() and len(value_str) != 8:
        # Only YYYYMMDD is a full date written as digits
        raise ValueError(f"Bare number is not a date: {value_str!r}")

    try:
        parsed = pendulum.parse(value_str, exact=True)
    except ValueError:
        # Not ISO 8601: fall back to the lax dateutil grammar
        return _parse_lax(value_str)

    if isinstance(parsed, date):
        return date(parsed.year, parsed.month, parsed.day)
    # pendulum returns Time and Duration objects for some ISO inputs
    raise ValueError(f"Not a calendar date: {value_str!r}")
