"""Tests for the journey timeline schema."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from portfolio.schemas.journey import JourneyEntry, JourneyEntryType
from tests.conftest import make_raw_journey


class TestJourneyEntry:
    def test_valid_entry(self, raw_journey: dict[str, Any]) -> None:
        entry = JourneyEntry.model_validate(raw_journey)
        assert entry.date == date(2023, 5, 1)
        assert entry.type is JourneyEntryType.MILESTONE
        assert entry.skills is None

    def test_skills(self) -> None:
        entry = JourneyEntry.model_validate(make_raw_journey(skills=["SQL", "Tableau"]))
        assert entry.skills == ["SQL", "Tableau"]

    @pytest.mark.parametrize("entry_type", ["milestone", "learning", "transition"])
    def test_every_type_accepted(self, entry_type: str) -> None:
        entry = JourneyEntry.model_validate(make_raw_journey(type=entry_type))
        assert entry.type == entry_type

    @pytest.mark.parametrize("entry_type", ["Milestone", "promotion", "", 3])
    def test_unknown_type_rejected(self, entry_type: object) -> None:
        with pytest.raises(ValidationError):
            JourneyEntry.model_validate(make_raw_journey(type=entry_type))

    @pytest.mark.parametrize(
        "raw_date",
        [
            "2023-05-01",
            "2023/05/01",
            "May 1, 2023",
            "1 May 2023",
            "2023-05-01T09:30:00+02:00",
            date(2023, 5, 1),
            datetime(2023, 5, 1, 18, 0),
        ],
    )
    def test_date_forms_normalize(self, raw_date: object) -> None:
        entry = JourneyEntry.model_validate(make_raw_journey(date=raw_date))
        assert entry.date == date(2023, 5, 1)
        assert type(entry.date) is date

    @pytest.mark.parametrize(
        "raw_date",
        ["not a date", "", "now", "2023-13-45", "3pm", "Tuesday", "10", "2023", "May 1"],
    )
    def test_unparseable_date_rejected(self, raw_date: str) -> None:
        with pytest.raises(ValidationError):
            JourneyEntry.model_validate(make_raw_journey(date=raw_date))

    def test_list_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JourneyEntry.model_validate(make_raw_journey(date=["2023-05-01"]))
