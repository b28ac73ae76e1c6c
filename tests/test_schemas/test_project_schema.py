"""Tests for the project case-study schema."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from portfolio.schemas.project import ImpactMetric, ProjectRecord, ProjectStatus
from tests.conftest import make_raw_project


class TestProjectDefaults:
    def test_featured_and_status_default(self, raw_project: dict[str, Any]) -> None:
        record = ProjectRecord.model_validate(raw_project)
        assert record.featured is False
        assert record.status is ProjectStatus.COMPLETED

    def test_optional_fields_are_absent(self, raw_project: dict[str, Any]) -> None:
        record = ProjectRecord.model_validate(raw_project)
        assert record.duration is None
        assert record.team_size is None
        assert record.order is None
        assert record.related_projects is None
        assert record.github_url is None
        assert record.impact.metrics is None

    def test_camel_case_keys_map_to_attributes(self, raw_project: dict[str, Any]) -> None:
        record = ProjectRecord.model_validate(raw_project)
        assert record.outcome_summary == "Cut churn by 12% in two quarters"
        assert record.tech_stack == ["Python", "SQL", "dbt"]

    def test_falsy_values_are_kept(self) -> None:
        record = ProjectRecord.model_validate(make_raw_project(featured=False, teamSize=0))
        assert record.featured is False
        assert record.team_size == 0


class TestProjectFields:
    def test_full_record(self) -> None:
        raw = make_raw_project(
            duration="3 months",
            teamSize=4,
            impact={
                "qualitative": "Retention became a tracked KPI.",
                "metrics": [
                    {"label": "Churn", "value": "-12%"},
                    {"label": "Churn", "value": "-3pp"},
                ],
            },
            featured=True,
            status="ongoing",
            order=2,
            relatedProjects=["pricing-study", "does-not-exist"],
            githubUrl="https://github.com/example/churn",
        )
        record = ProjectRecord.model_validate(raw)
        assert record.team_size == 4
        assert record.status is ProjectStatus.ONGOING
        assert record.impact.metrics == [
            ImpactMetric(label="Churn", value="-12%"),
            ImpactMetric(label="Churn", value="-3pp"),
        ]
        assert record.related_projects == ["pricing-study", "does-not-exist"]
        assert record.github_url == "https://github.com/example/churn"

    def test_url_kept_as_authored(self) -> None:
        record = ProjectRecord.model_validate(make_raw_project(githubUrl="https://github.com"))
        assert record.github_url == "https://github.com"

    def test_numeric_string_year_is_parsed(self) -> None:
        record = ProjectRecord.model_validate(make_raw_project(year="2021"))
        assert record.year == 2021

    def test_boolean_year_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(year=True))

    def test_fractional_year_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(year=2021.5))

    def test_string_featured_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(featured="yes"))

    @pytest.mark.parametrize("field", ["title", "githubUrl"])
    def test_bytes_rejected_for_text(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(**{field: b"https://example.com"}))

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(status="done"))

    def test_impact_requires_qualitative(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRecord.model_validate(make_raw_project(impact={"metrics": []}))

    def test_explicit_null_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Field is empty"):
            ProjectRecord.model_validate(make_raw_project(duration=None))

    def test_unknown_keys_ignored(self) -> None:
        record = ProjectRecord.model_validate(make_raw_project(slug="churn", draft=True))
        assert not hasattr(record, "draft")

    def test_record_is_frozen(self, raw_project: dict[str, Any]) -> None:
        record = ProjectRecord.model_validate(raw_project)
        with pytest.raises(ValidationError):
            record.title = "Changed"  # type: ignore[misc]
