"""Shared test fixtures for the portfolio content layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from portfolio.config import Settings

if TYPE_CHECKING:
    from pathlib import Path


def make_raw_project(**overrides: Any) -> dict[str, Any]:
    """A complete, valid raw project record as authored in front matter."""
    raw: dict[str, Any] = {
        "title": "Churn Analysis",
        "role": "Lead Analyst",
        "year": 2023,
        "outcomeSummary": "Cut churn by 12% in two quarters",
        "overview": "Customer churn study for a subscription product.",
        "problem": "Churn was rising without a clear cause.",
        "constraints": ["Three months", "No new tooling budget"],
        "approach": "Cohort analysis followed by survival modelling.",
        "techStack": ["Python", "SQL", "dbt"],
        "impact": {"qualitative": "Retention became a tracked KPI."},
        "learnings": ["Start from the data you have"],
    }
    raw.update(overrides)
    return raw


def make_raw_journey(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "date": "2023-05-01",
        "title": "First analyst role",
        "type": "milestone",
        "description": "Joined a data team full time.",
    }
    raw.update(overrides)
    return raw


def make_raw_uses(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "category": "tools",
        "items": [{"name": "Editor", "description": "Code editing"}],
        "order": 1,
    }
    raw.update(overrides)
    return raw


def make_raw_testimonial(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "name": "Jane Doe",
        "role": "Head of Data",
        "company": "Acme",
        "relationship": "Worked together at Acme",
        "quote": "A careful and curious analyst.",
        "date": "2024-02-10",
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def raw_project() -> dict[str, Any]:
    return make_raw_project()


@pytest.fixture
def raw_journey() -> dict[str, Any]:
    return make_raw_journey()


@pytest.fixture
def raw_uses() -> dict[str, Any]:
    return make_raw_uses()


@pytest.fixture
def raw_testimonial() -> dict[str, Any]:
    return make_raw_testimonial()


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Empty content directory with one folder per collection."""
    d = tmp_path / "content"
    for collection in ("projects", "journey", "uses", "testimonials"):
        (d / collection).mkdir(parents=True)
    return d


@pytest.fixture
def test_settings(content_dir: Path) -> Settings:
    return Settings(_env_file=None, content_dir=content_dir, debug=True)
