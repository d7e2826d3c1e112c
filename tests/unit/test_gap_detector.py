"""Unit tests for keyword gap detection."""

import pytest

from atscope.contexts.profile.exceptions import InvalidResumeStructureError
from atscope.contexts.targeting.gap_detector import find_missing_keywords


@pytest.mark.unit
def test_missing_keywords_in_input_order(complete_resume):
    keywords = ["kubernetes", "react", "ci/cd", "typescript", "api"]

    assert find_missing_keywords(complete_resume, keywords) == ["kubernetes", "ci/cd", "api"]


@pytest.mark.unit
def test_no_job_keywords(complete_resume):
    assert find_missing_keywords(complete_resume, []) == []


@pytest.mark.unit
def test_no_job_keywords_ignores_resume_content():
    """Test an empty keyword list short-circuits before the resume is inspected."""
    assert find_missing_keywords(None, []) == []


@pytest.mark.unit
def test_keywords_found_in_any_field(make_resume):
    resume = make_resume(
        summary="",
        projects=[{"name": "tiles", "description": "Map server", "technologies": ["Kubernetes"]}],
    )

    assert find_missing_keywords(resume, ["kubernetes"]) == []


@pytest.mark.unit
def test_case_insensitive(complete_resume):
    assert find_missing_keywords(complete_resume, ["TypeScript", "DOCKER"]) == []


@pytest.mark.unit
def test_incidental_substring_counts_as_present(complete_resume):
    """Test the known imprecision: "r" matches inside any word."""
    assert find_missing_keywords(complete_resume, ["r"]) == []


@pytest.mark.unit
def test_accepts_mapping(complete_resume_data):
    assert find_missing_keywords(complete_resume_data, ["react", "sql"]) == ["sql"]


@pytest.mark.unit
def test_malformed_resume_fails_fast():
    with pytest.raises(InvalidResumeStructureError):
        find_missing_keywords({"summary": "no sections"}, ["react"])
