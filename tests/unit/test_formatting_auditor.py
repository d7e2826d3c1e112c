"""Unit tests for the resume formatting audit."""

import pytest

from atscope.contexts.targeting.formatting_auditor import (
    INCOMPLETE_EDUCATION,
    INCOMPLETE_EXPERIENCE,
    MISSING_CONTACT,
    MISSING_SUMMARY,
    NO_EDUCATION,
    NO_EXPERIENCE,
    NO_SKILLS,
    SUMMARY_TOO_LONG,
    SUMMARY_TOO_SHORT,
    TOO_FEW_SKILLS,
    check_formatting_issues,
)


@pytest.mark.unit
def test_complete_resume_has_no_issues(complete_resume):
    assert check_formatting_issues(complete_resume) == []


@pytest.mark.unit
def test_sparse_resume_issues_in_rule_order(sparse_resume):
    assert check_formatting_issues(sparse_resume) == [
        MISSING_CONTACT,
        NO_EXPERIENCE,
        NO_EDUCATION,
        NO_SKILLS,
    ]


@pytest.mark.unit
@pytest.mark.parametrize("field", ["email", "phone"])
def test_missing_contact_field(make_resume, complete_resume_data, field):
    personal = dict(complete_resume_data["personalInfo"], **{field: ""})

    assert check_formatting_issues(make_resume(personalInfo=personal)) == [MISSING_CONTACT]


@pytest.mark.unit
def test_missing_both_contact_fields_reported_once(make_resume, complete_resume_data):
    personal = dict(complete_resume_data["personalInfo"], email="", phone="")

    assert check_formatting_issues(make_resume(personalInfo=personal)) == [MISSING_CONTACT]


class TestSummaryLength:
    """Test summary presence and length thresholds."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "summary, expected",
        [
            ("", [MISSING_SUMMARY]),
            ("x" * 49, [SUMMARY_TOO_SHORT]),
            ("x" * 50, []),
            ("x" * 500, []),
            ("x" * 501, [SUMMARY_TOO_LONG]),
        ],
    )
    def test_summary_thresholds(self, make_resume, summary, expected):
        assert check_formatting_issues(make_resume(summary=summary)) == expected


class TestEntries:
    """Test experience, education, and skills rules."""

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["company", "position", "startDate"])
    def test_incomplete_experience_reported_once(self, make_resume, complete_resume_data, field):
        experience = [dict(entry, **{field: ""}) for entry in complete_resume_data["experience"]]

        assert check_formatting_issues(make_resume(experience=experience)) == [INCOMPLETE_EXPERIENCE]

    @pytest.mark.unit
    def test_experience_description_not_required(self, make_resume, complete_resume_data):
        experience = [dict(entry, description="") for entry in complete_resume_data["experience"]]

        assert check_formatting_issues(make_resume(experience=experience)) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["institution", "degree", "startDate"])
    def test_incomplete_education(self, make_resume, complete_resume_data, field):
        education = [dict(complete_resume_data["education"][0], **{field: ""})]

        assert check_formatting_issues(make_resume(education=education)) == [INCOMPLETE_EDUCATION]

    @pytest.mark.unit
    def test_education_field_not_required(self, make_resume, complete_resume_data):
        education = [dict(complete_resume_data["education"][0], field="")]

        assert check_formatting_issues(make_resume(education=education)) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("count, expected", [(0, [NO_SKILLS]), (4, [TOO_FEW_SKILLS]), (5, [])])
    def test_skill_count(self, make_resume, complete_resume_data, count, expected):
        skills = complete_resume_data["skills"][:count]

        assert check_formatting_issues(make_resume(skills=skills)) == expected


@pytest.mark.unit
def test_every_rule_fires_at_most_once(make_resume, complete_resume_data):
    """Test the worst case produces one message per rule."""
    personal = dict(complete_resume_data["personalInfo"], email="")
    resume = make_resume(
        personalInfo=personal,
        summary="short",
        experience=[{"company": ""}, {"position": ""}],
        education=[{"degree": ""}, {"institution": ""}],
        skills=complete_resume_data["skills"][:1],
    )

    assert check_formatting_issues(resume) == [
        MISSING_CONTACT,
        SUMMARY_TOO_SHORT,
        INCOMPLETE_EXPERIENCE,
        INCOMPLETE_EDUCATION,
        TOO_FEW_SKILLS,
    ]
