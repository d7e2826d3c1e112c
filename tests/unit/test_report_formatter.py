"""Unit tests for report formatting."""

import pytest

from atscope.contexts.targeting.analyzer import AnalysisResult
from atscope.contexts.targeting.scorer import ScoreBreakdown
from atscope.utils.report_formatter import (
    Column,
    TableFormatter,
    format_analysis_report,
    format_percentage,
    score_band,
)


@pytest.mark.unit
@pytest.mark.parametrize("score, band", [(100, "Strong match"), (80, "Strong match"), (79, "Fair match"), (60, "Fair match"), (59, "Weak match"), (0, "Weak match")])
def test_score_band(score, band):
    assert score_band(score) == band


@pytest.mark.unit
def test_format_percentage():
    assert format_percentage(5, 8) == "62.5%"
    assert format_percentage(0, 0) == "0.0%"


@pytest.mark.unit
def test_table_row_count_mismatch():
    table = TableFormatter([Column("A", 5), Column("B", 5)])

    with pytest.raises(ValueError, match="Expected 2 values, got 1"):
        table.add_row(["only one"])


@pytest.mark.unit
def test_table_alignment():
    table = TableFormatter([Column("Name", 6), Column("Pts", 4, ">")], total_width=11)
    table.add_table_header().add_separator().add_row(["Base", 70])

    assert table.render().splitlines() == ["Name    Pts", "-----------", "Base     70"]


@pytest.mark.unit
def test_analysis_report_sections():
    result = AnalysisResult(
        score=93,
        matched_keywords=("react", "docker"),
        missing_keywords=("kubernetes",),
        recommendations=("Tailor your resume to match the specific job requirements.",),
    )

    report = format_analysis_report(result, title="resume.yaml vs job.txt")

    assert "resume.yaml vs job.txt" in report
    assert "Score: 93/100 (Strong match)" in report
    assert "Keyword match: 2/3 (66.7%)" in report
    assert "  - kubernetes" in report
    assert "Formatting issues:\n  (none)" in report
    assert "  - Tailor your resume to match the specific job requirements." in report


@pytest.mark.unit
def test_analysis_report_breakdown_and_clamp_note():
    breakdown = ScoreBreakdown(
        base=70,
        keyword_bonus=0,
        formatting_penalty=-90,
        personal_info_bonus=0,
        summary_bonus=0,
        experience_bonus=0,
        education_bonus=1,
        skills_bonus=0,
    )

    report = format_analysis_report(AnalysisResult(score=0), breakdown=breakdown)

    assert "Formatting issues" in report
    assert "-90" in report
    assert "Complete education" in report
    assert "Raw total -19 clamped to 0" in report
