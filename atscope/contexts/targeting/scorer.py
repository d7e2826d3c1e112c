"""
ATS compatibility scoring.

Linear, additive model so every point gained or lost can be explained:

    score = 70                                   base
          + round(matched / total * 20)          keyword coverage (0 if no job keywords)
          - 3 * formatting issues                formatting penalty
          + completeness bonus (up to 10)
    clamped to [0, 100]

Completeness bonus:
    +2  first name, last name, email, phone, location, and title all filled
    +2  summary of at least 100 characters
    +3  two or more experience entries, every one fully complete
    +1  every education entry complete (true when there are none)
    +2  eight or more skills
"""

import math
from dataclasses import dataclass
from typing import Sequence

from atscope.contexts.profile.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
    as_resume_record,
)
from atscope.contexts.targeting.logger import _log_debug

BASE_SCORE = 70
MAX_KEYWORD_BONUS = 20
FORMATTING_PENALTY_PER_ISSUE = 3
MIN_SCORE = 0
MAX_SCORE = 100

PERSONAL_INFO_BONUS = 2
SUMMARY_BONUS = 2
SUMMARY_BONUS_MIN_LENGTH = 100
EXPERIENCE_BONUS = 3
EXPERIENCE_BONUS_MIN_ENTRIES = 2
EDUCATION_BONUS = 1
SKILLS_BONUS = 2
SKILLS_BONUS_MIN_COUNT = 8


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Itemized score components.

    Attributes:
        base: Starting score
        keyword_bonus: Points from keyword coverage (0 to 20)
        formatting_penalty: Points lost to formatting issues (<= 0)
        personal_info_bonus, summary_bonus, experience_bonus,
        education_bonus, skills_bonus: Completeness items
    """

    base: int
    keyword_bonus: int
    formatting_penalty: int
    personal_info_bonus: int
    summary_bonus: int
    experience_bonus: int
    education_bonus: int
    skills_bonus: int

    @property
    def completeness_bonus(self) -> int:
        return (
            self.personal_info_bonus
            + self.summary_bonus
            + self.experience_bonus
            + self.education_bonus
            + self.skills_bonus
        )

    @property
    def raw_total(self) -> int:
        """Sum before clamping (may fall outside 0-100)."""
        return self.base + self.keyword_bonus + self.formatting_penalty + self.completeness_bonus

    @property
    def total(self) -> int:
        return max(MIN_SCORE, min(MAX_SCORE, self.raw_total))

    def items(self) -> list:
        """(label, points) pairs for display."""
        return [
            ("Base score", self.base),
            ("Keyword coverage", self.keyword_bonus),
            ("Formatting issues", self.formatting_penalty),
            ("Complete personal info", self.personal_info_bonus),
            ("Detailed summary", self.summary_bonus),
            ("Complete experience", self.experience_bonus),
            ("Complete education", self.education_bonus),
            ("Skill coverage", self.skills_bonus),
        ]


def experience_entry_is_complete(entry: ExperienceEntry) -> bool:
    return bool(
        entry.company
        and entry.position
        and entry.start_date
        and (entry.current or entry.end_date)
        and entry.description
        and any(entry.achievements)
    )


def education_entry_is_complete(entry: EducationEntry) -> bool:
    return bool(
        entry.institution
        and entry.degree
        and entry.field_of_study
        and entry.start_date
        and (entry.current or entry.end_date)
    )


def _personal_info_is_complete(resume: ResumeRecord) -> bool:
    p = resume.personal_info
    return bool(p.first_name and p.last_name and p.email and p.phone and p.location and p.title)


def keyword_bonus(job_keywords: Sequence[str], missing_keywords: Sequence[str]) -> int:
    if not job_keywords:
        return 0
    matched = len(job_keywords) - len(missing_keywords)
    return round_half_up(matched / len(job_keywords) * MAX_KEYWORD_BONUS)


def score_breakdown(
    resume,
    job_keywords: Sequence[str],
    missing_keywords: Sequence[str],
    formatting_issues: Sequence[str],
) -> ScoreBreakdown:
    """
    Compute each score component.

    Args:
        resume: ResumeRecord (or mapping accepted by ResumeRecord.from_dict)
        job_keywords: Keywords extracted from the job description
        missing_keywords: Subset of job_keywords absent from the resume
        formatting_issues: Output of check_formatting_issues()

    Returns:
        ScoreBreakdown whose total is the ATS score
    """
    resume = as_resume_record(resume)

    experience_complete = len(resume.experience) >= EXPERIENCE_BONUS_MIN_ENTRIES and all(
        experience_entry_is_complete(entry) for entry in resume.experience
    )
    # all() is True for no education entries
    education_complete = all(education_entry_is_complete(entry) for entry in resume.education)

    return ScoreBreakdown(
        base=BASE_SCORE,
        keyword_bonus=keyword_bonus(job_keywords, missing_keywords),
        formatting_penalty=-FORMATTING_PENALTY_PER_ISSUE * len(formatting_issues),
        personal_info_bonus=PERSONAL_INFO_BONUS if _personal_info_is_complete(resume) else 0,
        summary_bonus=(
            SUMMARY_BONUS
            if resume.summary and len(resume.summary) >= SUMMARY_BONUS_MIN_LENGTH
            else 0
        ),
        experience_bonus=EXPERIENCE_BONUS if experience_complete else 0,
        education_bonus=EDUCATION_BONUS if education_complete else 0,
        skills_bonus=SKILLS_BONUS if len(resume.skills) >= SKILLS_BONUS_MIN_COUNT else 0,
    )


def calculate_ats_score(
    resume,
    job_keywords: Sequence[str],
    missing_keywords: Sequence[str],
    formatting_issues: Sequence[str],
) -> int:
    """
    Compute the 0-100 ATS compatibility score.

    See score_breakdown() for the individual components.
    """
    breakdown = score_breakdown(resume, job_keywords, missing_keywords, formatting_issues)
    _log_debug(
        f"Score: base {breakdown.base}, keywords +{breakdown.keyword_bonus}, "
        f"formatting {breakdown.formatting_penalty}, completeness +{breakdown.completeness_bonus} "
        f"-> {breakdown.total}"
    )
    return breakdown.total
