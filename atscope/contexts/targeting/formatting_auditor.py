"""
Structural completeness audit for resume records.

Independent of the job description. Each rule contributes at most one message,
and messages come back in rule order:

1. Contact information (email and phone)
2. Professional summary presence and length
3. Work experience presence and required fields
4. Education presence and required fields
5. Skills presence and count
"""

from typing import List

from atscope.contexts.profile.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    as_resume_record,
)
from atscope.contexts.targeting.logger import _log_debug

SUMMARY_MIN_LENGTH = 50
SUMMARY_MAX_LENGTH = 500
MIN_SKILL_COUNT = 5

MISSING_CONTACT = "Missing contact information (email or phone)."
MISSING_SUMMARY = "Missing professional summary section."
SUMMARY_TOO_SHORT = "Professional summary is too short, aim for 3-5 impactful sentences."
SUMMARY_TOO_LONG = "Professional summary is too long, keep it concise."
NO_EXPERIENCE = "No work experience entries found."
INCOMPLETE_EXPERIENCE = "Some work experience entries have missing information."
NO_EDUCATION = "No education entries found."
INCOMPLETE_EDUCATION = "Some education entries have missing information."
NO_SKILLS = "No skills listed. Add relevant technical and soft skills."
TOO_FEW_SKILLS = "Consider adding more skills (aim for at least 8-12 relevant skills)."


def experience_entry_has_required_fields(entry: ExperienceEntry) -> bool:
    return bool(entry.company and entry.position and entry.start_date)


def education_entry_has_required_fields(entry: EducationEntry) -> bool:
    return bool(entry.institution and entry.degree and entry.start_date)


def check_formatting_issues(resume) -> List[str]:
    """
    Audit a resume for structural gaps.

    Args:
        resume: ResumeRecord (or mapping accepted by ResumeRecord.from_dict)

    Returns:
        Issue messages in rule order (at most 6)
    """
    resume = as_resume_record(resume)
    issues = []

    personal = resume.personal_info
    if not personal.email or not personal.phone:
        issues.append(MISSING_CONTACT)

    # Length checks only apply when a summary exists
    if not resume.summary:
        issues.append(MISSING_SUMMARY)
    elif len(resume.summary) < SUMMARY_MIN_LENGTH:
        issues.append(SUMMARY_TOO_SHORT)
    elif len(resume.summary) > SUMMARY_MAX_LENGTH:
        issues.append(SUMMARY_TOO_LONG)

    if not resume.experience:
        issues.append(NO_EXPERIENCE)
    elif not all(experience_entry_has_required_fields(entry) for entry in resume.experience):
        issues.append(INCOMPLETE_EXPERIENCE)

    if not resume.education:
        issues.append(NO_EDUCATION)
    elif not all(education_entry_has_required_fields(entry) for entry in resume.education):
        issues.append(INCOMPLETE_EDUCATION)

    if not resume.skills:
        issues.append(NO_SKILLS)
    elif len(resume.skills) < MIN_SKILL_COUNT:
        issues.append(TOO_FEW_SKILLS)

    _log_debug(f"Formatting audit: {len(issues)} issue(s)")
    return issues
