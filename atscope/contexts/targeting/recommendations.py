"""
Recommendation generation from keyword gaps and weak phrasing.

Recommendations are only produced when the job description has keywords the
resume lacks; a resume with full keyword coverage gets none.
"""

import re
from typing import List, Sequence

from atscope.contexts.profile.resume_data_structure import as_resume_record
from atscope.contexts.targeting.logger import _log_debug

MIN_DESCRIPTION_LENGTH = 50
MAX_KEYWORDS_LISTED = 3
MIN_RECOMMENDATIONS = 2

# Percentages or outcome verbs mark an achievement as quantified
QUANTIFIABLE_IMPACT = re.compile(
    r"\d+%|\d+ percent|increased|decreased|reduced|improved|generated|saved|delivered",
    re.IGNORECASE,
)

ADD_KEYWORDS_TO_SUMMARY = "Consider adding some of the missing keywords to your professional summary."
EXPAND_DESCRIPTIONS = (
    "Expand your experience descriptions to include more relevant keywords and achievements."
)
ADD_MISSING_SKILLS = "Add missing skills that are relevant to the job description, especially: "
ADD_QUANTIFIABLE_ACHIEVEMENTS = "Add quantifiable achievements with metrics to your experience section."
USE_ACTION_VERBS = "Use action verbs at the beginning of your bullet points."
TAILOR_RESUME = "Tailor your resume to match the specific job requirements."


def has_quantifiable_impact(text: str) -> bool:
    """
    Check whether an achievement reads as measurable impact.

    Examples:
        >>> has_quantifiable_impact("Increased revenue by 20%")
        True
        >>> has_quantifiable_impact("Helped the team")
        False
    """
    return bool(QUANTIFIABLE_IMPACT.search(text or ""))


def generate_recommendations(resume, missing_keywords: Sequence[str]) -> List[str]:
    """
    Suggest resume edits that would close keyword gaps.

    Args:
        resume: ResumeRecord (or mapping accepted by ResumeRecord.from_dict)
        missing_keywords: Output of find_missing_keywords()

    Returns:
        Ordered recommendation strings (empty when nothing is missing)
    """
    if not missing_keywords:
        return []

    resume = as_resume_record(resume)
    recommendations = []

    if resume.summary:
        recommendations.append(ADD_KEYWORDS_TO_SUMMARY)

    if any(
        not entry.description or len(entry.description) < MIN_DESCRIPTION_LENGTH
        for entry in resume.experience
    ):
        recommendations.append(EXPAND_DESCRIPTIONS)

    recommendations.append(ADD_MISSING_SKILLS + ", ".join(missing_keywords[:MAX_KEYWORDS_LISTED]))

    if not any(has_quantifiable_impact(achievement) for achievement in resume.achievements()):
        recommendations.append(ADD_QUANTIFIABLE_ACHIEVEMENTS)

    if len(recommendations) < MIN_RECOMMENDATIONS:
        recommendations.append(USE_ACTION_VERBS)
        recommendations.append(TAILOR_RESUME)

    _log_debug(f"Generated {len(recommendations)} recommendation(s)")
    return recommendations
