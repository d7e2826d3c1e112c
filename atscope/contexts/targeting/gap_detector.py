"""
Keyword gap detection.

Flattens the whole resume record into text and checks each job keyword for
substring containment. Keywords can therefore be credited from any field
(skills, achievements, titles, project technologies) without keeping a list
of keyword-eligible fields.

Known imprecision: a keyword that occurs incidentally inside an unrelated word
or token (e.g. "r" in "engineer", "ai" in "maintained", "sap" in "sapphire")
counts as present.
"""

from typing import List, Sequence

from atscope.contexts.profile.resume_data_structure import as_resume_record
from atscope.contexts.targeting.logger import _log_debug


def find_missing_keywords(resume, job_keywords: Sequence[str]) -> List[str]:
    """
    Return job keywords that do not appear anywhere in the resume.

    Args:
        resume: ResumeRecord (or mapping accepted by ResumeRecord.from_dict)
        job_keywords: Keywords extracted from the job description

    Returns:
        Missing keywords, in the same order as job_keywords
    """
    if not job_keywords:
        return []

    resume_text = as_resume_record(resume).to_text()
    missing = [keyword for keyword in job_keywords if keyword.lower() not in resume_text]

    _log_debug(f"Gap detection: {len(job_keywords) - len(missing)}/{len(job_keywords)} keywords present")
    return missing
