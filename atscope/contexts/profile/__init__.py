"""
Profile Context

Responsibilities:
- Manages the structured resume record (personal info, summary, experience,
  education, skills, and optional extra sections)
- Loads records from mappings, YAML, and JSON with fail-fast validation
- Flattens records into plain text for keyword gap detection

Owns: Resume record representation and validation
Never: Scores resumes or reads job descriptions
"""

from atscope.contexts.profile.exceptions import InvalidResumeStructureError
from atscope.contexts.profile.resume_data_structure import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    Language,
    PersonalInfo,
    Project,
    ResumeRecord,
    SkillEntry,
    as_resume_record,
)

__all__ = [
    # Data structure classes
    "ResumeRecord",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillEntry",
    "Language",
    "Certification",
    "Project",
    # Helpers
    "as_resume_record",
    "InvalidResumeStructureError",
]
