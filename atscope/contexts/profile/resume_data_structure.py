"""
Resume Record Structure

Defines the structured resume record analyzed by the Targeting context.
The record is a read-only snapshot of what the editing UI persists: personal
info, summary, and ordered experience/education/skill entries, plus the optional
languages, certifications, projects, and interests sections.

Profile owns:
- Loading records from dicts (camelCase as persisted by the UI, or snake_case),
  YAML files, and JSON files
- Validating structure (fail fast, no silent defaults for malformed data)
- Flattening a record into the plain text used for keyword gap detection

Targeting operates on ResumeRecord instances and never mutates them.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml
from omegaconf import OmegaConf

from atscope.contexts.profile.exceptions import InvalidResumeStructureError

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5


# =============================================================================
# FIELD READERS
# =============================================================================


def _read(data: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    """Return the first present key's value (camelCase or snake_case spelling)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _read_str(data: Mapping[str, Any], keys: Tuple[str, ...], path: str) -> str:
    value = _read(data, keys)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidResumeStructureError("Expected a string", field_path=path, value=value)
    return value


def _read_optional_str(data: Mapping[str, Any], keys: Tuple[str, ...], path: str) -> Optional[str]:
    if _read(data, keys) is None:
        return None
    return _read_str(data, keys, path)


def _read_bool(data: Mapping[str, Any], keys: Tuple[str, ...], path: str) -> bool:
    value = _read(data, keys)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidResumeStructureError("Expected true or false", field_path=path, value=value)
    return value


def _read_list(data: Mapping[str, Any], keys: Tuple[str, ...], path: str, required: bool = False) -> list:
    value = _read(data, keys)
    if value is None:
        if required:
            raise InvalidResumeStructureError("Missing required section", field_path=path)
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidResumeStructureError("Expected a list", field_path=path, value=value)
    return list(value)


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidResumeStructureError("Expected a mapping", field_path=path, value=value)
    return value


def _read_str_list(data: Mapping[str, Any], keys: Tuple[str, ...], path: str) -> Tuple[str, ...]:
    items = _read_list(data, keys, path)
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise InvalidResumeStructureError("Expected a string", field_path=f"{path}[{i}]", value=item)
    return tuple(items)


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


# =============================================================================
# RESUME COMPONENTS
# =============================================================================


@dataclass(frozen=True)
class PersonalInfo:
    """
    Contact and identity fields shown in the resume header.

    Attributes:
        first_name, last_name: Candidate name
        title: Professional title (e.g., "Senior Frontend Developer")
        email, phone, location: Contact fields
        website, linkedin, github: Optional profile links
    """

    first_name: str = ""
    last_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @classmethod
    def from_dict(cls, data: Any, path: str = "personalInfo") -> "PersonalInfo":
        data = _require_mapping(data, path)
        return cls(
            first_name=_read_str(data, ("firstName", "first_name"), f"{path}.firstName"),
            last_name=_read_str(data, ("lastName", "last_name"), f"{path}.lastName"),
            title=_read_str(data, ("title",), f"{path}.title"),
            email=_read_str(data, ("email",), f"{path}.email"),
            phone=_read_str(data, ("phone",), f"{path}.phone"),
            location=_read_str(data, ("location",), f"{path}.location"),
            website=_read_optional_str(data, ("website",), f"{path}.website"),
            linkedin=_read_optional_str(data, ("linkedin",), f"{path}.linkedin"),
            github=_read_optional_str(data, ("github",), f"{path}.github"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "firstName": self.first_name,
                "lastName": self.last_name,
                "title": self.title,
                "email": self.email,
                "phone": self.phone,
                "location": self.location,
                "website": self.website,
                "linkedin": self.linkedin,
                "github": self.github,
            }
        )


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        company, position, location: Employer and role
        start_date: Start date (free text, typically YYYY-MM)
        end_date: End date, None when the role is current or unset
        current: Whether this is the current role
        description: Free-text role description
        achievements: Ordered achievement bullets
        id: Identifier assigned by the editing UI
    """

    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    description: str = ""
    achievements: Tuple[str, ...] = ()
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "experience") -> "ExperienceEntry":
        data = _require_mapping(data, path)
        return cls(
            company=_read_str(data, ("company",), f"{path}.company"),
            position=_read_str(data, ("position",), f"{path}.position"),
            location=_read_str(data, ("location",), f"{path}.location"),
            start_date=_read_str(data, ("startDate", "start_date"), f"{path}.startDate"),
            end_date=_read_optional_str(data, ("endDate", "end_date"), f"{path}.endDate"),
            current=_read_bool(data, ("current",), f"{path}.current"),
            description=_read_str(data, ("description",), f"{path}.description"),
            achievements=_read_str_list(data, ("achievements",), f"{path}.achievements"),
            id=_read_optional_str(data, ("id",), f"{path}.id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "id": self.id,
                "company": self.company,
                "position": self.position,
                "location": self.location,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "current": self.current,
                "description": self.description,
                "achievements": list(self.achievements),
            }
        )


@dataclass(frozen=True)
class EducationEntry:
    """
    Single education entry.

    Attributes:
        institution, degree, location: School and credential
        field_of_study: Field of study (serialized as "field")
        start_date, end_date, current: Attendance dates
        description: Optional free text (honors, coursework)
        gpa: Optional GPA as written (e.g., "3.8/4.0")
        id: Identifier assigned by the editing UI
    """

    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    location: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    description: Optional[str] = None
    gpa: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "education") -> "EducationEntry":
        data = _require_mapping(data, path)

        # GPA is commonly written as a bare number in YAML
        gpa = _read(data, ("gpa",))
        if isinstance(gpa, (int, float)) and not isinstance(gpa, bool):
            gpa = str(gpa)
        elif gpa is not None and not isinstance(gpa, str):
            raise InvalidResumeStructureError("Expected a string", field_path=f"{path}.gpa", value=gpa)

        return cls(
            institution=_read_str(data, ("institution",), f"{path}.institution"),
            degree=_read_str(data, ("degree",), f"{path}.degree"),
            field_of_study=_read_str(data, ("field", "field_of_study"), f"{path}.field"),
            location=_read_str(data, ("location",), f"{path}.location"),
            start_date=_read_str(data, ("startDate", "start_date"), f"{path}.startDate"),
            end_date=_read_optional_str(data, ("endDate", "end_date"), f"{path}.endDate"),
            current=_read_bool(data, ("current",), f"{path}.current"),
            description=_read_optional_str(data, ("description",), f"{path}.description"),
            gpa=gpa,
            id=_read_optional_str(data, ("id",), f"{path}.id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "id": self.id,
                "institution": self.institution,
                "degree": self.degree,
                "field": self.field_of_study,
                "location": self.location,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "current": self.current,
                "description": self.description,
                "gpa": self.gpa,
            }
        )


@dataclass(frozen=True)
class SkillEntry:
    """
    Single skill with self-assessed proficiency.

    Attributes:
        name: Skill name (e.g., "TypeScript")
        category: Grouping label (e.g., "Frontend", "Soft Skills")
        level: Proficiency from 1 (beginner) to 5 (expert)
        id: Identifier assigned by the editing UI
    """

    name: str
    level: int
    category: str = ""
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "skills") -> "SkillEntry":
        data = _require_mapping(data, path)

        level = _read(data, ("level",))
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidResumeStructureError(
                "Skill level must be an integer", field_path=f"{path}.level", value=level
            )
        if not MIN_SKILL_LEVEL <= level <= MAX_SKILL_LEVEL:
            raise InvalidResumeStructureError(
                f"Skill level must be between {MIN_SKILL_LEVEL} and {MAX_SKILL_LEVEL}",
                field_path=f"{path}.level",
                value=level,
            )

        return cls(
            name=_read_str(data, ("name",), f"{path}.name"),
            level=level,
            category=_read_str(data, ("category",), f"{path}.category"),
            id=_read_optional_str(data, ("id",), f"{path}.id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({"id": self.id, "name": self.name, "level": self.level, "category": self.category})


@dataclass(frozen=True)
class Language:
    name: str = ""
    proficiency: str = ""

    @classmethod
    def from_dict(cls, data: Any, path: str = "languages") -> "Language":
        data = _require_mapping(data, path)
        return cls(
            name=_read_str(data, ("name",), f"{path}.name"),
            proficiency=_read_str(data, ("proficiency",), f"{path}.proficiency"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "proficiency": self.proficiency}


@dataclass(frozen=True)
class Certification:
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "certifications") -> "Certification":
        data = _require_mapping(data, path)
        return cls(
            name=_read_str(data, ("name",), f"{path}.name"),
            issuer=_read_str(data, ("issuer",), f"{path}.issuer"),
            date=_read_str(data, ("date",), f"{path}.date"),
            url=_read_optional_str(data, ("url",), f"{path}.url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({"name": self.name, "issuer": self.issuer, "date": self.date, "url": self.url})


@dataclass(frozen=True)
class Project:
    name: str = ""
    description: str = ""
    url: Optional[str] = None
    technologies: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any, path: str = "projects") -> "Project":
        data = _require_mapping(data, path)
        return cls(
            name=_read_str(data, ("name",), f"{path}.name"),
            description=_read_str(data, ("description",), f"{path}.description"),
            url=_read_optional_str(data, ("url",), f"{path}.url"),
            technologies=_read_str_list(data, ("technologies",), f"{path}.technologies"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = _drop_none({"name": self.name, "description": self.description, "url": self.url})
        if self.technologies:
            data["technologies"] = list(self.technologies)
        return data


# =============================================================================
# RESUME RECORD
# =============================================================================


@dataclass(frozen=True)
class ResumeRecord:
    """
    Complete structured resume.

    Factory methods:
        from_dict(data) - Build from a camelCase or snake_case mapping
        from_yaml(path) - Load from a YAML file
        from_json(path) - Load from a JSON file (as exported by the editing UI)

    Attributes:
        personal_info: Header fields
        summary: Professional summary ("" when absent)
        experience, education, skills: Ordered entries
        languages, certifications, projects, interests: Optional extra sections
    """

    personal_info: PersonalInfo
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
    languages: Tuple[Language, ...] = ()
    certifications: Tuple[Certification, ...] = ()
    projects: Tuple[Project, ...] = ()
    interests: Tuple[str, ...] = ()

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from a mapping, validating structure.

        personalInfo, experience, education, and skills must be present.
        Individual fields may be empty; empty values are reported by the
        formatting audit, not rejected here.

        Raises:
            InvalidResumeStructureError: If a required section is missing or a
                value has the wrong type
        """
        data = _require_mapping(data, "<resume>")

        personal_data = _read(data, ("personalInfo", "personal_info"))
        if personal_data is None:
            raise InvalidResumeStructureError("Missing required section", field_path="personalInfo")

        def entries(keys, path, entry_cls, required=False):
            items = _read_list(data, keys, path, required=required)
            return tuple(entry_cls.from_dict(item, path=f"{path}[{i}]") for i, item in enumerate(items))

        return cls(
            personal_info=PersonalInfo.from_dict(personal_data),
            summary=_read_str(data, ("summary",), "summary"),
            experience=entries(("experience",), "experience", ExperienceEntry, required=True),
            education=entries(("education",), "education", EducationEntry, required=True),
            skills=entries(("skills",), "skills", SkillEntry, required=True),
            languages=entries(("languages",), "languages", Language),
            certifications=entries(("certifications",), "certifications", Certification),
            projects=entries(("projects",), "projects", Project),
            interests=_read_str_list(data, ("interests",), "interests"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ResumeRecord":
        """
        Load a record from a YAML file.

        Raises:
            FileNotFoundError: If yaml_path does not exist
            InvalidResumeStructureError: If the file is not valid YAML or the structure is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"YAML file not found: {yaml_path}")

        try:
            yaml_data = OmegaConf.load(yaml_path)
        except yaml.YAMLError as e:
            raise InvalidResumeStructureError(f"Invalid YAML in {yaml_path}: {e}") from e
        return cls.from_dict(OmegaConf.to_container(yaml_data, resolve=True))

    @classmethod
    def from_json(cls, json_path: Union[str, Path]) -> "ResumeRecord":
        """
        Load a record from a JSON file.

        Raises:
            FileNotFoundError: If json_path does not exist
            InvalidResumeStructureError: If the file is not valid JSON or the structure is invalid
        """
        json_path = Path(json_path)
        if not json_path.exists():
            raise FileNotFoundError(f"JSON file not found: {json_path}")

        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidResumeStructureError(f"Invalid JSON in {json_path}: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ResumeRecord":
        """Load from .json or .yaml/.yml based on the file extension."""
        path = Path(path)
        if path.suffix.lower() == ".json":
            return cls.from_json(path)
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.from_yaml(path)
        raise ValueError(f"Unsupported resume file type: {path.suffix} (expected .json, .yaml, or .yml)")

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase mapping persisted by the editing UI."""
        data: Dict[str, Any] = {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "skills": [entry.to_dict() for entry in self.skills],
        }
        if self.languages:
            data["languages"] = [entry.to_dict() for entry in self.languages]
        if self.certifications:
            data["certifications"] = [entry.to_dict() for entry in self.certifications]
        if self.projects:
            data["projects"] = [entry.to_dict() for entry in self.projects]
        if self.interests:
            data["interests"] = list(self.interests)
        return data

    def to_text(self) -> str:
        """
        Flatten every field value into one lower-case text blob.

        Values are newline-separated, so a phrase never spans two fields.
        Field names are not included; ids, dates, and levels are.
        """
        return "\n".join(_flatten_values(self.to_dict())).lower()

    def achievements(self) -> List[str]:
        """All achievement bullets across experience entries, in order."""
        return [achievement for entry in self.experience for achievement in entry.achievements]


def _flatten_values(value: Any) -> Iterator[str]:
    if isinstance(value, Mapping):
        for item in value.values():
            yield from _flatten_values(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten_values(item)
    elif isinstance(value, bool):
        yield "true" if value else "false"
    elif value is not None:
        yield str(value)


def as_resume_record(resume: Any) -> ResumeRecord:
    """
    Accept a ResumeRecord or a raw mapping and return a ResumeRecord.

    Raises:
        InvalidResumeStructureError: If resume is neither, or the mapping is malformed
    """
    if isinstance(resume, ResumeRecord):
        return resume
    if isinstance(resume, Mapping):
        return ResumeRecord.from_dict(resume)
    raise InvalidResumeStructureError(
        f"Expected a ResumeRecord or mapping, got {type(resume).__name__}"
    )
