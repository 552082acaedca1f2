"""Canonical CV domain models.

This module defines the single shape every downstream consumer expects:
- PersonalInfo: contact details and the "About Me" summary
- ExperienceEntry / EducationEntry / ProjectEntry: dated sections with a
  pre-computed display period
- SkillGroup / SkillItem: categorized skills tagged with a structural SkillKind
- LanguageEntry / CertificationEntry: languages and certificates
- CanonicalProfile: the aggregate handed to renderers and persistence callers

Field names are snake_case in Python and camelCase on the wire (aliases).
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillKind(str, Enum):
    """Structural tag separating technical skills from soft skills."""

    TECHNICAL = "technical"
    SOFT = "soft"


class LanguageLevel(str, Enum):
    """Proficiency levels understood by the CV templates."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    NATIVE = "Native"


class CanonicalModel(BaseModel):
    """Base for canonical models: accepts aliases and field names, ignores extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _blank_if_none(v: Any) -> Any:
    return "" if v is None else v


class PersonalInfo(CanonicalModel):
    """Contact block of a CV."""

    full_name: str = Field("", alias="fullName")
    position: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    website: Optional[str] = None
    linkedin: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoUrl")
    dob: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None

    @field_validator("full_name", "position", "email", "phone", "location", "summary", mode="before")
    @classmethod
    def mandatory_text(cls, v: Any) -> Any:
        """Mandatory strings default to '' instead of None."""
        return _blank_if_none(v)


class ExperienceEntry(CanonicalModel):
    """A single work experience.

    ``achievements`` is None (and therefore absent from ``to_dict``) when the
    source carried nothing to synthesize it from.
    """

    position: str = ""
    company: str = ""
    period: str = ""
    description: str = ""
    achievements: Optional[List[str]] = None
    location: Optional[str] = None
    responsibilities: Optional[List[str]] = None

    @field_validator("position", "company", "period", "description", mode="before")
    @classmethod
    def mandatory_text(cls, v: Any) -> Any:
        return _blank_if_none(v)


class EducationEntry(CanonicalModel):
    degree: str = ""
    school: str = ""
    period: str = ""
    gpa: Optional[str] = None
    description: Optional[str] = None

    @field_validator("degree", "school", "period", mode="before")
    @classmethod
    def mandatory_text(cls, v: Any) -> Any:
        return _blank_if_none(v)


class SkillItem(CanonicalModel):
    id: str
    skill: str
    years_of_experience: Optional[int] = Field(None, alias="yearsOfExperience")


class SkillGroup(CanonicalModel):
    """A named group of skills.

    ``kind`` is the structural discriminator used for soft-skill
    de-duplication; ``category`` is only a display label.
    """

    category: str
    kind: SkillKind = SkillKind.TECHNICAL
    items: List[SkillItem] = Field(default_factory=list)


class LanguageEntry(CanonicalModel):
    language: str = ""
    level: LanguageLevel = LanguageLevel.INTERMEDIATE


class CertificationEntry(CanonicalModel):
    """A certificate.

    ``date_defaulted`` is True when no usable date was supplied and today's
    date was substituted, so consumers can tell provided values from defaults.
    """

    name: str = ""
    issuer: str = ""
    date: str = ""
    url: Optional[str] = None
    description: Optional[str] = None
    date_defaulted: bool = Field(False, alias="dateDefaulted")

    @field_validator("name", "issuer", "date", mode="before")
    @classmethod
    def mandatory_text(cls, v: Any) -> Any:
        return _blank_if_none(v)


class ProjectEntry(CanonicalModel):
    name: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    github: Optional[str] = None
    role: Optional[str] = None
    period: Optional[str] = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def mandatory_text(cls, v: Any) -> Any:
        return _blank_if_none(v)


class CanonicalProfile(CanonicalModel):
    """Normalized CV consumed by template rendering and persistence.

    Every list field is always present (possibly empty). ``soft_skills`` is
    only set when no soft-skill group exists in ``skills``.
    """

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillGroup] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    awards: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    soft_skills: Optional[List[str]] = Field(None, alias="softSkills")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={"example": {
            "personalInfo": {
                "fullName": "Jane Doe",
                "position": "Backend Engineer",
                "email": "jane@example.com",
                "phone": "+1 555 0100",
                "location": "Remote",
                "summary": "Engineer focused on data pipelines.",
            },
            "experience": [{
                "position": "Backend Engineer",
                "company": "Example Corp",
                "period": "03/2020 - Present",
                "description": "Built ingestion services.",
            }],
            "education": [{"degree": "BSc", "school": "State University", "period": "09/2014 - 06/2018"}],
            "skills": [{
                "category": "Technical Skills",
                "kind": "technical",
                "items": [{"id": "1", "skill": "Python", "yearsOfExperience": 5}],
            }],
            "languages": [{"language": "English", "level": "Native"}],
            "certifications": [],
            "awards": ["Hackathon Winner - Example Corp - 2021"],
            "projects": [],
        }},
    )
