"""Domain models for the CV normalizer."""

from .models import (
    CanonicalProfile,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    LanguageLevel,
    PersonalInfo,
    ProjectEntry,
    SkillGroup,
    SkillItem,
    SkillKind,
)

__all__ = [
    "CanonicalProfile",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillGroup",
    "SkillItem",
    "SkillKind",
    "LanguageEntry",
    "LanguageLevel",
    "CertificationEntry",
    "ProjectEntry",
]
