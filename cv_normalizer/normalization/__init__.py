"""Field normalizers: one per CV section, each mapping every known source shape
to the canonical entry models.

This module provides:
- NormalizationContext: Immutable settings shared by one normalization run
- FallbackDefaults: Placeholder values for missing mandatory fields
- normalize_* functions: Per-section converters (never raise on bad input)
"""

from .certifications import normalize_awards, normalize_certifications
from .defaults import DEFAULT_FALLBACKS, FallbackDefaults
from .education import normalize_education
from .experience import normalize_experience
from .languages import classify_language_level, normalize_languages
from .models import DEFAULT_CONTEXT, NormalizationContext
from .personal_info import normalize_personal_info
from .projects import normalize_projects
from .skills import normalize_profile_skill_groups, normalize_skills, parse_years, skill_kind_for

__all__ = [
    "NormalizationContext",
    "DEFAULT_CONTEXT",
    "FallbackDefaults",
    "DEFAULT_FALLBACKS",
    "normalize_personal_info",
    "normalize_education",
    "normalize_experience",
    "normalize_skills",
    "normalize_profile_skill_groups",
    "normalize_languages",
    "normalize_certifications",
    "normalize_awards",
    "normalize_projects",
    "classify_language_level",
    "skill_kind_for",
    "parse_years",
]
