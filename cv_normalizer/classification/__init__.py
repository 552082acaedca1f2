"""Schema classification: decides, per category, which producer shaped the data."""

from .classifier import classify, classify_profile, classify_skills, is_canonical_profile
from .models import SKILL_ENCODING_SHAPES, Category, SkillEncoding, SourceShape

__all__ = [
    "classify",
    "classify_profile",
    "classify_skills",
    "is_canonical_profile",
    "Category",
    "SourceShape",
    "SkillEncoding",
    "SKILL_ENCODING_SHAPES",
]
