"""Aggregation of per-section normalizers into a CanonicalProfile."""

from .models import NormalizationResult
from .service import ProfileNormalizer, merge_skill_groups, normalize, section_value

__all__ = [
    "ProfileNormalizer",
    "NormalizationResult",
    "normalize",
    "merge_skill_groups",
    "section_value",
]
