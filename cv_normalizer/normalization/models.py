"""Data models for the normalization layer."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .defaults import DEFAULT_FALLBACKS, FallbackDefaults


@dataclass(frozen=True)
class NormalizationContext:
    """Immutable settings shared by every field normalizer in one run.

    Attributes:
        fallbacks: Placeholder values for missing mandatory fields
        technical_default_years: yearsOfExperience given to technical skills
            that do not state one (None leaves it unset)
        technical_category_label: Label of generated technical skill groups
        soft_category_label: Label of generated soft-skill groups
        today: Date substituted for missing/unparseable dates (None = current UTC date)
    """

    fallbacks: FallbackDefaults = field(default_factory=lambda: DEFAULT_FALLBACKS)
    technical_default_years: Optional[int] = 1
    technical_category_label: str = "Technical Skills"
    soft_category_label: str = "Soft Skills"
    today: Optional[date] = None


DEFAULT_CONTEXT = NormalizationContext()
