"""Education normalizer."""

from typing import Any, List, Mapping, Optional

from cv_normalizer.classification import Category, SourceShape
from cv_normalizer.domain.models import EducationEntry
from cv_normalizer.utils.dates import format_period, period_from_dates
from cv_normalizer.utils.text import clean_text, optional_text, pick_text

from .common import normalize_entries
from .models import NormalizationContext


def _description(entry: Mapping[str, Any], major: str) -> Optional[str]:
    parts = [f"Major: {major}" if major else "", clean_text(entry.get("description"))]
    return "\n".join(part for part in parts if part) or None


def _from_canonical(entry: Mapping[str, Any], context: NormalizationContext) -> EducationEntry:
    return EducationEntry(
        degree=clean_text(entry.get("degree")),
        school=clean_text(entry.get("school")),
        period=clean_text(entry.get("period")),
        gpa=optional_text(entry.get("gpa")),
        description=optional_text(entry.get("description")),
    )


def _from_profile(entry: Mapping[str, Any], context: NormalizationContext) -> EducationEntry:
    fallbacks = context.fallbacks
    major = pick_text(entry, "major", "field")
    return EducationEntry(
        degree=pick_text(entry, "degree") or fallbacks.degree,
        school=pick_text(entry, "school", "institution") or fallbacks.school,
        period=format_period(
            entry.get("startMonth"),
            entry.get("startYear"),
            entry.get("endMonth"),
            entry.get("endYear"),
        ),
        gpa=optional_text(entry.get("gpa")),
        description=_description(entry, major),
    )


def _from_parsed(entry: Mapping[str, Any], context: NormalizationContext) -> EducationEntry:
    fallbacks = context.fallbacks
    major = pick_text(entry, "field", "major")
    period = period_from_dates(entry.get("start_date"), entry.get("end_date"))
    return EducationEntry(
        degree=pick_text(entry, "degree") or fallbacks.degree,
        school=pick_text(entry, "school", "institution") or fallbacks.school,
        period=period or clean_text(entry.get("year")),
        gpa=optional_text(entry.get("gpa")),
        description=_description(entry, major),
    )


HANDLERS = {
    SourceShape.CANONICAL: _from_canonical,
    SourceShape.PROFILE_SHAPE: _from_profile,
    SourceShape.PARSED_SHAPE: _from_parsed,
}


def normalize_education(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[EducationEntry]:
    """Normalize education entries of any producer shape.

    School falls back school -> institution -> "Unknown School" and the
    degree to "Bachelor" (both from the fallbacks table); a major/field is
    kept as a "Major: ..." description line. Canonical entries pass through
    without fallbacks.
    """
    return normalize_entries(Category.EDUCATION, items, HANDLERS, shape, context)
