"""Work experience normalizer."""

from typing import Any, List, Mapping, Optional

from cv_normalizer.classification import Category, SourceShape
from cv_normalizer.domain.models import ExperienceEntry
from cv_normalizer.utils.dates import format_period, period_from_dates
from cv_normalizer.utils.text import clean_text, optional_text, pick_text, string_list

from .common import normalize_entries
from .models import NormalizationContext


def _optional_list(value: Any) -> Optional[List[str]]:
    return string_list(value) if isinstance(value, list) else None


def _achievements(entry: Mapping[str, Any]) -> Optional[List[str]]:
    """Source achievements plus a "Project: <name>" line; None if there are none."""
    achievements = string_list(entry.get("achievements"))
    project = clean_text(entry.get("project"))
    if project:
        achievements.append(f"Project: {project}")
    return achievements or None


def _from_canonical(entry: Mapping[str, Any], context: NormalizationContext) -> ExperienceEntry:
    return ExperienceEntry(
        position=clean_text(entry.get("position")),
        company=clean_text(entry.get("company")),
        period=clean_text(entry.get("period")),
        description=clean_text(entry.get("description")),
        achievements=_optional_list(entry.get("achievements")),
        location=optional_text(entry.get("location")),
        responsibilities=_optional_list(entry.get("responsibilities")),
    )


def _from_profile(entry: Mapping[str, Any], context: NormalizationContext) -> ExperienceEntry:
    fallbacks = context.fallbacks
    return ExperienceEntry(
        position=pick_text(entry, "jobTitle", "position", "title") or fallbacks.position,
        company=pick_text(entry, "company") or fallbacks.company,
        period=format_period(
            entry.get("startMonth"),
            entry.get("startYear"),
            entry.get("endMonth"),
            entry.get("endYear"),
            ongoing=bool(entry.get("working")),
        ),
        description=clean_text(entry.get("description")),
        achievements=_achievements(entry),
        location=optional_text(entry.get("location")),
    )


def _from_parsed(entry: Mapping[str, Any], context: NormalizationContext) -> ExperienceEntry:
    fallbacks = context.fallbacks
    responsibilities = string_list(entry.get("responsibilities"))
    ongoing = bool(entry.get("current") or entry.get("is_current"))
    period = period_from_dates(entry.get("start_date"), entry.get("end_date"), ongoing=ongoing)
    return ExperienceEntry(
        position=pick_text(entry, "position", "title") or fallbacks.position,
        company=pick_text(entry, "company") or fallbacks.company,
        period=period or clean_text(entry.get("duration")),
        description=clean_text(entry.get("description")) or "\n".join(responsibilities),
        achievements=_achievements(entry),
        location=optional_text(entry.get("location")),
        responsibilities=responsibilities or None,
    )


HANDLERS = {
    SourceShape.CANONICAL: _from_canonical,
    SourceShape.PROFILE_SHAPE: _from_profile,
    SourceShape.PARSED_SHAPE: _from_parsed,
}


def normalize_experience(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[ExperienceEntry]:
    """Normalize work experience entries of any producer shape.

    ``position`` falls back through jobTitle/position/title to the fallbacks
    table. ``achievements`` is only set when the source has achievements or
    a ``project``; otherwise it stays None and is omitted from output.
    """
    return normalize_entries(Category.EXPERIENCE, items, HANDLERS, shape, context)
