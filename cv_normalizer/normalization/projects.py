"""Project normalizer."""

from typing import Any, List, Mapping, Optional

from cv_normalizer.classification import Category, SourceShape
from cv_normalizer.domain.models import ProjectEntry
from cv_normalizer.utils.dates import format_period, period_from_dates
from cv_normalizer.utils.text import clean_text, optional_text, pick_text, string_list

from .common import normalize_entries
from .models import NormalizationContext


def _technologies(entry: Mapping[str, Any]) -> List[str]:
    # Never inferred from description text
    for key in ("technologies", "tech_stack"):
        if isinstance(entry.get(key), list):
            return string_list(entry[key])
    return []


def _from_canonical(entry: Mapping[str, Any], context: NormalizationContext) -> ProjectEntry:
    return ProjectEntry(
        name=clean_text(entry.get("name")),
        description=clean_text(entry.get("description")),
        technologies=string_list(entry.get("technologies")),
        url=optional_text(entry.get("url")),
        github=optional_text(entry.get("github")),
        role=optional_text(entry.get("role")),
        period=optional_text(entry.get("period")),
    )


def _from_profile(entry: Mapping[str, Any], context: NormalizationContext) -> ProjectEntry:
    period = format_period(
        entry.get("startMonth"),
        entry.get("startYear"),
        entry.get("endMonth"),
        entry.get("endYear"),
        ongoing=bool(entry.get("working")),
    )
    return ProjectEntry(
        name=pick_text(entry, "name", "title") or context.fallbacks.project_name,
        description=clean_text(entry.get("description")),
        technologies=_technologies(entry),
        url=optional_text(pick_text(entry, "url", "link")),
        github=optional_text(entry.get("github")),
        role=optional_text(entry.get("role")),
        period=period or None,
    )


def _from_parsed(entry: Mapping[str, Any], context: NormalizationContext) -> ProjectEntry:
    period = period_from_dates(entry.get("start_date"), entry.get("end_date"))
    return ProjectEntry(
        name=pick_text(entry, "name", "title") or context.fallbacks.project_name,
        description=clean_text(entry.get("description")),
        technologies=_technologies(entry),
        url=optional_text(pick_text(entry, "url", "link")),
        github=optional_text(entry.get("github")),
        role=optional_text(entry.get("role")),
        period=period or optional_text(entry.get("duration")),
    )


HANDLERS = {
    SourceShape.CANONICAL: _from_canonical,
    SourceShape.PROFILE_SHAPE: _from_profile,
    SourceShape.PARSED_SHAPE: _from_parsed,
}


def normalize_projects(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[ProjectEntry]:
    """Normalize projects; technologies come from ``technologies`` or ``tech_stack`` only."""
    return normalize_entries(Category.PROJECTS, items, HANDLERS, shape, context)
