"""Per-category schema classification.

A single payload may mix canonical and producer-specific sections (a
canonical profile whose skills were just replaced by parser output, for
example), so the shape is decided for each category independently by
looking at its first entry. The classifier never raises: data without any
discriminating key is assumed canonical, and values of the wrong type are
reported as UNKNOWN for the normalizers to treat as empty.
"""

import re
from typing import Any, Callable, Dict, Mapping, Sequence

from .models import SKILL_ENCODING_SHAPES, Category, SkillEncoding, SourceShape

PROFILE_DATE_KEYS = ("startMonth", "startYear")
PARSED_DATE_KEYS = ("start_date", "end_date")

# Dates as the normalizer writes them (ISO) or the profile editor stores them
_STORED_DATE = re.compile(r"^(?:\d{4}-\d{2}-\d{2}|\d{2}/\d{4})$")


def _has_any(entry: Mapping[str, Any], keys: Sequence[str]) -> bool:
    return any(key in entry for key in keys)


def _classify_education(entry: Mapping[str, Any]) -> SourceShape:
    if isinstance(entry.get("period"), str):
        return SourceShape.CANONICAL
    if _has_any(entry, PROFILE_DATE_KEYS):
        return SourceShape.PROFILE_SHAPE
    if _has_any(entry, ("institution", "field", "year") + PARSED_DATE_KEYS):
        return SourceShape.PARSED_SHAPE
    return SourceShape.CANONICAL


def _classify_experience(entry: Mapping[str, Any]) -> SourceShape:
    if isinstance(entry.get("position"), str) and isinstance(entry.get("period"), str):
        return SourceShape.CANONICAL
    if "jobTitle" in entry:
        return SourceShape.PROFILE_SHAPE
    if _has_any(entry, ("title", "duration", "responsibilities") + PARSED_DATE_KEYS):
        return SourceShape.PARSED_SHAPE
    return SourceShape.CANONICAL


def _classify_project(entry: Mapping[str, Any]) -> SourceShape:
    # Profile projects may also carry a technologies list, so check them first
    if _has_any(entry, PROFILE_DATE_KEYS + ("working",)):
        return SourceShape.PROFILE_SHAPE
    if isinstance(entry.get("period"), str) or isinstance(entry.get("technologies"), list):
        return SourceShape.CANONICAL
    if _has_any(entry, ("tech_stack",) + PARSED_DATE_KEYS):
        return SourceShape.PARSED_SHAPE
    return SourceShape.CANONICAL


def _classify_certification(entry: Any) -> SourceShape:
    if isinstance(entry, str):
        return SourceShape.PARSED_SHAPE
    if not isinstance(entry, Mapping):
        return SourceShape.UNKNOWN
    if "dateDefaulted" in entry:
        return SourceShape.CANONICAL
    if _has_any(entry, ("org", "month", "year")):
        return SourceShape.PROFILE_SHAPE
    if _has_any(entry, ("expiry_date", "credential_id")):
        return SourceShape.PARSED_SHAPE
    # Parser output shares {name, issuer, date} with canonical entries
    date = entry.get("date")
    if not isinstance(date, str) or not _STORED_DATE.match(date.strip()):
        return SourceShape.PARSED_SHAPE
    return SourceShape.CANONICAL


def _classify_language(entry: Mapping[str, Any]) -> SourceShape:
    if "language" in entry:
        return SourceShape.CANONICAL
    if _has_any(entry, ("name", "proficiency")):
        return SourceShape.PARSED_SHAPE
    return SourceShape.CANONICAL


def _classify_award(entry: Any) -> SourceShape:
    if isinstance(entry, str):
        return SourceShape.CANONICAL
    if isinstance(entry, Mapping):
        return SourceShape.PROFILE_SHAPE
    return SourceShape.UNKNOWN


_MAPPING_RULES: Dict[Category, Callable[[Mapping[str, Any]], SourceShape]] = {
    Category.EDUCATION: _classify_education,
    Category.EXPERIENCE: _classify_experience,
    Category.PROJECTS: _classify_project,
    Category.LANGUAGES: _classify_language,
}

# Rules that accept non-mapping entries (bare strings) themselves
_ENTRY_RULES: Dict[Category, Callable[[Any], SourceShape]] = {
    Category.CERTIFICATIONS: _classify_certification,
    Category.AWARDS: _classify_award,
}


def classify_skills(value: Any) -> SkillEncoding:
    """Identify which of the known encodings a ``skills`` value uses.

    Args:
        value: Raw ``skills`` value from any producer

    Returns:
        SkillEncoding tag; EMPTY for None or empty containers, UNKNOWN for
        values matching no known encoding

    Example:
        >>> classify_skills({"technical_skills": ["Go"], "soft_skills": []})
        <SkillEncoding.CATEGORIZED_OBJECT: 'categorized_object'>
    """
    if value is None:
        return SkillEncoding.EMPTY

    if isinstance(value, Mapping):
        if not value:
            return SkillEncoding.EMPTY
        if "technical_skills" in value or "soft_skills" in value:
            return SkillEncoding.CATEGORIZED_OBJECT
        return SkillEncoding.UNKNOWN

    if not isinstance(value, list):
        return SkillEncoding.UNKNOWN
    if not value:
        return SkillEncoding.EMPTY

    first = value[0]
    if isinstance(first, str):
        return SkillEncoding.STRING_LIST
    if not isinstance(first, Mapping):
        return SkillEncoding.UNKNOWN

    has_items = isinstance(first.get("items"), list)
    if has_items and isinstance(first.get("category"), str):
        return SkillEncoding.CANONICAL_GROUPS
    if has_items and "name" in first and "category" not in first:
        return SkillEncoding.PROFILE_GROUPS
    if not has_items and "name" in first:
        return SkillEncoding.NAMED_OBJECTS
    return SkillEncoding.CANONICAL_GROUPS


def classify(category: Category, value: Any) -> SourceShape:
    """Classify the shape of one category's raw value.

    Args:
        category: Which section the value belongs to
        value: Raw section value (normally a list of entries)

    Returns:
        SourceShape for the whole section. None and empty lists are
        CANONICAL (nothing to convert); non-list values are UNKNOWN.
    """
    category = Category(category)

    if category is Category.SKILLS:
        return SKILL_ENCODING_SHAPES[classify_skills(value)]

    if value is None:
        return SourceShape.CANONICAL
    if not isinstance(value, list):
        return SourceShape.UNKNOWN
    if not value:
        return SourceShape.CANONICAL

    first = value[0]
    if category in _ENTRY_RULES:
        return _ENTRY_RULES[category](first)
    if not isinstance(first, Mapping):
        return SourceShape.UNKNOWN
    return _MAPPING_RULES[category](first)


def classify_profile(data: Mapping[str, Any]) -> Dict[Category, SourceShape]:
    """Classify every category present in a raw payload.

    Categories absent from the payload are omitted from the result.
    """
    return {
        category: classify(category, data[category.value])
        for category in Category
        if category.value in data
    }


def is_canonical_profile(data: Any) -> bool:
    """Whether a payload already looks fully canonical.

    Returns False for non-mappings and for payloads carrying profile-editor
    skill groups (``coreSkillGroups`` / ``softSkillGroups``).
    """
    if not isinstance(data, Mapping):
        return False
    if "coreSkillGroups" in data or "softSkillGroups" in data:
        return False
    return all(shape is SourceShape.CANONICAL for shape in classify_profile(data).values())
