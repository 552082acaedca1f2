"""Skills normalizer.

Skills arrive in five encodings (see SkillEncoding): canonical groups,
profile-editor groups, and three parsed-document encodings. The classifier
tags the encoding once; this module maps each tag to exactly one handler.
Every handler produces SkillGroups tagged with a structural SkillKind so
downstream de-duplication never depends on display labels.

Groups whose categories collide (two "Soft Skills" groups, say) are left
as they are here; the aggregator merges them.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from cv_normalizer.classification import SkillEncoding, classify_skills
from cv_normalizer.domain.models import SkillGroup, SkillItem, SkillKind
from cv_normalizer.logging import get_logger
from cv_normalizer.utils.text import clean_text, pick_text

from .models import DEFAULT_CONTEXT, NormalizationContext

logger = get_logger(__name__, component="normalization")

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")
_SOFT_WORD = re.compile(r"\bsoft\b", re.IGNORECASE)
_YEARS_KEYS = ("yearsOfExperience", "years_of_experience", "experience", "years")


def skill_kind_for(label: Any, explicit: Any = None) -> SkillKind:
    """Resolve the kind of a group from an explicit tag or its label.

    An explicit ``kind`` value wins; otherwise a label with "soft" as a
    whole word (case-insensitive) is a soft-skill group, so "Software" and
    "Microsoft Office" stay technical.

    Example:
        >>> skill_kind_for("SOFT SKILLS")
        <SkillKind.SOFT: 'soft'>
    """
    if isinstance(explicit, SkillKind):
        return explicit
    if isinstance(explicit, str) and explicit.strip().lower() in {k.value for k in SkillKind}:
        return SkillKind(explicit.strip().lower())
    if isinstance(label, str) and _SOFT_WORD.search(label):
        return SkillKind.SOFT
    return SkillKind.TECHNICAL


def parse_years(value: Any) -> Optional[int]:
    """Read years of experience from an int, float or text like "3 years"."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = _NUMBER_PATTERN.search(value)
        if match:
            return int(float(match.group()))
    return None


def _source_years(entry: Mapping[str, Any]) -> Optional[int]:
    for key in _YEARS_KEYS:
        if entry.get(key) is not None:
            return parse_years(entry.get(key))
    return None


def _default_years(kind: SkillKind, context: NormalizationContext) -> Optional[int]:
    return context.technical_default_years if kind is SkillKind.TECHNICAL else None


def _items(
    raw_items: Any,
    kind: SkillKind,
    context: NormalizationContext,
    apply_defaults: bool,
) -> List[SkillItem]:
    if not isinstance(raw_items, list):
        return []

    items: List[SkillItem] = []
    for raw in raw_items:
        if isinstance(raw, str):
            raw = {"skill": raw}
        if not isinstance(raw, Mapping):
            continue
        skill = pick_text(raw, "skill", "name")
        if not skill:
            continue

        years = _source_years(raw)
        if apply_defaults:
            years = _default_years(kind, context) if kind is SkillKind.SOFT or years is None else years
        items.append(
            SkillItem(
                id=clean_text(raw.get("id")) or str(len(items) + 1),
                skill=skill,
                years_of_experience=years,
            )
        )
    return items


def _named_group(
    group: Mapping[str, Any],
    context: NormalizationContext,
    apply_defaults: bool,
    kind: Optional[SkillKind] = None,
    default_label: Optional[str] = None,
) -> SkillGroup:
    category = pick_text(group, "category", "name") or default_label or context.fallbacks.skill_category
    if kind is None:
        explicit = group.get("kind")
        if explicit is None and category.casefold() == context.soft_category_label.casefold():
            explicit = SkillKind.SOFT
        kind = skill_kind_for(category, explicit)
    return SkillGroup(
        category=category,
        kind=kind,
        items=_items(group.get("items"), kind, context, apply_defaults),
    )


def _from_canonical_groups(value: List[Any], context: NormalizationContext) -> List[SkillGroup]:
    return [
        _named_group(group, context, apply_defaults=False)
        for group in value
        if isinstance(group, Mapping)
    ]


def _from_profile_groups(value: List[Any], context: NormalizationContext) -> List[SkillGroup]:
    groups = [
        _named_group(group, context, apply_defaults=True)
        for group in value
        if isinstance(group, Mapping)
    ]
    return [group for group in groups if group.items]


def _build_group(
    category: str, kind: SkillKind, entries: List[Tuple[str, Optional[int]]]
) -> SkillGroup:
    return SkillGroup(
        category=category,
        kind=kind,
        items=[
            SkillItem(id=str(idx), skill=skill, years_of_experience=years)
            for idx, (skill, years) in enumerate(entries, start=1)
        ],
    )


def _from_categorized_object(value: Mapping[str, Any], context: NormalizationContext) -> List[SkillGroup]:
    groups = []
    technical = _items(value.get("technical_skills"), SkillKind.TECHNICAL, context, apply_defaults=True)
    soft = _items(value.get("soft_skills"), SkillKind.SOFT, context, apply_defaults=True)

    if technical:
        groups.append(SkillGroup(
            category=context.technical_category_label, kind=SkillKind.TECHNICAL, items=technical
        ))
    if soft:
        groups.append(SkillGroup(category=context.soft_category_label, kind=SkillKind.SOFT, items=soft))
    return groups


def _from_flat_entries(value: List[Any], context: NormalizationContext) -> List[SkillGroup]:
    """Bucket bare strings and {name, category?, level?} objects into groups.

    Strings and uncategorized objects are technical; objects whose category
    or level mentions "soft" go to the soft group; other categories keep
    their own technical group.
    """
    buckets: Dict[str, Tuple[SkillKind, List[Tuple[str, Optional[int]]]]] = {}

    for entry in value:
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, Mapping):
            continue
        skill = pick_text(entry, "name", "skill")
        if not skill:
            continue

        category = clean_text(entry.get("category"))
        hint = f"{category} {clean_text(entry.get('level'))}"
        kind = SkillKind.SOFT if "soft" in hint.casefold() else SkillKind.TECHNICAL
        if kind is SkillKind.SOFT:
            label = context.soft_category_label
            years = None
        else:
            label = category or context.technical_category_label
            years = _source_years(entry)
            if years is None:
                years = context.technical_default_years

        bucket_kind, entries = buckets.setdefault(label, (kind, []))
        entries.append((skill, years))

    return [_build_group(label, kind, entries) for label, (kind, entries) in buckets.items()]


_HANDLERS: Dict[SkillEncoding, Callable[[Any, NormalizationContext], List[SkillGroup]]] = {
    SkillEncoding.CANONICAL_GROUPS: _from_canonical_groups,
    SkillEncoding.PROFILE_GROUPS: _from_profile_groups,
    SkillEncoding.CATEGORIZED_OBJECT: _from_categorized_object,
    SkillEncoding.STRING_LIST: _from_flat_entries,
    SkillEncoding.NAMED_OBJECTS: _from_flat_entries,
}


def normalize_profile_skill_groups(
    core_groups: Any = None,
    soft_groups: Any = None,
    context: Optional[NormalizationContext] = None,
) -> List[SkillGroup]:
    """Convert the profile editor's ``coreSkillGroups`` / ``softSkillGroups``.

    Core groups keep their names as categories. All soft groups are folded
    into a single soft-skill group.
    """
    context = context or DEFAULT_CONTEXT
    groups: List[SkillGroup] = []

    if isinstance(core_groups, list):
        for group in core_groups:
            if not isinstance(group, Mapping):
                continue
            normalized = _named_group(
                group,
                context,
                apply_defaults=True,
                kind=SkillKind.TECHNICAL,
                default_label=context.technical_category_label,
            )
            if normalized.items:
                groups.append(normalized)

    if isinstance(soft_groups, list):
        soft_items: List[Any] = []
        for group in soft_groups:
            if isinstance(group, Mapping) and isinstance(group.get("items"), list):
                soft_items.extend(group["items"])
        items = _items(soft_items, SkillKind.SOFT, context, apply_defaults=True)
        if items:
            groups.append(SkillGroup(category=context.soft_category_label, kind=SkillKind.SOFT, items=items))

    return groups


def normalize_skills(
    value: Any,
    encoding: Optional[SkillEncoding] = None,
    context: Optional[NormalizationContext] = None,
) -> List[SkillGroup]:
    """Normalize a ``skills`` value in any of the known encodings.

    Technical skills without a stated duration get
    ``context.technical_default_years``; soft skills never carry one.
    Unknown encodings produce an empty list.

    Args:
        value: Raw ``skills`` value
        encoding: Pre-computed encoding tag; classified from value when None
        context: Normalization settings

    Returns:
        List of SkillGroups (category collisions not yet merged)
    """
    context = context or DEFAULT_CONTEXT
    encoding = encoding or classify_skills(value)
    handler = _HANDLERS.get(encoding)

    if handler is None:
        if encoding is SkillEncoding.UNKNOWN:
            logger.debug(
                "Skills encoding not recognized, treating as empty",
                extra={
                    "event": "normalization.section.unknown_shape",
                    "category": "skills",
                    "value_type": type(value).__name__,
                },
            )
        return []

    return handler(value, context)
