"""Profile aggregation: turns a raw CV payload of any shape into a CanonicalProfile.

This module implements the top-level normalization flow:
1. Guard the input (mappings, CanonicalProfile instances and None are accepted)
2. Resolve key aliases (certificates, highlightProjects)
3. Classify every category and dispatch to its field normalizer
4. Merge colliding skill groups and decide the single soft-skill rendering
5. Assemble the CanonicalProfile
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional

from cv_normalizer.classification import Category, SourceShape, classify, classify_skills
from cv_normalizer.config.models import NormalizerConfig
from cv_normalizer.domain.models import CanonicalProfile, SkillGroup, SkillKind
from cv_normalizer.logging import get_logger
from cv_normalizer.logging.context import log_context, new_normalization_id
from cv_normalizer.normalization import (
    NormalizationContext,
    normalize_awards,
    normalize_certifications,
    normalize_education,
    normalize_experience,
    normalize_languages,
    normalize_personal_info,
    normalize_profile_skill_groups,
    normalize_projects,
    normalize_skills,
)
from cv_normalizer.utils.text import string_list

from .models import NormalizationResult

logger = get_logger(__name__, component="aggregator")

# Canonical key first, alias second; the alias is only read when the
# canonical key holds no entries
SECTION_ALIASES: Dict[Category, tuple] = {
    Category.CERTIFICATIONS: ("certifications", "certificates"),
    Category.PROJECTS: ("projects", "highlightProjects"),
}

FLAT_SOFT_SKILL_KEYS = ("softSkills", "soft_skills")

_SECTION_NORMALIZERS: Dict[Category, Callable[..., List[Any]]] = {
    Category.EDUCATION: normalize_education,
    Category.EXPERIENCE: normalize_experience,
    Category.LANGUAGES: normalize_languages,
    Category.CERTIFICATIONS: normalize_certifications,
    Category.AWARDS: normalize_awards,
    Category.PROJECTS: normalize_projects,
}


def _has_entries(value: Any) -> bool:
    return isinstance(value, (list, Mapping)) and bool(value)


def section_value(data: Mapping[str, Any], category: Category) -> Any:
    """Read one category's raw value, honoring key aliases.

    Example:
        >>> section_value({"certificates": ["AWS SAA"]}, Category.CERTIFICATIONS)
        ['AWS SAA']
    """
    keys = SECTION_ALIASES.get(category, (category.value,))
    for key in keys:
        if _has_entries(data.get(key)):
            return data[key]
    return data.get(keys[0])


def merge_skill_groups(groups: List[SkillGroup]) -> List[SkillGroup]:
    """Merge groups sharing kind and (case-insensitive) category.

    The first group's label and position win. Items are de-duplicated by
    case-insensitive skill name; an item whose id is already taken in the
    merged group gets the next free number.

    Args:
        groups: Skill groups, possibly with colliding categories

    Returns:
        New list of groups with unique (kind, category) keys
    """
    merged: Dict[tuple, SkillGroup] = {}

    for group in groups:
        key = (group.kind, group.category.casefold())
        target = merged.get(key)
        if target is None:
            merged[key] = group.model_copy(update={"items": list(group.items)})
            continue

        seen_skills = {item.skill.casefold() for item in target.items}
        taken_ids = {item.id for item in target.items}
        for item in group.items:
            if item.skill.casefold() in seen_skills:
                continue
            if item.id in taken_ids:
                item = item.model_copy(update={"id": _next_id(taken_ids)})
            target.items.append(item)
            seen_skills.add(item.skill.casefold())
            taken_ids.add(item.id)

    return list(merged.values())


def _next_id(taken_ids: set) -> str:
    candidate = len(taken_ids) + 1
    while str(candidate) in taken_ids:
        candidate += 1
    return str(candidate)


class ProfileNormalizer:
    """Normalizes raw CV payloads into CanonicalProfile instances.

    Responsibilities:
    - Accept canonical, profile-editor and parsed-document payloads (or a mix)
    - Never raise on malformed input; wrong-typed sections become empty
    - Keep the result idempotent: normalizing a result again changes nothing
    - Emit structured logs tagged with a per-run normalization_id
    """

    def __init__(
        self,
        config: Optional[NormalizerConfig] = None,
        today: Optional[date] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize ProfileNormalizer.

        Args:
            config: Normalizer configuration (defaults to NormalizerConfig())
            today: Date used for defaulted certificate dates (defaults to current UTC date)
            logger_instance: Logger instance (defaults to module logger)
        """
        self.config = config or NormalizerConfig()
        self.context = NormalizationContext(
            fallbacks=self.config.fallbacks,
            technical_default_years=self.config.skills.technical_default_years,
            technical_category_label=self.config.skills.technical_category_label,
            soft_category_label=self.config.skills.soft_category_label,
            today=today,
        )
        self.logger = logger_instance or logger

    def normalize(self, data: Any) -> CanonicalProfile:
        """Normalize a payload of any supported shape.

        Args:
            data: Raw payload (mapping), CanonicalProfile or None

        Returns:
            CanonicalProfile; an empty one for unsupported input
        """
        return self.normalize_with_report(data).profile

    def normalize_with_report(self, data: Any) -> NormalizationResult:
        """Normalize a payload and report the shapes seen along the way.

        Args:
            data: Raw payload (mapping), CanonicalProfile or None

        Returns:
            NormalizationResult wrapping the profile
        """
        normalization_id = new_normalization_id()

        with log_context(normalization_id=normalization_id):
            payload = self._guard_input(data)
            if payload is None:
                return NormalizationResult(
                    profile=CanonicalProfile(),
                    normalization_id=normalization_id,
                    input_accepted=data is None,
                )

            shapes = {
                category: classify(category, section_value(payload, category))
                for category in Category
                if section_value(payload, category) is not None
            }
            skill_encoding = classify_skills(payload.get("skills")) if "skills" in payload else None
            if "coreSkillGroups" in payload or "softSkillGroups" in payload:
                shapes[Category.SKILLS] = SourceShape.PROFILE_SHAPE

            sections = {category: self.normalize_category(category, payload) for category in Category}
            skills: List[SkillGroup] = sections[Category.SKILLS]

            profile = CanonicalProfile(
                personal_info=normalize_personal_info(payload),
                experience=sections[Category.EXPERIENCE],
                education=sections[Category.EDUCATION],
                skills=skills,
                languages=sections[Category.LANGUAGES],
                certifications=sections[Category.CERTIFICATIONS],
                awards=sections[Category.AWARDS],
                projects=sections[Category.PROJECTS],
                soft_skills=self._flat_soft_skills(payload, skills),
            )

            defaulted_dates = sum(1 for cert in profile.certifications if cert.date_defaulted)

            self.logger.info(
                "Normalized profile",
                extra={
                    "event": "normalization.profile.normalized",
                    "shapes": {category.value: shape.value for category, shape in shapes.items()},
                    "skill_groups": len(profile.skills),
                    "defaulted_dates": defaulted_dates,
                },
            )

            return NormalizationResult(
                profile=profile,
                normalization_id=normalization_id,
                shapes=shapes,
                skill_encoding=skill_encoding,
                defaulted_dates=defaulted_dates,
            )

    def normalize_category(self, category: Category, data: Mapping[str, Any]) -> List[Any]:
        """Normalize a single category of a payload.

        Categories are independent of each other, so callers may run them
        concurrently and assemble the results in any order.

        Args:
            category: Section to normalize
            data: Whole raw payload (mapping)

        Returns:
            Normalized entries for that section (skill groups already merged)
        """
        category = Category(category)
        if not isinstance(data, Mapping):
            return []

        with log_context(category=category.value):
            value = section_value(data, category)

            if category is Category.SKILLS:
                groups = normalize_skills(value, context=self.context)
                groups += normalize_profile_skill_groups(
                    data.get("coreSkillGroups"), data.get("softSkillGroups"), context=self.context
                )
                return merge_skill_groups(groups)

            return _SECTION_NORMALIZERS[category](value, context=self.context)

    def _guard_input(self, data: Any) -> Optional[Mapping[str, Any]]:
        if isinstance(data, CanonicalProfile):
            return data.to_dict()
        if isinstance(data, Mapping):
            return data
        if data is not None:
            self.logger.warning(
                f"Unsupported input type {type(data).__name__}, returning empty profile",
                extra={
                    "event": "normalization.input.unsupported",
                    "input_type": type(data).__name__,
                },
            )
        return None

    @staticmethod
    def _flat_soft_skills(data: Mapping[str, Any], skills: List[SkillGroup]) -> Optional[List[str]]:
        """Flat soft-skill list, only when no soft group already renders them."""
        if any(group.kind is SkillKind.SOFT for group in skills):
            return None

        for key in FLAT_SOFT_SKILL_KEYS:
            values = string_list(data.get(key))
            if values:
                return values
        return None


_default_normalizer: Optional[ProfileNormalizer] = None


def normalize(data: Any) -> CanonicalProfile:
    """Normalize a payload with the default configuration.

    Example:
        >>> normalize({"experience": [{"jobTitle": "Dev", "company": "ACME"}]}).experience[0].position
        'Dev'
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = ProfileNormalizer()
    return _default_normalizer.normalize(data)
