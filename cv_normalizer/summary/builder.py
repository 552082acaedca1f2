"""Builds the human-readable preview shown before a normalized CV is saved.

Sections appear in a fixed order and empty sections are omitted:
Personal Info, About Me, Education, Work Experience, Projects, Technical
Skills, Soft Skills, Languages, Certificates, Awards.
"""

from typing import Any, List, Optional

from cv_normalizer.aggregation import ProfileNormalizer
from cv_normalizer.config.models import NormalizerConfig, SummaryConfig
from cv_normalizer.domain.models import CanonicalProfile, SkillKind
from cv_normalizer.utils.text import truncate_text

from .models import SummarySection


def _joined(*parts: str, separator: str = " - ") -> str:
    return separator.join(part for part in parts if part)


def _personal_info(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    info = profile.personal_info
    if not (info.full_name or info.position):
        return []
    labelled = (("Name", info.full_name), ("Title", info.position), ("Email", info.email), ("Phone", info.phone))
    return [f"{label}: {value}" for label, value in labelled if value]


def _about_me(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    summary = profile.personal_info.summary
    return [truncate_text(summary, max_length=config.text_preview_length)] if summary else []


def _education(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return [_joined(entry.degree, entry.school) for entry in profile.education]


def _experience(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return [
        f"{entry.position} at {entry.company}" if entry.company else entry.position
        for entry in profile.experience
    ]


def _projects(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return [entry.name for entry in profile.projects]


def _skills_of_kind(profile: CanonicalProfile, kind: SkillKind) -> List[str]:
    return [item.skill for group in profile.skills if group.kind is kind for item in group.items]


def _technical_skills(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return _skills_of_kind(profile, SkillKind.TECHNICAL)


def _soft_skills(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return _skills_of_kind(profile, SkillKind.SOFT) or list(profile.soft_skills or [])


def _languages(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return [f"{entry.language} ({entry.level.value})" for entry in profile.languages]


def _certifications(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return [_joined(entry.name, entry.issuer) for entry in profile.certifications]


def _awards(profile: CanonicalProfile, config: SummaryConfig) -> List[str]:
    return list(profile.awards)


# (label, collector, capped, single): capped sections list at most
# skill_preview_limit items; single sections count as one entry whatever they list
SECTIONS: List[tuple] = [
    ("Personal Info", _personal_info, False, True),
    ("About Me", _about_me, False, True),
    ("Education", _education, False, False),
    ("Work Experience", _experience, False, False),
    ("Projects", _projects, False, False),
    ("Technical Skills", _technical_skills, True, False),
    ("Soft Skills", _soft_skills, True, False),
    ("Languages", _languages, False, False),
    ("Certificates", _certifications, False, False),
    ("Awards", _awards, False, False),
]


def _as_profile(profile: Any, config: NormalizerConfig) -> CanonicalProfile:
    if isinstance(profile, CanonicalProfile):
        return profile
    return ProfileNormalizer(config=config).normalize(profile)


def summarize(profile: Any, config: Optional[NormalizerConfig] = None) -> List[SummarySection]:
    """Build the per-section preview of a profile.

    Args:
        profile: CanonicalProfile, or a raw payload which is normalized first
        config: Normalizer configuration (its ``summary`` section sets the limits)

    Returns:
        SummarySection list in display order, empty sections omitted

    Example:
        >>> sections = summarize({"education": [{"degree": "BSc", "school": "MIT", "period": ""}]})
        >>> [(s.category, s.count) for s in sections]
        [('Education', 1)]
    """
    config = config or NormalizerConfig()
    profile = _as_profile(profile, config)
    limits = config.summary

    sections = []
    for label, collect, capped, single in SECTIONS:
        items: List[str] = collect(profile, limits)
        if not items:
            continue
        preview = items[: limits.skill_preview_limit] if capped else items
        sections.append(SummarySection(category=label, count=1 if single else len(items), items=preview))
    return sections


def has_content(profile: Any) -> bool:
    """Whether a profile holds anything worth saving.

    Any non-empty list section counts, as do a name, a title or a summary.
    Contact details alone (email, phone, location) do not.
    Raw payloads are normalized with the default configuration first.
    """
    profile = _as_profile(profile, NormalizerConfig())
    info = profile.personal_info
    sections = (
        profile.education,
        profile.experience,
        profile.projects,
        profile.skills,
        profile.soft_skills,
        profile.languages,
        profile.certifications,
        profile.awards,
    )
    return any(sections) or bool(info.full_name or info.position or info.summary)
