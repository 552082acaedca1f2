"""Language normalizer."""

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from cv_normalizer.classification import Category, SourceShape
from cv_normalizer.domain.models import LanguageEntry, LanguageLevel
from cv_normalizer.utils.text import clean_text, pick_text

from .common import normalize_entries
from .models import NormalizationContext

# Checked in order; the first level with a matching keyword wins
LEVEL_KEYWORDS: Sequence[Tuple[LanguageLevel, Tuple[str, ...]]] = (
    (LanguageLevel.NATIVE, ("native", "fluent", "mother tongue")),
    (LanguageLevel.ADVANCED, ("advanced", "proficient")),
    (LanguageLevel.BEGINNER, ("beginner", "basic", "elementary")),
)


def classify_language_level(text: Any) -> LanguageLevel:
    """Map free-text proficiency to one of the four language levels.

    Matching is a case-insensitive substring test; anything that matches
    no keyword is Intermediate.

    Example:
        >>> classify_language_level("Native speaker")
        <LanguageLevel.NATIVE: 'Native'>
        >>> classify_language_level("random text")
        <LanguageLevel.INTERMEDIATE: 'Intermediate'>
    """
    lowered = clean_text(text).lower()
    for level, keywords in LEVEL_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return level
    return LanguageLevel.INTERMEDIATE


def _from_canonical(entry: Mapping[str, Any], context: NormalizationContext) -> LanguageEntry:
    return LanguageEntry(
        language=clean_text(entry.get("language")),
        level=classify_language_level(entry.get("level")),
    )


def _from_parsed(entry: Mapping[str, Any], context: NormalizationContext) -> LanguageEntry:
    return LanguageEntry(
        language=pick_text(entry, "name", "language") or context.fallbacks.language,
        level=classify_language_level(pick_text(entry, "proficiency", "level")),
    )


HANDLERS = {
    SourceShape.CANONICAL: _from_canonical,
    SourceShape.PARSED_SHAPE: _from_parsed,
}


def normalize_languages(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[LanguageEntry]:
    """Normalize language entries; levels are always one of the four canonical values."""
    return normalize_entries(Category.LANGUAGES, items, HANDLERS, shape, context)
