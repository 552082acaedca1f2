"""Shared dispatch for list-valued sections.

Each section module supplies one entry handler per SourceShape; this module
takes care of the fail-open rules common to all of them: non-list input and
UNKNOWN shapes give an empty result, and entries a handler cannot read are
skipped instead of raising.
"""

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from cv_normalizer.classification import Category, SourceShape, classify
from cv_normalizer.logging import get_logger

from .models import DEFAULT_CONTEXT, NormalizationContext

logger = get_logger(__name__, component="normalization")

T = TypeVar("T")
EntryHandler = Callable[[Any, NormalizationContext], Optional[T]]


def normalize_entries(
    category: Category,
    items: Any,
    handlers: Mapping[SourceShape, EntryHandler],
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
    accepts_strings: bool = False,
) -> List[T]:
    """Run the handler matching ``shape`` over every entry of ``items``.

    Args:
        category: Section being normalized (used for classification and logs)
        items: Raw section value
        handlers: Entry handler per source shape
        shape: Pre-computed shape; classified from ``items`` when None
        context: Normalization settings (defaults apply when None)
        accepts_strings: Pass bare string entries to the handler instead of
            skipping them

    Returns:
        Normalized entries; handlers may return None to drop an entry
    """
    if not isinstance(items, list) or not items:
        return []

    context = context or DEFAULT_CONTEXT
    shape = shape or classify(category, items)
    handler = handlers.get(shape)

    if handler is None:
        logger.debug(
            "Section shape not recognized, treating as empty",
            extra={
                "event": "normalization.section.unknown_shape",
                "category": category.value,
                "shape": shape.value,
            },
        )
        return []

    results: List[T] = []
    skipped = 0
    for entry in items:
        readable = isinstance(entry, Mapping) or (accepts_strings and isinstance(entry, str))
        if not readable:
            skipped += 1
            continue
        normalized = handler(entry, context)
        if normalized is not None:
            results.append(normalized)

    if skipped:
        logger.debug(
            "Skipped unreadable entries",
            extra={
                "event": "normalization.section.entries_skipped",
                "category": category.value,
                "skipped": skipped,
            },
        )

    return results
