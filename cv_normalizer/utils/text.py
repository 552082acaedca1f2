"""Text helpers shared by the normalizers and the summary builder."""

from typing import Any, List, Mapping, Optional


def clean_text(value: Any) -> str:
    """Coerce a loosely typed value to stripped text.

    Strings are stripped, numbers are stringified, everything else
    (None, booleans, containers) becomes an empty string.

    Example:
        >>> clean_text("  Example Corp ")
        'Example Corp'
        >>> clean_text(2020)
        '2020'
        >>> clean_text(None)
        ''
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def first_text(*values: Any) -> str:
    """Return the first value that cleans to non-empty text, or ''."""
    for value in values:
        text = clean_text(value)
        if text:
            return text
    return ""


def pick_text(source: Mapping[str, Any], *keys: str) -> str:
    """Return the first non-empty text found under ``keys`` in ``source``."""
    return first_text(*(source.get(key) for key in keys))


def optional_text(value: Any) -> Optional[str]:
    """Like clean_text, but empty results become None."""
    text = clean_text(value)
    return text or None


def string_list(value: Any) -> List[str]:
    """Keep the non-empty string entries of a list; non-lists give []."""
    if not isinstance(value, list):
        return []
    return [text for text in (clean_text(item) for item in value) if text]


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Cut text to ``max_length`` characters and append ``suffix`` if cut.

    Example:
        >>> truncate_text("a" * 120, max_length=100)[-5:]
        'aa...'
    """
    if not text or len(text) <= max_length:
        return text
    return text[:max_length] + suffix
