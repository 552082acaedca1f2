"""Certification and award normalizers.

Both sections accept bare strings next to objects. Certifications built
from a string (or from an object without a usable date) get today's date
with ``dateDefaulted`` set, so the substitution stays visible downstream.
"""

from typing import Any, List, Mapping, Optional

from cv_normalizer.classification import Category, SourceShape
from cv_normalizer.domain.models import CertificationEntry
from cv_normalizer.logging import get_logger
from cv_normalizer.utils.dates import ParsedDate, parse_date
from cv_normalizer.utils.text import clean_text, first_text, optional_text, pick_text

from .common import normalize_entries
from .models import NormalizationContext

logger = get_logger(__name__, component="normalization")


def _resolve_date(value: Any, name: str, context: NormalizationContext) -> ParsedDate:
    parsed = parse_date(value, today=context.today)
    if parsed.defaulted:
        logger.debug(
            "Certification date missing or unparseable, using today",
            extra={"event": "normalization.date.defaulted", "certificate": name},
        )
    return parsed


def _from_string(entry: str, context: NormalizationContext) -> Optional[CertificationEntry]:
    name = clean_text(entry)
    if not name:
        return None
    parsed = _resolve_date(None, name, context)
    return CertificationEntry(
        name=name,
        issuer=context.fallbacks.organization,
        date=parsed.value,
        date_defaulted=True,
    )


def _from_canonical(entry: Mapping[str, Any], context: NormalizationContext) -> CertificationEntry:
    return CertificationEntry(
        name=clean_text(entry.get("name")),
        issuer=clean_text(entry.get("issuer")),
        date=clean_text(entry.get("date")),
        url=optional_text(entry.get("url")),
        description=optional_text(entry.get("description")),
        date_defaulted=entry.get("dateDefaulted") is True,
    )


def _profile_date(entry: Mapping[str, Any]) -> str:
    month = clean_text(entry.get("month"))
    year = clean_text(entry.get("year"))
    if month and year:
        return f"{month.zfill(2)}/{year}"
    return year


def _from_profile(entry: Mapping[str, Any], context: NormalizationContext) -> CertificationEntry:
    fallbacks = context.fallbacks
    name = pick_text(entry, "name", "title") or fallbacks.certificate_name
    date = _profile_date(entry)
    defaulted = False
    if not date:
        parsed = _resolve_date(entry.get("date"), name, context)
        date, defaulted = parsed.value, parsed.defaulted

    return CertificationEntry(
        name=name,
        issuer=pick_text(entry, "org", "issuer", "organization") or fallbacks.organization,
        date=date,
        url=optional_text(entry.get("url")),
        description=optional_text(entry.get("description")),
        date_defaulted=defaulted,
    )


def _from_parsed(entry: Mapping[str, Any], context: NormalizationContext) -> CertificationEntry:
    fallbacks = context.fallbacks
    name = pick_text(entry, "name", "title") or fallbacks.certificate_name
    parsed = _resolve_date(first_text(entry.get("date"), entry.get("expiry_date")) or None, name, context)

    credential_id = clean_text(entry.get("credential_id"))
    description = f"Credential ID: {credential_id}" if credential_id else optional_text(entry.get("description"))

    return CertificationEntry(
        name=name,
        issuer=pick_text(entry, "issuer", "organization", "org") or fallbacks.organization,
        date=parsed.value,
        url=optional_text(entry.get("url")),
        description=description,
        date_defaulted=parsed.defaulted,
    )


def _accepting_strings(handler):
    """Wrap an object handler so bare-string entries are always readable."""

    def dispatch(entry: Any, context: NormalizationContext) -> Optional[CertificationEntry]:
        if isinstance(entry, str):
            return _from_string(entry, context)
        return handler(entry, context)

    return dispatch


HANDLERS = {
    SourceShape.CANONICAL: _accepting_strings(_from_canonical),
    SourceShape.PROFILE_SHAPE: _accepting_strings(_from_profile),
    SourceShape.PARSED_SHAPE: _accepting_strings(_from_parsed),
}


def normalize_certifications(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[CertificationEntry]:
    """Normalize certificates from strings, profile objects or parsed objects.

    Args:
        items: Raw ``certifications`` (or ``certificates``) value
        shape: Pre-computed shape; classified from items when None
        context: Normalization settings; ``context.today`` fixes the
            substitute date

    Returns:
        List of CertificationEntry
    """
    # Parsed objects are read leniently, so a list that opens with a string
    # still reads its later objects
    return normalize_entries(
        Category.CERTIFICATIONS, items, HANDLERS, shape, context, accepts_strings=True
    )


def _award_from_object(entry: Mapping[str, Any], context: NormalizationContext) -> str:
    when = first_text(entry.get("year"), entry.get("month"), entry.get("date"))
    parts = [pick_text(entry, "name", "title"), pick_text(entry, "organization", "org", "issuer"), when]
    return " - ".join(part for part in parts if part) or context.fallbacks.award


def _award_entry(entry: Any, context: NormalizationContext) -> Optional[str]:
    if isinstance(entry, str):
        return clean_text(entry) or None
    return _award_from_object(entry, context)


AWARD_HANDLERS = {
    SourceShape.CANONICAL: _award_entry,
    SourceShape.PROFILE_SHAPE: _award_entry,
}


def normalize_awards(
    items: Any,
    shape: Optional[SourceShape] = None,
    context: Optional[NormalizationContext] = None,
) -> List[str]:
    """Flatten awards to display strings.

    Strings pass through; objects become "name - organization - year"
    (empty parts skipped), or the fallback "Award" when nothing is set.

    Example:
        >>> normalize_awards([{"name": "Best Paper", "organization": "ACM", "year": 2021}])
        ['Best Paper - ACM - 2021']
    """
    return normalize_entries(Category.AWARDS, items, AWARD_HANDLERS, shape, context, accepts_strings=True)
