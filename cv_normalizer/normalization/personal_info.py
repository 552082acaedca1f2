"""Personal information normalizer.

The contact block can live under ``personalInfo`` (canonical and profile
payloads), under ``personal_info`` (parsed documents) or directly at the top
level of the payload. Blocks are merged in that order, first non-empty value
wins per field.
"""

from typing import Any, List, Mapping

from cv_normalizer.domain.models import PersonalInfo
from cv_normalizer.utils.text import clean_text, first_text, optional_text, pick_text

SUMMARY_KEYS = ("summary", "aboutMe", "about_me")


def _sources(data: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    blocks = [data.get("personalInfo"), data.get("personal_info"), data]
    return [block for block in blocks if isinstance(block, Mapping)]


def _full_name(block: Mapping[str, Any]) -> str:
    name = pick_text(block, "fullName", "full_name", "name")
    if name:
        return name
    parts = (clean_text(block.get("firstName")), clean_text(block.get("lastName")))
    return " ".join(part for part in parts if part)


def _pick(sources: List[Mapping[str, Any]], *keys: str) -> str:
    return first_text(*(pick_text(block, *keys) for block in sources))


def normalize_personal_info(data: Any) -> PersonalInfo:
    """Collect the contact block from whichever location the producer used.

    Args:
        data: Whole raw payload (not just the personal info block)

    Returns:
        PersonalInfo; missing mandatory fields are ''

    Example:
        >>> normalize_personal_info({"personal_info": {"name": "Ada", "title": "Engineer"}}).full_name
        'Ada'
    """
    if not isinstance(data, Mapping):
        return PersonalInfo()

    sources = _sources(data)
    return PersonalInfo(
        full_name=first_text(*(_full_name(block) for block in sources)),
        position=_pick(sources, "position", "title", "jobTitle"),
        email=_pick(sources, "email"),
        phone=_pick(sources, "phone", "phoneNumber"),
        location=_pick(sources, "location", "address"),
        summary=_pick(sources, *SUMMARY_KEYS),
        website=optional_text(_pick(sources, "website")),
        linkedin=optional_text(_pick(sources, "linkedin")),
        photo_url=optional_text(_pick(sources, "photoUrl", "avatar")),
        dob=optional_text(_pick(sources, "dob", "dateOfBirth")),
        gender=optional_text(_pick(sources, "gender")),
        nationality=optional_text(_pick(sources, "nationality")),
    )
