"""Tags produced by the schema classifier."""

from enum import Enum


class Category(str, Enum):
    """List-valued sections of a CV, keyed by their canonical field name."""

    EDUCATION = "education"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    LANGUAGES = "languages"
    CERTIFICATIONS = "certifications"
    AWARDS = "awards"
    PROJECTS = "projects"


class SourceShape(str, Enum):
    """Which producer a category's data came from."""

    CANONICAL = "canonical"
    PROFILE_SHAPE = "profile"
    PARSED_SHAPE = "parsed"
    UNKNOWN = "unknown"


class SkillEncoding(str, Enum):
    """Concrete encoding of a ``skills`` value.

    The three parsed-document encodings all map to SourceShape.PARSED_SHAPE
    but need different handling, so the skills normalizer dispatches on this
    finer tag instead of re-sniffing the value.
    """

    CANONICAL_GROUPS = "canonical_groups"      # [{category, items}]
    PROFILE_GROUPS = "profile_groups"          # [{name, items}]
    CATEGORIZED_OBJECT = "categorized_object"  # {technical_skills, soft_skills}
    STRING_LIST = "string_list"                # ["Go", "SQL"]
    NAMED_OBJECTS = "named_objects"            # [{name, category?}]
    EMPTY = "empty"
    UNKNOWN = "unknown"


SKILL_ENCODING_SHAPES = {
    SkillEncoding.CANONICAL_GROUPS: SourceShape.CANONICAL,
    SkillEncoding.PROFILE_GROUPS: SourceShape.PROFILE_SHAPE,
    SkillEncoding.CATEGORIZED_OBJECT: SourceShape.PARSED_SHAPE,
    SkillEncoding.STRING_LIST: SourceShape.PARSED_SHAPE,
    SkillEncoding.NAMED_OBJECTS: SourceShape.PARSED_SHAPE,
    SkillEncoding.EMPTY: SourceShape.CANONICAL,
    SkillEncoding.UNKNOWN: SourceShape.UNKNOWN,
}
