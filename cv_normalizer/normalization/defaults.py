"""Fallback literals used when a source entry lacks a mandatory field.

Every normalizer consults this single table instead of hard-coding its own
placeholder strings. The table is a pydantic model so it can be overridden
from the ``fallbacks`` section of the YAML configuration.
"""

from pydantic import BaseModel, Field


class FallbackDefaults(BaseModel):
    """Placeholder values for missing fields in non-canonical sources."""

    school: str = Field("Unknown School", description="Education entry without school/institution")
    degree: str = Field("Bachelor", description="Education entry without a degree")
    position: str = Field("Unknown Position", description="Experience without position/jobTitle/title")
    company: str = Field("Unknown Company", description="Experience without a company")
    language: str = Field("Unknown Language", description="Language entry without a name")
    certificate_name: str = Field("Unknown Certificate", description="Certificate object without a name")
    organization: str = Field(
        "Unknown Organization", description="Certificate without issuer/org"
    )
    award: str = Field("Award", description="Award object with no usable parts")
    project_name: str = Field("Unnamed Project", description="Project without a name")
    skill_category: str = Field("Skills", description="Skill group without a category or name")

    model_config = {"extra": "forbid"}


DEFAULT_FALLBACKS = FallbackDefaults()
