"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from cv_normalizer.normalization.defaults import FallbackDefaults


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SkillsConfig(BaseModel):
    """Skill normalization settings."""

    model_config = {"extra": "forbid"}

    technical_default_years: Optional[int] = Field(
        1, ge=0, le=60, description="yearsOfExperience for technical skills without one"
    )
    technical_category_label: str = Field(
        "Technical Skills", description="Display label for generated technical groups"
    )
    soft_category_label: str = Field(
        "Soft Skills", description="Display label for generated soft-skill groups"
    )

    @field_validator("technical_category_label", "soft_category_label")
    @classmethod
    def strip_label(cls, v: str) -> str:
        """Strip whitespace from category labels."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Category label cannot be empty or whitespace-only")
        return stripped

    @model_validator(mode="after")
    def validate_distinct_labels(self):
        """Technical and soft groups must not share a label."""
        if self.technical_category_label.casefold() == self.soft_category_label.casefold():
            raise ValueError(
                "technical_category_label and soft_category_label must differ, "
                f"both are '{self.soft_category_label}'"
            )
        return self


class SummaryConfig(BaseModel):
    """Pre-save summary (confirmation preview) settings."""

    model_config = {"extra": "forbid"}

    text_preview_length: int = Field(
        100, ge=10, le=1000, description="Characters of long text kept before the ellipsis"
    )
    skill_preview_limit: int = Field(
        5, ge=1, le=50, description="Maximum skills listed per skill section"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True, "extra": "forbid"}


class NormalizerConfig(BaseModel):
    """Root configuration object for the CV normalizer.

    Every section has defaults, so ``NormalizerConfig()`` is a complete,
    valid configuration.
    """

    fallbacks: FallbackDefaults = Field(
        default_factory=FallbackDefaults, description="Placeholder values for missing fields"
    )
    skills: SkillsConfig = Field(default_factory=SkillsConfig, description="Skill settings")
    summary: SummaryConfig = Field(
        default_factory=SummaryConfig, description="Summary preview settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
