"""Data models for aggregation results."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from cv_normalizer.classification import Category, SkillEncoding, SourceShape
from cv_normalizer.domain.models import CanonicalProfile


@dataclass
class NormalizationResult:
    """
    Canonical profile plus what was observed while producing it.

    Attributes:
        profile: The normalized CV
        normalization_id: Id attached to every log record of the run
        shapes: Source shape detected per category present in the input
        skill_encoding: Encoding of the ``skills`` value, if there was one
        defaulted_dates: Certificates whose date was replaced by today's date
        input_accepted: False when the input was not a mapping at all
    """

    profile: CanonicalProfile
    normalization_id: str = ""
    shapes: Dict[Category, SourceShape] = field(default_factory=dict)
    skill_encoding: Optional[SkillEncoding] = None
    defaulted_dates: int = 0
    input_accepted: bool = True

    @property
    def was_canonical(self) -> bool:
        """Whether every category present in the input was already canonical."""
        return self.input_accepted and all(
            shape is SourceShape.CANONICAL for shape in self.shapes.values()
        )
