"""Normalize CV payloads from the profile editor, the document parser or
earlier saves into one canonical profile.

Example:
    >>> from cv_normalizer import normalize, summarize
    >>> profile = normalize({"skills": {"technical_skills": ["Go"], "soft_skills": ["Teamwork"]}})
    >>> [(s.category, s.items) for s in summarize(profile)]
    [('Technical Skills', ['Go']), ('Soft Skills', ['Teamwork'])]
"""

from .aggregation import NormalizationResult, ProfileNormalizer, normalize
from .config import ConfigurationError, NormalizerConfig, load_config
from .domain import CanonicalProfile
from .summary import SummarySection, has_content, summarize

__version__ = "0.1.0"

__all__ = [
    "normalize",
    "summarize",
    "has_content",
    "ProfileNormalizer",
    "NormalizationResult",
    "CanonicalProfile",
    "SummarySection",
    "NormalizerConfig",
    "load_config",
    "ConfigurationError",
]
