"""Pre-save summary of a normalized CV."""

from .builder import has_content, summarize
from .models import SummarySection

__all__ = ["summarize", "has_content", "SummarySection"]
