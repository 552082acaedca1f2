"""Data models for the pre-save summary."""

from typing import List

from pydantic import BaseModel, Field


class SummarySection(BaseModel):
    """One line group of the confirmation preview.

    ``count`` is always the full number of entries in the section, even
    when ``items`` is a capped preview.
    """

    category: str = Field(..., description="Display name of the section")
    count: int = Field(..., ge=0, description="Number of entries in the section")
    items: List[str] = Field(default_factory=list, description="Preview lines")
