from datetime import datetime, timezone
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from intakepro.models.question import AnswerValue, Viewpoint


class Recommendation(BaseModel):
    """An eligibility suggestion produced from the rights answers"""
    id: str = Field(description="Stable identifier, unique per rule")
    title: str = Field(description="Suggested next step")
    reason: str = Field(description="Why the rule fired")


class Section(BaseModel):
    """A named group of fields scored together for completion"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Section key")
    label_he: str = Field(default="", description="Hebrew display title")
    required: bool = Field(description="Whether the section must be fully answered")
    applicable_viewpoints: frozenset[Viewpoint] = Field(description="Viewpoints that score this section")
    fields: tuple[str, ...] = Field(description="Field names (dot paths allowed) in display order")


class SectionProgress(BaseModel):
    completed_count: int = Field(ge=0)
    total_count: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
    required: bool


class CompletionResult(BaseModel):
    """Completion of a case record as seen from one viewpoint"""
    overall_percentage: int = Field(ge=0, le=100)
    per_section: Dict[str, SectionProgress] = Field(default_factory=dict)
    all_required_sections_complete: bool
    total_fields: int = Field(ge=0)
    completed_fields: int = Field(ge=0)


class IntakeDocument(BaseModel):
    """Stored form of one domain intake for one case"""
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)
    completed: bool = False
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    recommendations: List[Recommendation] = Field(default_factory=list)
