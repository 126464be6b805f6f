"""Intake completion scoring for case-progress dashboards.

A case record is the flat merge of the person's identity and contact
fields, the free-text summary fields and the three domain answer sets
(see `merge_case_record`). Each viewpoint scores a subset of `INTAKE_SECTIONS`;
the overall percentage is weighted by field, not by section.
"""
import logging
import math
from typing import Any, Dict, Mapping, Optional, Union

from intakepro.models.question import Viewpoint
from intakepro.models.results import CompletionResult, Section, SectionProgress
from intakepro.registries.career import CAREER_REGISTRY
from intakepro.registries.emotional import EMOTIONAL_REGISTRY
from intakepro.registries.rights import RIGHTS_REGISTRY
from intakepro.utils.answer_values import get_path, is_completed

logger = logging.getLogger(__name__)

ALL_VIEWPOINTS = frozenset(Viewpoint)

INTAKE_SECTIONS: tuple[Section, ...] = (
    Section(
        name="personal_info",
        label_he="מידע אישי",
        fields=("firstName", "lastName", "dateOfBirth", "governmentId", "gender", "maritalStatus", "education"),
        required=True,
        applicable_viewpoints=ALL_VIEWPOINTS,
    ),
    Section(
        name="contact_info",
        label_he="פרטי התקשרות",
        fields=("email", "phone", "address"),
        required=True,
        applicable_viewpoints=ALL_VIEWPOINTS,
    ),
    Section(
        name="social_work",
        label_he="עבודה סוציאלית",
        fields=tuple(RIGHTS_REGISTRY.field_names()),
        required=False,
        applicable_viewpoints=frozenset({Viewpoint.SOCIAL_WORKER}),
    ),
    Section(
        name="career_guidance",
        label_he="הכוונה מקצועית",
        fields=tuple(CAREER_REGISTRY.field_names()),
        required=False,
        applicable_viewpoints=frozenset({Viewpoint.CAREER_COUNSELOR}),
    ),
    Section(
        name="emotional_therapy",
        label_he="טיפול רגשי",
        fields=tuple(EMOTIONAL_REGISTRY.field_names()),
        required=False,
        applicable_viewpoints=frozenset({Viewpoint.EMOTIONAL_THERAPIST}),
    ),
    Section(
        name="general_intake",
        label_he="סיכום מקיף על התהליך",
        fields=("strengths", "obstacles", "notes"),
        required=False,
        applicable_viewpoints=ALL_VIEWPOINTS,
    ),
)

# Status bands, highest first: (minimum percentage, English, Hebrew)
STATUS_BANDS = (
    (90, "Complete", "הושלם"),
    (70, "Nearly Complete", "כמעט הושלם"),
    (50, "In Progress", "בתהליך"),
    (0, "Started", "התחיל"),
)


def round_percentage(completed: int, total: int) -> int:
    """Half-up rounded percentage; 0 when there is nothing to complete"""
    if total <= 0:
        return 0
    return int(math.floor((completed / total) * 100 + 0.5))


def _as_viewpoint(viewpoint: Union[Viewpoint, str]) -> Viewpoint:
    try:
        return Viewpoint(viewpoint)
    except ValueError:
        raise ValueError(f"Unknown viewpoint: {viewpoint!r}") from None


def completion(record: Mapping[str, Any],
               viewpoint: Union[Viewpoint, str],
               sections: tuple[Section, ...] = INTAKE_SECTIONS) -> CompletionResult:
    """Score how much of `record` is filled in for `viewpoint`.

    Raises ValueError for a viewpoint outside `Viewpoint`.
    """
    viewpoint = _as_viewpoint(viewpoint)
    relevant = [s for s in sections if viewpoint in s.applicable_viewpoints]

    per_section: Dict[str, SectionProgress] = {}
    total_fields = 0
    completed_fields = 0
    required_complete = True

    for section in relevant:
        section_total = len(section.fields)
        section_completed = sum(1 for field in section.fields if is_completed(get_path(record, field)))
        percentage = round_percentage(section_completed, section_total)

        per_section[section.name] = SectionProgress(
            completed_count=section_completed,
            total_count=section_total,
            percentage=percentage,
            required=section.required,
        )
        total_fields += section_total
        completed_fields += section_completed

        if section.required and percentage < 100:
            required_complete = False

    result = CompletionResult(
        overall_percentage=round_percentage(completed_fields, total_fields),
        per_section=per_section,
        all_required_sections_complete=required_complete,
        total_fields=total_fields,
        completed_fields=completed_fields,
    )
    logger.debug(f"Completion for {viewpoint.value}: {result.overall_percentage}% "
                 f"({completed_fields}/{total_fields})")
    return result


def completion_for_all_viewpoints(record: Mapping[str, Any]) -> Dict[Viewpoint, CompletionResult]:
    return {viewpoint: completion(record, viewpoint) for viewpoint in Viewpoint}


def viewpoint_from_role(role: Optional[str]) -> Viewpoint:
    """Map a staff role to its viewpoint; any other role sees the general view"""
    try:
        return Viewpoint(role)
    except ValueError:
        return Viewpoint.GENERAL


def completion_status(percentage: int, language: str = "en") -> str:
    """Status label for a completion percentage"""
    for minimum, english, hebrew in STATUS_BANDS:
        if percentage >= minimum:
            return hebrew if language == "he" else english
    return STATUS_BANDS[-1][2] if language == "he" else STATUS_BANDS[-1][1]


def merge_case_record(pii: Optional[Mapping[str, Any]] = None,
                      rights: Optional[Mapping[str, Any]] = None,
                      career: Optional[Mapping[str, Any]] = None,
                      emotional: Optional[Mapping[str, Any]] = None,
                      summary: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Flatten identity, answer sets and summary fields into one record.

    Later arguments win when two sources share a key.
    """
    record: Dict[str, Any] = {}
    for source in (pii, rights, career, emotional, summary):
        if source:
            record.update(source)
    return record
