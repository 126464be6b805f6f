import logging
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple

from intakepro.models.question import AnswerValue, Question
from intakepro.rules.evaluator import evaluate_condition

logger = logging.getLogger(__name__)


class AnswerChange(NamedTuple):
    """Result of applying one field update"""
    answers: Dict[str, AnswerValue]
    visible_questions: List[Question]


def should_show_question(question: Question, answers: Mapping[str, Any]) -> bool:
    return evaluate_condition(question.condition, answers)


def visible_questions(registry: Iterable[Question], answers: Mapping[str, Any]) -> List[Question]:
    """Questions whose conditions hold for `answers`, in registry order"""
    return [q for q in registry if should_show_question(q, answers)]


def _copy_value(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    return value


def apply_change(registry: Iterable[Question],
                 current_answers: Mapping[str, Any],
                 field_name: str,
                 new_value: AnswerValue) -> AnswerChange:
    """Set one answer and recompute visibility.

    `current_answers` is left untouched; the returned answers are a fresh
    dict. The value is stored as given, without checking it against the
    question's input kind.
    """
    updated = {key: _copy_value(value) for key, value in current_answers.items()}
    updated[field_name] = _copy_value(new_value)
    visible = visible_questions(registry, updated)
    logger.debug(f"Set {field_name}; {len(visible)} questions visible")
    return AnswerChange(answers=updated, visible_questions=visible)
