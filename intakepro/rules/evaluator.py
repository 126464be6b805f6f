import logging
from typing import Any, Mapping

from intakepro.models.condition import (
    AlwaysVisible,
    Condition,
    FieldAnyOf,
    FieldEquals,
    KeywordMatch,
    NumericThreshold,
)
from intakepro.utils.answer_values import is_multi, stringify, to_list, to_number

logger = logging.getLogger(__name__)

_COMPARATORS = {
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
    "==": lambda a, b: a == b,
}


def evaluate_condition(condition: Condition, answers: Mapping[str, Any]) -> bool:
    """Decide whether a question with `condition` is visible.

    Never raises. Missing answers are read as empty; numeric tests on
    missing or non-numeric answers leave the question visible.
    """
    if isinstance(condition, AlwaysVisible):
        return True

    if isinstance(condition, NumericThreshold):
        value = to_number(answers.get(condition.field))
        if value is None:
            return True
        compare = _COMPARATORS.get(condition.op)
        if compare is None:
            return True
        return compare(value, condition.threshold)

    if isinstance(condition, KeywordMatch):
        answer = stringify(answers.get(condition.field)).lower()
        return condition.keyword in answer

    if isinstance(condition, FieldAnyOf):
        answered = to_list(answers.get(condition.field))
        return any(value in answered for value in condition.values)

    if isinstance(condition, FieldEquals):
        answer = answers.get(condition.field)
        if answer is None:
            return False
        if is_multi(answer):
            return condition.value in to_list(answer)
        return stringify(answer) == condition.value

    logger.debug(f"Unknown condition type {type(condition).__name__}, treating as visible")
    return True
