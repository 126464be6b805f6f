import pytest

from intakepro.models.condition import (
    AlwaysVisible,
    FieldAnyOf,
    FieldEquals,
    KeywordMatch,
    NumericThreshold,
)
from intakepro.rules.evaluator import evaluate_condition
from intakepro.rules.parsers import parse_career_rule, parse_emotional_condition

ANSWER_SETS = [
    {},
    {"reason": ["Anxiety"]},
    {"has_trauma": "no", "confidence_level": "abc"},
    {"current_status": None, "income_level": ""},
]


def test_always_visible():
    assert evaluate_condition(AlwaysVisible(), {}) is True


@pytest.mark.parametrize("value,visible", [
    ("3", True),
    (3, True),
    ("5", False),
    (4.0, False),
    ("4", False),
])
def test_numeric_threshold_against_own_answer(value, visible):
    condition = NumericThreshold(field="confidence_level", op="<", threshold=4)
    assert evaluate_condition(condition, {"confidence_level": value}) is visible


@pytest.mark.parametrize("answers", [
    {},
    {"confidence_level": None},
    {"confidence_level": ""},
    {"confidence_level": "a few"},
    {"confidence_level": ["3"]},
    {"confidence_level": True},
    {"confidence_level": float("nan")},
])
def test_numeric_threshold_fails_open_on_missing_or_non_numeric(answers):
    condition = NumericThreshold(field="confidence_level", op=">", threshold=100)
    assert evaluate_condition(condition, answers) is True


def test_numeric_equality():
    condition = NumericThreshold(field="weekly_capacity_hours", op="==", threshold=20)
    assert evaluate_condition(condition, {"weekly_capacity_hours": "20.0"}) is True
    assert evaluate_condition(condition, {"weekly_capacity_hours": 21}) is False


def test_keyword_match_is_case_insensitive():
    condition = KeywordMatch(field="current_status", keyword="unemployed")
    assert evaluate_condition(condition, {"current_status": "Unemployed"}) is True
    assert evaluate_condition(condition, {"current_status": "Full-Time"}) is False
    assert evaluate_condition(condition, {}) is False


def test_keyword_match_uses_substring_containment():
    # Pins current behaviour: "employed" also matches "unemployed"
    employed = KeywordMatch(field="current_status", keyword="employed")
    assert evaluate_condition(employed, {"current_status": "Unemployed"}) is True

    unemployed = KeywordMatch(field="current_status", keyword="unemployed")
    assert evaluate_condition(unemployed, {"current_status": "formerly unemployed"}) is True


def test_keyword_match_over_list_answer():
    condition = KeywordMatch(field="schedule", keyword="evening")
    assert evaluate_condition(condition, {"schedule": ["Morning", "Evening"]}) is True


def test_any_of_scenario():
    condition = parse_emotional_condition("reason=Loneliness,Lack of support")
    assert evaluate_condition(condition, {"reason": ["Anxiety"]}) is False
    assert evaluate_condition(condition, {"reason": ["Lack of support"]}) is True
    assert evaluate_condition(condition, {"reason": "Loneliness"}) is True
    assert evaluate_condition(condition, {}) is False


def test_equals_against_unanswered_field_is_hidden():
    condition = parse_emotional_condition("has_trauma=yes")
    assert evaluate_condition(condition, {}) is False
    assert evaluate_condition(condition, {"has_trauma": None}) is False


def test_equals_scalar_and_list():
    condition = FieldEquals(field="has_trauma", value="yes")
    assert evaluate_condition(condition, {"has_trauma": "yes"}) is True
    assert evaluate_condition(condition, {"has_trauma": "Yes"}) is False
    assert evaluate_condition(condition, {"has_trauma": ["no", "yes"]}) is True

    numeric = FieldEquals(field="anxiety_level", value="5")
    assert evaluate_condition(numeric, {"anxiety_level": 5}) is True
    assert evaluate_condition(numeric, {"anxiety_level": 5.0}) is True


def test_any_of_with_empty_list_answer():
    condition = FieldAnyOf(field="reason", values=("a", "b"))
    assert evaluate_condition(condition, {"reason": []}) is False


@pytest.mark.parametrize("rule", ["Show if unemployed", "If >", "whenever", ""])
def test_unparseable_career_rules_never_hide(rule):
    condition = parse_career_rule("current_status", rule, {"unemployed": "current_status"})
    assert all(evaluate_condition(condition, answers) for answers in ANSWER_SETS)


@pytest.mark.parametrize("raw", ["has_trauma", "=yes", "reason=", "reason=*"])
def test_unparseable_emotional_conditions_never_hide(raw):
    condition = parse_emotional_condition(raw)
    assert all(evaluate_condition(condition, answers) for answers in ANSWER_SETS)


def test_non_ascii_digits_are_not_numbers():
    # "٥" (Arabic-Indic five) is not a number to the web client, so the rule cannot hide
    condition = parse_career_rule("confidence_gate", "If <4")
    assert evaluate_condition(condition, {"confidence_gate": "٥"}) is True
    assert parse_career_rule("confidence_gate", "If <٤") == AlwaysVisible()
