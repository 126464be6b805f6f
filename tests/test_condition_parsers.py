import pytest

from intakepro.models.condition import (
    AlwaysVisible,
    FieldAnyOf,
    FieldEquals,
    KeywordMatch,
    NumericThreshold,
)
from intakepro.rules.parsers import parse_career_rule, parse_emotional_condition

ALIASES = {"unemployed": "current_status"}


def test_numeric_rule_targets_own_field_and_drops_annotation():
    condition = parse_career_rule("confidence_level", "If <4 → Goal: Strengthen confidence", ALIASES)
    assert condition == NumericThreshold(field="confidence_level", op="<", threshold=4.0)


@pytest.mark.parametrize("rule,op,threshold", [
    ("If <=10", "<=", 10.0),
    ("IF >= 2.5 → review", ">=", 2.5),
    ("if ==7", "==", 7.0),
    ("If >5000", ">", 5000.0),
])
def test_numeric_operators(rule, op, threshold):
    assert parse_career_rule("income_level", rule) == NumericThreshold(field="income_level", op=op, threshold=threshold)


def test_keyword_rule_resolves_alias():
    condition = parse_career_rule("benefits_followup", "If unemployed → Check unemployment benefits", ALIASES)
    assert condition == KeywordMatch(field="current_status", keyword="unemployed")


def test_keyword_rule_without_alias_uses_own_field():
    condition = parse_career_rule("schedule", "If Part-Time", ALIASES)
    assert condition == KeywordMatch(field="schedule", keyword="part-time")


@pytest.mark.parametrize("rule", [
    None,
    "",
    "   ",
    "Show when unemployed",
    "unemployed → Check benefits",
    "If >",
    "If 123",
])
def test_unusable_career_rules_are_always_visible(rule):
    assert parse_career_rule("any_field", rule, ALIASES) == AlwaysVisible()


def test_emotional_star_is_always_visible_for_any_field():
    assert parse_emotional_condition("reason=*") == AlwaysVisible()
    assert parse_emotional_condition("has_trauma=*") == AlwaysVisible()


def test_emotional_list_becomes_any_of():
    condition = parse_emotional_condition("reason=Loneliness, Lack of support")
    assert condition == FieldAnyOf(field="reason", values=("Loneliness", "Lack of support"))


def test_emotional_single_value_becomes_equals():
    assert parse_emotional_condition(" has_trauma = yes ") == FieldEquals(field="has_trauma", value="yes")


@pytest.mark.parametrize("condition", [None, "", "has_trauma", "=yes", "reason=", "  =  "])
def test_malformed_emotional_conditions_are_always_visible(condition):
    assert parse_emotional_condition(condition) == AlwaysVisible()
