"""Fixed eligibility rules run over a submitted rights intake."""
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping

from intakepro.models.results import Recommendation
from intakepro.utils.answer_values import to_number

logger = logging.getLogger(__name__)

INCOME_SUPPORT_THRESHOLD = 5000
CHILDCARE_AGE_LIMIT = 3

Answers = Mapping[str, Any]


@dataclass(frozen=True)
class RecommendationRule:
    id: str
    title: str
    reason: str
    applies: Callable[[Answers], bool]

    def to_recommendation(self) -> Recommendation:
        return Recommendation(id=self.id, title=self.title, reason=self.reason)


def parse_child_ages(value: Any) -> List[int]:
    """Pull every integer out of a free-text ages answer ("2, 5 and 9")"""
    if not isinstance(value, str):
        return []
    return [int(n) for n in re.findall(r'[0-9]+', value)]


def _equals(field: str, *expected: str) -> Callable[[Answers], bool]:
    return lambda answers: answers.get(field) in expected


def _has_young_child(answers: Answers) -> bool:
    return any(age < CHILDCARE_AGE_LIMIT for age in parse_child_ages(answers.get("children_ages")))


def _low_income(answers: Answers) -> bool:
    income = to_number(answers.get("monthly_income_gross"))
    return income is not None and 0 < income < INCOME_SUPPORT_THRESHOLD


# Evaluation order is output order
RIGHTS_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        id="tax_credit_single_parent",
        title="Income tax credit points",
        reason="Household status is Single Parent",
        applies=_equals("household_status", "Single Parent"),
    ),
    RecommendationRule(
        id="childcare_subsidy",
        title="Daycare/childcare subsidy",
        reason="At least one child is under age 3",
        applies=_has_young_child,
    ),
    RecommendationRule(
        id="unemployment_benefits",
        title="Check unemployment benefits",
        reason="Current status is Unemployed",
        applies=_equals("employment_status_now", "Unemployed"),
    ),
    RecommendationRule(
        id="income_support",
        title="Check income support eligibility",
        reason="Monthly gross income is below 5000",
        applies=_low_income,
    ),
    RecommendationRule(
        id="employment_service",
        title="Refer to Employment Service registration",
        reason="Not registered for unemployment/benefits",
        applies=_equals("unemployment_status", "No"),
    ),
    RecommendationRule(
        id="work_injury_comp",
        title="Work injury compensation check",
        reason="Work injury/recognized accident indicated",
        applies=_equals("employment_injury", "Yes"),
    ),
    RecommendationRule(
        id="rent_assistance",
        title="Check rent assistance eligibility",
        reason="Housing status is Renting",
        applies=_equals("housing_status", "Renting"),
    ),
    RecommendationRule(
        id="disability_allowances",
        title="Check disability allowances",
        reason="Health condition indicates disability",
        applies=_equals("health_condition", "Disability", "Recognized Disability"),
    ),
    RecommendationRule(
        id="mental_health_referral",
        title="Refer for mental health support",
        reason="Not receiving mental health support",
        applies=_equals("mental_health_support", "No"),
    ),
    RecommendationRule(
        id="training_programs",
        title="Refer to suitable training programs",
        reason="Expressed interest in professional training",
        applies=_equals("training_interest", "Yes"),
    ),
    RecommendationRule(
        id="debt_counseling",
        title="Refer to debt counseling services",
        reason="Active debts/enforcement cases",
        applies=_equals("debt_status", "Yes"),
    ),
    RecommendationRule(
        id="transport_assistance",
        title="Check for transport assistance / nearby jobs",
        reason="No transport access",
        applies=_equals("transport_access", "None"),
    ),
)


def evaluate_recommendations(answers: Answers) -> List[Recommendation]:
    """Run every rights rule; each rule that applies adds one recommendation"""
    recommendations = [rule.to_recommendation() for rule in RIGHTS_RULES if rule.applies(answers)]
    logger.debug(f"Rights rules fired: {[r.id for r in recommendations]}")
    return recommendations
