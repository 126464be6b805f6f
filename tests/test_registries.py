from types import MappingProxyType

import pytest

from intakepro.models.condition import FieldAnyOf, FieldEquals
from intakepro.models.question import Domain, InputKind, Question
from intakepro.registries.base import QuestionRegistry
from intakepro.registries.career import CAREER_ALIASES, CAREER_REGISTRY
from intakepro.registries.catalog import get_registry
from intakepro.registries.emotional import EMOTIONAL_REGISTRY
from intakepro.registries.rights import RIGHTS_REGISTRY


def test_registry_sizes():
    assert len(RIGHTS_REGISTRY) == 17
    assert len(CAREER_REGISTRY) == 29
    assert len(EMOTIONAL_REGISTRY) == 34


def test_rights_questions_have_no_visibility_conditions():
    assert not any(q.is_conditional for q in RIGHTS_REGISTRY)
    assert RIGHTS_REGISTRY.get("housing_status").rule_text.startswith("If Renting")


def test_emotional_conditions_are_parsed_at_load():
    assert EMOTIONAL_REGISTRY.get("trauma_description").condition == FieldEquals(field="has_trauma", value="כן")
    assert EMOTIONAL_REGISTRY.get("burnout_context").condition == FieldAnyOf(field="reason", values=("שחיקה", "עייפות"))
    assert EMOTIONAL_REGISTRY.get("reason").input_kind == InputKind.MULTISELECT


def test_label_keys_default_per_domain():
    assert CAREER_REGISTRY.get("energizers").label_key == "intakeProfessional.questions.energizers"
    assert EMOTIONAL_REGISTRY.get("reason").label_key == "intakeEmotional.questions.reason"
    assert RIGHTS_REGISTRY.get("debt_status").label_key == "intakeRights.questions.debt_status"


def test_career_registry_carries_aliases():
    assert dict(CAREER_REGISTRY.aliases) == dict(CAREER_ALIASES)
    assert CAREER_REGISTRY.sections()[:3] == ["meta", "via", "values"]


def test_questions_are_immutable():
    question = RIGHTS_REGISTRY.get("id_number")
    with pytest.raises(Exception):
        question.label = "changed"


def test_duplicate_field_names_rejected():
    question = Question(domain=Domain.RIGHTS, section="s", field_name="dup", label="a", input_kind=InputKind.TEXT)
    with pytest.raises(ValueError):
        QuestionRegistry(Domain.RIGHTS, [question, question])


def test_get_registry_by_name():
    assert get_registry("career") is CAREER_REGISTRY
    assert get_registry(Domain.EMOTIONAL) is EMOTIONAL_REGISTRY
    assert "reason" in get_registry("emotional")
    with pytest.raises(ValueError):
        get_registry("medical")


def test_registry_aliases_and_domain_are_read_only():
    with pytest.raises(TypeError):
        CAREER_REGISTRY.aliases["employed"] = "current_status"
    with pytest.raises(TypeError):
        CAREER_ALIASES["employed"] = "current_status"
    with pytest.raises(AttributeError):
        CAREER_REGISTRY.domain = Domain.RIGHTS
    assert CAREER_REGISTRY.domain == Domain.CAREER


def test_registry_copies_caller_aliases():
    aliases = {"unemployed": "current_status"}
    registry = QuestionRegistry(Domain.CAREER, [], aliases=aliases)
    aliases["retired"] = "current_status"
    assert dict(registry.aliases) == {"unemployed": "current_status"}
    assert isinstance(registry.aliases, MappingProxyType)


def test_default_question_tables_are_tuples():
    from intakepro.registries.career import CAREER_QUESTIONS, build_career_registry
    from intakepro.registries.emotional import EMOTIONAL_QUESTIONS, build_emotional_registry

    assert isinstance(CAREER_QUESTIONS, tuple)
    assert isinstance(EMOTIONAL_QUESTIONS, tuple)
    assert build_career_registry().field_names() == CAREER_REGISTRY.field_names()
    assert build_emotional_registry().field_names() == EMOTIONAL_REGISTRY.field_names()
