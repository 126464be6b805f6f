import copy

from intakepro.models.question import InputKind
from intakepro.registries.career import CAREER_REGISTRY, build_career_registry
from intakepro.registries.emotional import EMOTIONAL_REGISTRY
from intakepro.registries.rights import RIGHTS_REGISTRY
from intakepro.engine.visibility import apply_change, visible_questions

GATED_BY_REASON = {
    "anxiety_context", "anxiety_coping", "depression_days", "depression_difficulty",
    "trauma_effect", "trauma_trigger", "regulation_context", "self_criticism_thoughts",
    "loneliness_contact", "loneliness_support_level", "burnout_context", "burnout_recovery",
    "crisis_feeling",
}


def _names(questions):
    return [q.field_name for q in questions]


def test_rights_and_career_questions_always_shown():
    assert _names(visible_questions(RIGHTS_REGISTRY, {})) == RIGHTS_REGISTRY.field_names()
    assert _names(visible_questions(CAREER_REGISTRY, {"current_status": "משרה מלאה"})) == CAREER_REGISTRY.field_names()


def test_emotional_conditional_questions_hidden_without_answers():
    visible = _names(visible_questions(EMOTIONAL_REGISTRY, {}))

    assert len(visible) == len(EMOTIONAL_REGISTRY) - len(GATED_BY_REASON) - 1
    assert "trauma_description" not in visible
    assert not GATED_BY_REASON & set(visible)
    # reason=* shows regardless of the reason answer
    assert "help_needed" in visible


def test_reason_answer_reveals_matching_questions_in_registry_order():
    visible = _names(visible_questions(EMOTIONAL_REGISTRY, {"reason": ["חרדה", "בדידות"]}))

    revealed = [name for name in visible if name in GATED_BY_REASON]
    assert revealed == ["anxiety_context", "anxiety_coping", "loneliness_contact", "loneliness_support_level"]
    assert visible == [name for name in EMOTIONAL_REGISTRY.field_names() if name in visible]


def test_trauma_description_follows_has_trauma():
    assert "trauma_description" in _names(visible_questions(EMOTIONAL_REGISTRY, {"has_trauma": "כן"}))
    assert "trauma_description" not in _names(visible_questions(EMOTIONAL_REGISTRY, {"has_trauma": "לא"}))


def test_visible_questions_is_deterministic():
    answers = {"reason": ["שחיקה"], "has_trauma": "כן"}
    assert visible_questions(EMOTIONAL_REGISTRY, answers) == visible_questions(EMOTIONAL_REGISTRY, answers)


def test_numeric_gated_dependent_question():
    registry = build_career_registry([
        {"group": "barriers", "field_name": "confidence_level", "label": "Confidence", "kind": InputKind.SCALE},
        {"group": "barriers", "field_name": "confidence_gate", "label": "Gate", "kind": InputKind.TEXT,
         "rule": "If <4 → Goal: Strengthen confidence"},
    ])

    assert _names(visible_questions(registry, {"confidence_gate": "5"})) == ["confidence_level"]
    assert _names(visible_questions(registry, {"confidence_gate": "3"})) == ["confidence_level", "confidence_gate"]
    assert _names(visible_questions(registry, {})) == ["confidence_level", "confidence_gate"]


def test_keyword_gated_question_uses_alias():
    registry = build_career_registry([
        {"group": "rights", "field_name": "current_status", "label": "Status", "kind": InputKind.SELECT},
        {"group": "rights", "field_name": "benefits_followup", "label": "Benefits", "kind": InputKind.TEXT,
         "rule": "If unemployed → Check unemployment benefits"},
    ])

    assert "benefits_followup" in _names(visible_questions(registry, {"current_status": "Unemployed"}))
    assert "benefits_followup" not in _names(visible_questions(registry, {"current_status": "Full-Time"}))
    assert "benefits_followup" not in _names(visible_questions(registry, {}))


def test_apply_change_does_not_mutate_input():
    current = {"reason": ["חרדה"], "anxiety_level": "3"}
    snapshot = copy.deepcopy(current)

    answers, visible = apply_change(EMOTIONAL_REGISTRY, current, "reason", ["דיכאון"])

    assert current == snapshot
    assert answers == {"reason": ["דיכאון"], "anxiety_level": "3"}
    assert answers is not current
    assert "depression_days" in _names(visible)
    assert "anxiety_context" not in _names(visible)


def test_apply_change_does_not_share_list_values():
    new_value = ["חרדה"]
    result = apply_change(EMOTIONAL_REGISTRY, {}, "reason", new_value)
    new_value.append("דיכאון")
    assert result.answers["reason"] == ["חרדה"]


def test_apply_change_is_idempotent():
    first = apply_change(EMOTIONAL_REGISTRY, {"has_trauma": "לא"}, "has_trauma", "כן")
    second = apply_change(EMOTIONAL_REGISTRY, first.answers, "has_trauma", "כן")

    assert second.answers == first.answers
    assert second.visible_questions == first.visible_questions


def test_apply_change_visibility_tracks_latest_value():
    step = apply_change(EMOTIONAL_REGISTRY, {}, "reason", ["בדידות"])
    assert "loneliness_contact" in _names(step.visible_questions)

    step = apply_change(EMOTIONAL_REGISTRY, step.answers, "reason", ["חרדה"])
    assert "loneliness_contact" not in _names(step.visible_questions)
    assert step.visible_questions == visible_questions(EMOTIONAL_REGISTRY, {"reason": ["חרדה"]})


def test_apply_change_accepts_values_of_any_kind():
    result = apply_change(RIGHTS_REGISTRY, {}, "children_count", "not a number")
    assert result.answers == {"children_count": "not a number"}
    assert len(result.visible_questions) == len(RIGHTS_REGISTRY)
