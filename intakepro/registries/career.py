"""Career guidance intake.

Questions may carry a free-text rule (``"If <5000 → ..."``,
``"If unemployed → ..."``) that is parsed into a visibility condition when
the registry is built. Rule keywords that test another question's answer
are resolved through `CAREER_ALIASES`.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from intakepro.models.question import Domain, InputKind, Question
from intakepro.registries.base import QuestionRegistry
from intakepro.rules.parsers import parse_career_rule

CAREER_ALIASES: Mapping[str, str] = MappingProxyType({
    "unemployed": "current_status",
})

_SCALE_0_10 = tuple(str(n) for n in range(11))

CAREER_QUESTIONS: tuple[dict, ...] = (
    {"group": "meta", "field_name": "employment_goal", "label": "מטרת תעסוקה עיקרית", "kind": InputKind.SELECT,
     "options": ("עבודה ראשונה", "הסבת קריירה", "אחרי לידה", "חזרה לעבודה", "תמיכה אחרי פגיעה",
                 "הכשרה מקצועית מותאמת", "שימור תעסוקה", "ניהול שגרה תחת מגבלות"),
     "related_model": "goals"},
    {"group": "meta", "field_name": "secondary_goals", "label": "מטרות משניות (בחירה מרובה)", "kind": InputKind.MULTISELECT,
     "options": ("הבהרת כיוון", "הגדלת היקף משרה", "שדרוג שכר", "שינוי סביבת עבודה", "גמישות תעסוקתית",
                 "ארגון משפחה/עבודה"),
     "related_model": "goals"},
    {"group": "meta", "field_name": "time_horizon", "label": "אופק זמן מועדף", "kind": InputKind.SELECT,
     "options": ("חודשיים", "3–6 חודשים", "6–12 חודשים", "מעל שנה"),
     "related_model": "planning"},

    {"group": "via", "field_name": "strengths_top5", "label": "חוזקות אישיות מובילות (עד 5)", "kind": InputKind.MULTISELECT,
     "options": ("חמלה", "יצירתיות", "סקרנות", "למידה", "התמדה", "תושייה", "הומור", "תקווה", "אהבה", "יושרה",
                 "פרספקטיבה", "הכרת הטוב", "אומץ", "משמעת עצמית", "צדק", "מנהיגות", "נדיבות", "ענווה"),
     "related_model": "models_via"},
    {"group": "via", "field_name": "strengths_contexts", "label": "הקשרים בהם החוזקות מיושמות", "kind": InputKind.TEXTAREA,
     "related_model": "models_via"},

    {"group": "values", "field_name": "core_values", "label": "ערכים חשובים היום (עד 5)", "kind": InputKind.MULTISELECT,
     "options": ("משמעות", "חופש", "איזון", "למידה", "ביטחון", "ביטוי עצמי", "שייכות", "יציבות", "השפעה",
                 "יצירתיות", "שקט", "צמיחה", "משפחה", "קהילה"),
     "related_model": "models_act"},
    {"group": "values", "field_name": "non_negotiables", "label": "דברים שאי אפשר להתפשר עליהם בעבודה", "kind": InputKind.TEXTAREA,
     "related_model": "models_act"},

    {"group": "schein", "field_name": "career_anchors", "label": "עוגני קריירה (עד 3)", "kind": InputKind.MULTISELECT,
     "options": ("מומחיות", "ניהול", "אוטונומיה", "ביטחון/יציבות", "יזמות", "משימה/שירות", "אתגר", "איזון עבודה-חיים"),
     "related_model": "models_schein"},
    {"group": "schein", "field_name": "anchor_examples", "label": "דוגמאות לעוגנים", "kind": InputKind.TEXTAREA,
     "related_model": "models_schein"},

    {"group": "holland", "field_name": "riasec_types", "label": "תחומי עניין מקצועיים (בחר את כל הרלוונטיים)", "kind": InputKind.MULTISELECT,
     "options": ("מעשי (R)", "חוקר (I)", "אמנותי (A)", "חברתי (S)", "יוזם (E)", "קונבנציונלי (C)"),
     "related_model": "models_holland"},
    {"group": "holland", "field_name": "riasec_examples", "label": "דוגמאות לסביבות/משימות עבודה", "kind": InputKind.TEXTAREA,
     "related_model": "models_holland"},

    {"group": "energy", "field_name": "energizers", "label": "מה נותן לך אנרגיה ביום-יום?", "kind": InputKind.TEXTAREA,
     "related_model": "integration"},
    {"group": "energy", "field_name": "drainers", "label": "מה מרוקן לך את האנרגיה?", "kind": InputKind.TEXTAREA,
     "related_model": "integration"},

    {"group": "prefs", "field_name": "work_style", "label": "סגנון עבודה מועדף", "kind": InputKind.MULTISELECT,
     "options": ("עצמאי/ת", "עבודת צוות", "היברידי", "עם אנשים", "עם נתונים", "עבודה מעשית", "אופן ספייס", "משרד שקט"),
     "related_model": "preferences"},
    {"group": "prefs", "field_name": "schedule", "label": "שעות זמינות/היקף תעסוקה", "kind": InputKind.MULTISELECT,
     "options": ("בוקר", "צוהריים", "ערב", "משמרות", "משרה חלקית", "משרה מלאה", "גמיש"),
     "related_model": "preferences"},
    {"group": "prefs", "field_name": "location_range", "label": "טווח גיאוגרפי ותחבורה", "kind": InputKind.TEXT,
     "related_model": "preferences"},
    {"group": "prefs", "field_name": "salary_expectation", "label": "ציפיות שכר (חודשי/שעתי)", "kind": InputKind.TEXT,
     "related_model": "preferences"},
    {"group": "prefs", "field_name": "accommodations", "label": "התאמות נדרשות (פיזיות/נפשיות)", "kind": InputKind.TEXTAREA,
     "related_model": "preferences"},

    {"group": "tracks", "field_name": "situation_track", "label": "בחר מסלול/ים רלוונטיים", "kind": InputKind.MULTISELECT,
     "options": ("עבודה ראשונה", "הסבת קריירה", "אחרי לידה", "חזרה לעבודה", "אחרי פגיעה", "הכשרה מקצועית",
                 "שימור תעסוקה", "שגרת עבודה תחת מגבלות"),
     "related_model": "goals"},
    {"group": "tracks", "field_name": "field_interest", "label": "תחומי עניין/תעשיות", "kind": InputKind.MULTISELECT,
     "options": ("חינוך/הכשרה", "טיפול ורווחה", "מינהל/שירות לקוחות", "כספים/חשבונאות", "שיווק/תוכן",
                 "עיצוב/מדיה", "טכנולוגיה", "לוגיסטיקה/תפעול", "בריאות", "מקצועות יד"),
     "related_model": "matching"},
    {"group": "tracks", "field_name": "training_needs", "label": "ידע או הכשרה חסרים", "kind": InputKind.TEXTAREA,
     "related_model": "training"},

    {"group": "barriers", "field_name": "confidence_level", "label": "ביטחון עצמי תעסוקתי (0-10)", "kind": InputKind.SCALE,
     "options": _SCALE_0_10, "related_model": "emotional"},
    {"group": "barriers", "field_name": "avoidance_patterns", "label": "ממה אתה נמנע בחיפוש עבודה?", "kind": InputKind.TEXTAREA,
     "related_model": "emotional"},
    {"group": "barriers", "field_name": "fear_statements", "label": "חששות או מחשבות מעכבות", "kind": InputKind.TEXTAREA,
     "related_model": "emotional"},

    {"group": "action", "field_name": "weekly_capacity_hours", "label": "כמה שעות בשבוע אתה זמין לעבודה?", "kind": InputKind.NUMBER,
     "related_model": "planning"},
    {"group": "action", "field_name": "network_assets", "label": "קשרים מקצועיים וחברתיים", "kind": InputKind.TEXTAREA,
     "related_model": "action"},
    {"group": "action", "field_name": "next_2_weeks_actions", "label": "פעולות קונקרטיות לשבועיים הקרובים", "kind": InputKind.TEXTAREA,
     "related_model": "action"},

    {"group": "rights", "field_name": "current_status", "label": "מצב תעסוקתי נוכחי", "kind": InputKind.SELECT,
     "options": ("מחוסר עבודה", "מחפש/ת עבודה", "בהכשרה", "משרה חלקית", "משרה מלאה", "עצמאי/ת"),
     "related_model": "rights_link"},
    {"group": "rights", "field_name": "income_level", "label": "רמת הכנסה נוכחית (חודשי)", "kind": InputKind.NUMBER,
     "related_model": "rights_link"},
)


def build_career_question(row: Mapping, aliases: Mapping[str, str] = CAREER_ALIASES) -> Question:
    field_name = row["field_name"]
    rule = row.get("rule") or None
    return Question(
        domain=Domain.CAREER,
        section=row["group"],
        field_name=field_name,
        label=row["label"],
        input_kind=row["kind"],
        options=row.get("options", ()),
        condition=parse_career_rule(field_name, rule, aliases),
        rule_text=rule,
        description=row.get("description"),
        related_model=row.get("related_model"),
        label_key=row.get("label_key") or f"intakeProfessional.questions.{field_name}",
    )


def build_career_registry(rows: Optional[Iterable[Mapping]] = None,
                          aliases: Mapping[str, str] = CAREER_ALIASES) -> QuestionRegistry:
    if rows is None:
        rows = CAREER_QUESTIONS
    return QuestionRegistry(
        Domain.CAREER,
        [build_career_question(row, aliases) for row in rows],
        aliases=aliases,
    )


CAREER_REGISTRY = build_career_registry()
