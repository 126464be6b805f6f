"""Emotional support intake.

Conditions are ``"<field>=<value>"`` strings matched against the Hebrew
option values, so option text here must stay byte-for-byte identical to
what the client stores.
"""
from typing import Iterable, Optional

from intakepro.models.question import Domain, InputKind, Question
from intakepro.registries.base import QuestionRegistry
from intakepro.rules.parsers import parse_emotional_condition

_SCALE_1_5 = ("1", "2", "3", "4", "5")

# (section, field_name, question text, input kind, options, condition)
EMOTIONAL_QUESTIONS = (
    ("anxiety", "anxiety_level", "דרג/י את רמת החרדה הכללית (1–5)", InputKind.SCALE, _SCALE_1_5, None),
    ("trauma", "has_trauma", "האם חווית אירוע טראומטי?", InputKind.YES_NO, (), None),
    ("trauma", "trauma_description", "תאר/י את האירוע", InputKind.TEXT, (), "has_trauma=כן"),
    ("coping", "coping_methods", "אילו שיטות התמודדות עוזרות לך?", InputKind.MULTISELECT,
     ("ספורט", "מדיטציה", "שינה", "כתיבה", "שיחה עם חברים/משפחה", "טיפול", "אחר"), None),
    ("strengths", "emotional_strengths", "מהן החוזקות הרגשיות שלך?", InputKind.MULTISELECT,
     ("חוסן נפשי", "אמפתיה", "יצירתיות", "אופטימיות", "הומור", "ויסות רגשי"), None),
    ("support", "support_network", "מי נמצא ברשת התמיכה שלך?", InputKind.MULTISELECT,
     ("משפחה", "חברים", "מטפל/ת", "קהילה/מנהיג", "ארגון", "אחר"), None),
    ("wellbeing", "life_satisfaction", "עד כמה את/ה מרוצה מהחיים?", InputKind.SCALE, _SCALE_1_5, None),
    ("emotional_goal", "emotional_goal", "מה יכול לעזור לך להתקדם רגשית?", InputKind.MULTISELECT,
     ("לימוד כישורי התמודדות", "שיפור יחסים", "שיחה על הנושא", "הבנת הסיבה השורשית", "שיפור חיי העבודה",
      "שיפור גישה לזכויות"), None),
    ("reason", "reason", "מה הסיבה לפנייה לתמיכה רגשית?", InputKind.MULTISELECT,
     ("חרדה", "דיכאון", "קושי בוויסות רגשי", "משבר", "טראומה", "דימוי עצמי נמוך", "ביקורת עצמית", "בדידות",
      "חוסר תמיכה", "קשיים בזוגיות/יחסים", "עייפות", "שחיקה", "מודעות עצמית נמוכה", "אחר"), None),
    ("definition", "problem_definition", "איך היית מגדיר/ה את הבעיה?", InputKind.TEXT, (), None),
    ("general", "success_definition", "איך תדעי/ה שהבעיה נפתרה?", InputKind.TEXT, (), None),
    ("when", "problem_start_when", "מתי התחילה הבעיה?", InputKind.TEXT, (), None),
    ("where", "problem_frequency", "מתי זה מופיע?", InputKind.SCALE,
     ("תמיד", "רוב היום", "חלק מהיום", "לעיתים רחוקות", "אף פעם"), None),
    ("situations", "problem_situations", "באילו מצבים את/ה מרגיש/ה את הבעיה?", InputKind.TEXT, (), None),
    ("reaction", "problem_reaction", "מה את/ה עושה כשהבעיה עולה?", InputKind.TEXT, (), None),
    ("past", "felt_better_when", "האם היה תקופה שהרגשת טוב יותר ומתי?", InputKind.TEXT, (), None),
    ("contact", "contact_persons", "אל מי אפשר לפנות לעזרה?", InputKind.MULTISELECT,
     ("משפחה", "חברים", "מטפלים", "קהילה", "אמונה", "אחר"), None),
    ("birth", "birth_pregnancy_experiences", "חוויות לידה והריון", InputKind.YES_NO, ("כן", "לא"), None),
    ("childhood_satisfaction", "childhood_satisfaction", "שביעות רצון מהילדות", InputKind.SCALE,
     ("1 – לא מרוצה", "2 – מרוצה במעט", "3 – מרוצה במידה בינונית"), None),
    ("depression", "depression_screen", "האם לאחרונה חשת חוסר עניין או הנאה מפעילויות יומיומיות?",
     InputKind.YES_NO, (), None),
    ("anxiety_context", "anxiety_context", "מתי את/ה מרגיש/ה חרדה בעוצמה הגבוהה ביותר?", InputKind.MULTISELECT,
     ("בבית", "בעבודה", "בסיטואציות חברתיות", "בנהיגה", "אחר"), "reason=חרדה"),
    ("anxiety_coping", "anxiety_coping", "איך את/ה מתמודד/ת כיום עם חרדה?", InputKind.MULTISELECT,
     ("תרופות", "נשימות/הרפיה", "שיחה", "הימנעות", "טיפול", "אחר"), "reason=חרדה"),
    ("depression_days", "depression_days", "כמה ימים בשבוע יש חוסר אנרגיה או חוסר עניין?", InputKind.SCALE,
     ("0", "1–2", "3–4", "5–7"), "reason=דיכאון"),
    ("depression_difficulty", "depression_difficulty", "מה מקשה הכי הרבה להתחיל או לקום?", InputKind.TEXT,
     (), "reason=דיכאון"),
    ("trauma_effect", "trauma_effect", "האם האירוע הטראומטי עדיין משפיע על היום-יום?", InputKind.YES_NO,
     (), "reason=טראומה"),
    ("trauma_trigger", "trauma_trigger", "אילו מצבים מעוררים פלאשבקים או מצוקה?", InputKind.TEXT,
     (), "reason=טראומה"),
    ("regulation_context", "regulation_context", "מתי חווים את הקושי הגדול ביותר?", InputKind.MULTISELECT,
     ("עבודה", "הורות", "זוגיות", "לבד", "אחר"), "reason=קושי בוויסות רגשי"),
    ("self_criticism", "self_criticism_thoughts", "אילו מחשבות חוזרות במצבים האלה?", InputKind.TEXT,
     (), "reason=ביקורת עצמית,דימוי עצמי נמוך"),
    ("loneliness_contact", "loneliness_contact", "מי האדם הקרוב ביותר שאפשר לפנות אליו בשעת קושי?",
     InputKind.TEXT, (), "reason=בדידות,חוסר תמיכה"),
    ("loneliness_support", "loneliness_support_level", "עד כמה את/ה מרגיש/ה שיש רשת תמיכה מספקת?",
     InputKind.SCALE, _SCALE_1_5, "reason=בדידות,חוסר תמיכה"),
    ("burnout_context", "burnout_context", "באיזה תחום את/ה חווה את השחיקה הגדולה ביותר?", InputKind.MULTISELECT,
     ("עבודה", "הורות", "טיפול בקרוב משפחה", "לימודים", "אחר"), "reason=שחיקה,עייפות"),
    ("burnout_recovery", "burnout_recovery", "מה עוזר לך להיטען מחדש (אם בכלל)?", InputKind.MULTISELECT,
     ("שינה", "חופשה", "פעילות גופנית", "שיחה עם חברים", "טיפול", "אחר"), "reason=שחיקה,עייפות"),
    ("crisis_feeling", "crisis_feeling", "מהו הרגש המרכזי סביב המשבר?", InputKind.MULTISELECT,
     ("בלבול", "ייאוש", "פחד", "אובדן שליטה", "כעס", "אחר"), "reason=משבר,חוסר ביטחון עצמי"),
    ("help_needed", "help_needed", "מה לדעתך יעזור לך בשלב זה?", InputKind.MULTISELECT,
     ("תמיכה רגשית", "כלים מעשיים", "גם וגם"), "reason=*"),
)


def build_emotional_question(section: str,
                             field_name: str,
                             text: str,
                             kind: InputKind,
                             options: tuple = (),
                             condition: Optional[str] = None) -> Question:
    return Question(
        domain=Domain.EMOTIONAL,
        section=section,
        field_name=field_name,
        label=text,
        input_kind=kind,
        options=options,
        condition=parse_emotional_condition(condition),
        rule_text=condition,
        label_key=f"intakeEmotional.questions.{field_name}",
    )


def build_emotional_registry(rows: Optional[Iterable[tuple]] = None) -> QuestionRegistry:
    if rows is None:
        rows = EMOTIONAL_QUESTIONS
    return QuestionRegistry(Domain.EMOTIONAL, [build_emotional_question(*row) for row in rows])


EMOTIONAL_REGISTRY = build_emotional_registry()
