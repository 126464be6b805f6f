"""Rights and benefits intake.

Rights questions are always shown. Their rule strings are advisory notes
for the worker; eligibility is decided after submission by
`intakepro.rules.recommendations`.
"""
from intakepro.models.question import Domain, InputKind, Question
from intakepro.registries.base import QuestionRegistry

SECTION = "rights"

# (field_name, label, input kind, options, description, rule note)
_RIGHTS_FIELDS = [
    ("id_number", "ID Number", InputKind.TEXT, (), "For cross-checking eligibility (optional)", None),
    ("household_status", "Marital Status", InputKind.SELECT,
     ("Single", "Married", "Divorced", "Widowed", "Single Parent"), None,
     "If Single Parent → Income tax credit points"),
    ("children_count", "Number of Children", InputKind.NUMBER, (), None, None),
    ("children_ages", "Children’s Ages (details)", InputKind.TEXT, (), None,
     "If any child <3 → Daycare/childcare subsidy"),
    ("employment_status_now", "Current Employment Status", InputKind.SELECT,
     ("Unemployed", "Job Seeking", "In Training", "Part-Time", "Full-Time", "Self-Employed"), None,
     "If unemployed → Check unemployment benefits"),
    ("monthly_income_gross", "Monthly Income (Gross)", InputKind.NUMBER, (), None,
     "If <5000 → Check income support eligibility"),
    ("spouse_income", "Spouse Monthly Income (Gross)", InputKind.NUMBER, (), None, None),
    ("unemployment_status", "Registered for Unemployment / Benefits", InputKind.SELECT,
     ("Yes", "No", "In Process"), None,
     "If No → Refer to Employment Service registration"),
    ("employment_injury", "Work Injury / Recognized Accident", InputKind.SELECT,
     ("Yes", "No"), None,
     "If Yes → Work injury compensation check"),
    ("housing_status", "Housing Situation", InputKind.SELECT,
     ("Renting", "Homeowner", "No Permanent Housing", "Public Housing"), None,
     "If Renting → Check rent assistance eligibility"),
    ("rent_amount", "Monthly Rent Amount", InputKind.NUMBER, (), None, None),
    ("health_condition", "Health Condition", InputKind.SELECT,
     ("Healthy", "Chronic Illness", "Disability", "Mental Diagnosis", "Recognized Disability"), None,
     "If Disability → Check disability allowances"),
    ("mental_health_support", "Receiving Mental Health Support", InputKind.SELECT,
     ("Yes", "No", "In Process"), None,
     "If No → Refer for mental health support"),
    ("education_level", "Formal Education Level", InputKind.SELECT,
     ("None", "12 Years", "Vocational Certificate", "Bachelor’s", "Master’s+"), None, None),
    ("training_interest", "Interested in Professional Training", InputKind.SELECT,
     ("Yes", "No", "Not Sure"), None,
     "If Yes → Refer to suitable training programs"),
    ("debt_status", "Active Debts / Enforcement Cases", InputKind.SELECT,
     ("Yes", "No", "Not Sure"), None,
     "If Yes → Refer to debt counseling services"),
    ("transport_access", "Transport Accessibility", InputKind.SELECT,
     ("Private Car", "Public Transport", "None"), None,
     "If None → Check for transport assistance / nearby jobs"),
]


def build_rights_registry() -> QuestionRegistry:
    questions = [
        Question(
            domain=Domain.RIGHTS,
            section=SECTION,
            field_name=field_name,
            label=label,
            input_kind=kind,
            options=options,
            description=description,
            rule_text=rule,
            label_key=f"intakeRights.questions.{field_name}",
        )
        for field_name, label, kind, options, description, rule in _RIGHTS_FIELDS
    ]
    return QuestionRegistry(Domain.RIGHTS, questions)


RIGHTS_REGISTRY = build_rights_registry()
