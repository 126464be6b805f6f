from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from intakepro.models.condition import AlwaysVisible, Condition


# A single answer: free text, a number, a yes/no flag or a multi-select list
AnswerValue = Union[str, int, float, bool, List[str], None]


class Domain(str, Enum):
    """The three independent intake questionnaires"""
    RIGHTS = "rights"
    CAREER = "career"
    EMOTIONAL = "emotional"


class Viewpoint(str, Enum):
    """Role-based lens used to pick which sections count toward completion"""
    SOCIAL_WORKER = "social_worker"
    CAREER_COUNSELOR = "career_counselor"
    EMOTIONAL_THERAPIST = "emotional_therapist"
    GENERAL = "general"


class InputKind(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    SCALE = "scale"
    YES_NO = "yes_no"


class Question(BaseModel):
    """Represents a single intake question"""
    model_config = ConfigDict(frozen=True)

    domain: Domain = Field(description="Questionnaire this question belongs to")
    section: str = Field(description="Section or group title containing this question")
    field_name: str = Field(description="Unique answer key within the domain")
    label: str = Field(description="Default display label")
    input_kind: InputKind = Field(description="How the answer is collected")
    options: tuple[str, ...] = Field(default=(), description="Ordered choices for enumerable inputs")
    condition: Condition = Field(default_factory=AlwaysVisible, description="Parsed visibility condition")
    rule_text: Optional[str] = Field(default=None, description="Raw rule string as authored")
    description: Optional[str] = Field(default=None, description="Helper text shown under the input")
    related_model: Optional[str] = Field(default=None, description="Guidance model the question feeds")
    label_key: str = Field(default="", description="i18n key for the label")

    @property
    def is_conditional(self) -> bool:
        return not isinstance(self.condition, AlwaysVisible)
