from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


ComparisonOp = Literal["<", "<=", ">", ">=", "=="]


class AlwaysVisible(BaseModel):
    """No condition, or one that could not be parsed"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["always"] = "always"


class NumericThreshold(BaseModel):
    """Visible when the field's numeric answer satisfies `op threshold`"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric_threshold"] = "numeric_threshold"
    field: str
    op: ComparisonOp
    threshold: float


class KeywordMatch(BaseModel):
    """Visible when the field's lower-cased answer contains the keyword"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["keyword_match"] = "keyword_match"
    field: str
    keyword: str


class FieldEquals(BaseModel):
    """Visible when the field's answer is (or contains) the value"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["field_equals"] = "field_equals"
    field: str
    value: str


class FieldAnyOf(BaseModel):
    """Visible when the field's answer includes any of the values"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["field_any_of"] = "field_any_of"
    field: str
    values: tuple[str, ...]


Condition = Annotated[
    Union[AlwaysVisible, NumericThreshold, KeywordMatch, FieldEquals, FieldAnyOf],
    Field(discriminator="kind"),
]
