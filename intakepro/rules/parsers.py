"""Parsers that turn authored rule strings into Condition values.

Each questionnaire was written with its own rule notation:

- Career questions carry free-text rules such as ``"If <4 → Goal: ..."`` or
  ``"If unemployed → ..."``.
- Emotional questions carry ``"field=value"`` strings, where the value may be
  ``*`` or a comma separated list.

Parsing happens once, when a registry is built. Anything that does not fit
the notation becomes ``AlwaysVisible`` so a question is never hidden by a
rule nobody can read.
"""
import logging
import re
from typing import Mapping, Optional

from intakepro.models.condition import (
    AlwaysVisible,
    Condition,
    FieldAnyOf,
    FieldEquals,
    KeywordMatch,
    NumericThreshold,
)

logger = logging.getLogger(__name__)

RULE_PREFIX = "if "
ANNOTATION_ARROW = "→"

_NUMERIC_RULE_RE = re.compile(r'^([<>]=?|==)\s*([0-9]+(?:\.[0-9]+)?)$')
_KEYWORD_STRIP_RE = re.compile(r'[^a-z\-\s]')


def parse_career_rule(field_name: str,
                      rule: Optional[str],
                      aliases: Optional[Mapping[str, str]] = None) -> Condition:
    """Parse a career rule string attached to `field_name`.

    Numeric comparisons always test the question's own answer. Keywords are
    looked up in `aliases` to find the field they test, falling back to the
    question's own field.
    """
    text = (rule or "").strip().lower()
    if not text:
        return AlwaysVisible()

    if not text.startswith(RULE_PREFIX):
        logger.debug(f"Rule for {field_name} has no 'if' prefix, always visible: {rule!r}")
        return AlwaysVisible()

    predicate = text[len(RULE_PREFIX):].split(ANNOTATION_ARROW)[0].strip()

    numeric = _NUMERIC_RULE_RE.match(predicate)
    if numeric:
        op, threshold = numeric.groups()
        return NumericThreshold(field=field_name, op=op, threshold=float(threshold))

    keyword = _KEYWORD_STRIP_RE.sub('', predicate).strip()
    if not keyword:
        # an empty keyword is contained in every answer
        logger.debug(f"Rule for {field_name} has no usable keyword, always visible: {rule!r}")
        return AlwaysVisible()

    target = (aliases or {}).get(keyword, field_name)
    return KeywordMatch(field=target, keyword=keyword)


def parse_emotional_condition(condition: Optional[str]) -> Condition:
    """Parse an emotional ``"<field>=<value>"`` condition."""
    text = (condition or "").strip()
    if not text:
        return AlwaysVisible()

    if "=" not in text:
        logger.debug(f"Condition without '=' treated as always visible: {condition!r}")
        return AlwaysVisible()

    parts = text.split("=")
    field = parts[0].strip()
    value = parts[1].strip()
    if not field or not value:
        logger.debug(f"Incomplete condition treated as always visible: {condition!r}")
        return AlwaysVisible()

    if value == "*":
        return AlwaysVisible()

    if "," in value:
        values = tuple(v.strip() for v in value.split(","))
        return FieldAnyOf(field=field, values=values)

    return FieldEquals(field=field, value=value)
