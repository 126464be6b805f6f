"""Helpers for reading loosely typed answer values.

Answers arrive as JSON-like data: strings, numbers, booleans, lists of
strings or nothing at all. Everything that needs to compare or score an
answer goes through these helpers so scalar-vs-list handling lives in one
place.
"""
import math
from collections.abc import Mapping
import re
from typing import Any, List, Optional

_NUMERIC_RE = re.compile(r'^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$')


def is_multi(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def stringify(value: Any) -> str:
    """Render a scalar the way the web client displays it (3.0 -> "3")"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    if is_multi(value):
        return ",".join(stringify(v) for v in value)
    return str(value)


def to_list(value: Any) -> List[str]:
    """Normalize an answer to a list of strings"""
    if value is None:
        return []
    if is_multi(value):
        return [stringify(v) for v in value]
    return [stringify(value)]


def to_number(value: Any) -> Optional[float]:
    """Interpret an answer as a finite number, or None when it is not one"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_RE.match(text):
            return None
        number = float(text)
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def get_path(record: Any, path: str) -> Any:
    """Look up a dot-notation path ("contact.phone") in nested mappings"""
    current = record
    for key in path.split('.'):
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def is_completed(value: Any) -> bool:
    """True when a field holds a real answer.

    Only null, blank strings, NaN, and empty lists or objects count as
    unanswered. Zero and False are answers.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, (list, tuple, Mapping)):
        return len(value) > 0
    return True
