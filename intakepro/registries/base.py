import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from intakepro.models.question import Domain, Question

logger = logging.getLogger(__name__)


class QuestionRegistry:
    """Immutable, ordered set of questions for one domain.

    `aliases` maps rule keywords to the field they test (for example
    ``unemployed -> current_status``) and is handed to the domain's rule
    parser when questions are built.
    """

    def __init__(self,
                 domain: Domain,
                 questions: Sequence[Question],
                 aliases: Optional[Mapping[str, str]] = None):
        self._domain = domain
        self._questions = tuple(questions)
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases or {}))
        self._by_field: Dict[str, Question] = {}

        for question in self._questions:
            if question.field_name in self._by_field:
                raise ValueError(f"Duplicate field_name {question.field_name!r} in {domain.value} registry")
            if question.domain != domain:
                raise ValueError(f"Question {question.field_name!r} belongs to {question.domain.value}, not {domain.value}")
            self._by_field[question.field_name] = question

        logger.debug(f"Loaded {len(self._questions)} {domain.value} questions "
                     f"({sum(q.is_conditional for q in self._questions)} conditional)")

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._by_field

    def get(self, field_name: str) -> Optional[Question]:
        return self._by_field.get(field_name)

    def field_names(self) -> List[str]:
        return [q.field_name for q in self._questions]

    def sections(self) -> List[str]:
        """Section names in first-appearance order"""
        seen: Dict[str, None] = {}
        for question in self._questions:
            seen.setdefault(question.section, None)
        return list(seen)
