from typing import Union

from intakepro.models.question import Domain
from intakepro.registries.base import QuestionRegistry
from intakepro.registries.career import CAREER_REGISTRY
from intakepro.registries.emotional import EMOTIONAL_REGISTRY
from intakepro.registries.rights import RIGHTS_REGISTRY

REGISTRIES = {
    Domain.RIGHTS: RIGHTS_REGISTRY,
    Domain.CAREER: CAREER_REGISTRY,
    Domain.EMOTIONAL: EMOTIONAL_REGISTRY,
}


def get_registry(domain: Union[Domain, str]) -> QuestionRegistry:
    """Return the registry for a domain name or enum member"""
    try:
        return REGISTRIES[Domain(domain)]
    except ValueError:
        raise ValueError(f"Unknown intake domain: {domain!r}") from None
