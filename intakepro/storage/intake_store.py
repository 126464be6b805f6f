# intakepro/storage/intake_store.py

from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from intakepro.models.question import Domain
from intakepro.models.results import IntakeDocument
from intakepro.rules.recommendations import evaluate_recommendations

logger = logging.getLogger(__name__)


class IntakeStoreError(Exception):
    """Base class for intake storage errors"""
    pass


class CorruptIntakeError(IntakeStoreError):
    """Raised when a stored intake cannot be read back"""
    pass


class IntakeStore(ABC):
    """Document store addressed by (case id, domain)"""

    @abstractmethod
    def load(self, case_id: str, domain: Domain) -> Optional[IntakeDocument]:
        """
        Return the stored intake, or None if nothing was saved yet.
        """
        pass

    @abstractmethod
    def save(self, case_id: str, domain: Domain, document: IntakeDocument) -> Optional[Path]:
        """
        Store the intake, replacing any previous version.
        """
        pass


def _validate_case_id(case_id: str) -> str:
    case_id = (case_id or "").strip()
    if not case_id or case_id in (".", "..") or "/" in case_id or "\\" in case_id:
        raise ValueError(f"Invalid case id: {case_id!r}")
    return case_id


class JsonFileIntakeStore(IntakeStore):
    """Stores each intake as <root>/<case_id>/<domain>.json"""

    def __init__(self, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir)

    def path_for(self, case_id: str, domain: Union[Domain, str]) -> Path:
        return self.root_dir / _validate_case_id(case_id) / f"{Domain(domain).value}.json"

    def load(self, case_id: str, domain: Domain) -> Optional[IntakeDocument]:
        path = self.path_for(case_id, domain)
        if not path.is_file():
            logger.debug(f"No stored intake at {path}")
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return IntakeDocument(**data)
        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error in {path}: {str(e)}")
            raise CorruptIntakeError(f"Invalid JSON in {path}") from e
        except (ValidationError, TypeError) as e:
            logger.error(f"Schema validation error in {path}: {str(e)}")
            raise CorruptIntakeError(f"Unexpected intake structure in {path}") from e

    def save(self, case_id: str, domain: Domain, document: IntakeDocument) -> Path:
        path = self.path_for(case_id, domain)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved {Domain(domain).value} intake for case {case_id} to {path}")
        return path


def submit_intake(store: IntakeStore,
                  case_id: str,
                  domain: Union[Domain, str],
                  answers: Mapping[str, Any]) -> IntakeDocument:
    """Mark an intake completed and persist it.

    Rights intakes are stored together with their recommendations.
    """
    domain = Domain(domain)
    recommendations = evaluate_recommendations(answers) if domain == Domain.RIGHTS else []
    document = IntakeDocument(
        answers=dict(answers),
        completed=True,
        updated_at=datetime.now(timezone.utc),
        recommendations=recommendations,
    )
    store.save(case_id, domain, document)
    return document
