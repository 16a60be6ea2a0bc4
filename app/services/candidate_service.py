"""
Candidate Service

Validates candidate form submissions and stores them through the
candidate repository.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from app.config import Config
from app.db.database import get_session_factory
from app.db.errors import translate_storage_error
from app.domain.candidate import Candidate
from app.repositories.candidate_repository import CandidateRepository, SqlAlchemyCandidateRepository
from app.schemas.candidates import CandidateIn
from app.services.validator import validate_candidate_data
from app.utils.exceptions import NotFoundError, ValidationError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CandidateService:
    """Service for adding and updating candidates"""

    def __init__(self, config: Config, repository: Optional[CandidateRepository] = None):
        self.config = config
        self.repository = repository or SqlAlchemyCandidateRepository(get_session_factory(config))

    def add_candidate(self, data: Any) -> Dict[str, Any]:
        """
        Validate a candidate payload and persist it.

        A payload carrying an id updates that candidate, otherwise a new one
        is created.

        Args:
            data: Decoded JSON body of the candidate form

        Returns:
            The stored candidate with its generated id and timestamps

        Raises:
            ValidationError: If the payload breaks a field rule
            NotFoundError: If the id to update does not exist
            DuplicateError: If the email is already registered
            ConnectivityError: If the database cannot be reached
        """
        validate_candidate_data(data)

        try:
            payload = CandidateIn.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"[CandidateService] Payload passed validation but failed parsing: {e}")
            raise ValidationError("Invalid candidate data")

        candidate = Candidate.from_payload(payload)

        try:
            if candidate.is_persisted:
                saved = self.repository.update(candidate)
            else:
                saved = self.repository.create(candidate)
        except Exception as e:
            translated = translate_storage_error(e)
            logger.error(f"[CandidateService] Failed to save candidate {candidate.email}: {translated}")
            if translated is e:
                raise
            raise translated from e

        logger.info(f"[CandidateService] ✅ Candidate {saved.get('id')} saved")
        return saved

    def get_candidate(self, candidate_id: int) -> Dict[str, Any]:
        try:
            candidate = self.repository.find_by_id(candidate_id)
        except Exception as e:
            translated = translate_storage_error(e)
            logger.error(f"[CandidateService] Failed to fetch candidate {candidate_id}: {translated}")
            if translated is e:
                raise
            raise translated from e

        if candidate is None:
            raise NotFoundError("Candidate not found", "CandidateService")
        return candidate
