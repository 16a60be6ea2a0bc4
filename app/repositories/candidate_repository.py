"""
Candidate Repository

Persistence capability for candidates: create, update, find_by_id.
"""

from typing import Any, Dict, Optional, Protocol

from sqlalchemy.orm import Session, sessionmaker

from app.db.models import CandidateModel, EducationModel, ResumeModel, WorkExperienceModel
from app.domain.candidate import Candidate
from app.schemas.candidates import CandidateOut
from app.utils.datetime_utils import get_now_utc
from app.utils.exceptions import NotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CandidateRepository(Protocol):
    def create(self, candidate: Candidate) -> Dict[str, Any]: ...

    def update(self, candidate: Candidate) -> Dict[str, Any]: ...

    def find_by_id(self, candidate_id: int) -> Optional[Dict[str, Any]]: ...


def candidate_to_dict(model: CandidateModel) -> Dict[str, Any]:
    """Serialize a stored candidate with its owned records (camelCase keys)."""
    return CandidateOut.model_validate(model).model_dump(by_alias=True, mode="json")


class SqlAlchemyCandidateRepository:
    """Candidate repository backed by a SQLAlchemy session factory"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create(self, candidate: Candidate) -> Dict[str, Any]:
        with self._session_factory.begin() as session:
            model = CandidateModel()
            self._apply(model, candidate)
            session.add(model)
            session.flush()
            logger.info(f"[CandidateRepository] Created candidate {model.id}")
            return candidate_to_dict(model)

    def update(self, candidate: Candidate) -> Dict[str, Any]:
        with self._session_factory.begin() as session:
            model = self._get(session, candidate.id)
            if model is None:
                raise NotFoundError("Candidate not found", "CandidateRepository")
            self._apply(model, candidate)
            # Owned-record changes do not trigger onupdate on the candidate row
            model.updated_at = get_now_utc()
            session.flush()
            logger.info(f"[CandidateRepository] Updated candidate {model.id}")
            return candidate_to_dict(model)

    def find_by_id(self, candidate_id: int) -> Optional[Dict[str, Any]]:
        with self._session_factory() as session:
            model = self._get(session, candidate_id)
            return candidate_to_dict(model) if model is not None else None

    @staticmethod
    def _get(session: Session, candidate_id: Optional[int]) -> Optional[CandidateModel]:
        if candidate_id is None:
            return None
        return session.get(CandidateModel, candidate_id)

    @staticmethod
    def _apply(model: CandidateModel, candidate: Candidate) -> None:
        model.first_name = candidate.first_name
        model.last_name = candidate.last_name
        model.email = candidate.email
        model.phone = candidate.phone
        model.address = candidate.address

        # Owned records are replaced on update when the form sends new ones
        if candidate.educations or model.id is None:
            model.educations = [
                EducationModel(
                    institution=e.institution,
                    title=e.title,
                    start_date=e.start_date,
                    end_date=e.end_date,
                )
                for e in candidate.educations
            ]
        if candidate.work_experiences or model.id is None:
            model.work_experiences = [
                WorkExperienceModel(
                    company=w.company,
                    position=w.position,
                    description=w.description,
                    start_date=w.start_date,
                    end_date=w.end_date,
                )
                for w in candidate.work_experiences
            ]
        # Resumes accumulate; each upload is kept
        for r in candidate.resumes:
            model.resumes.append(
                ResumeModel(file_path=r.file_path, file_type=r.file_type, upload_date=r.upload_date)
            )
