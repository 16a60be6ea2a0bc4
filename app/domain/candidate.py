"""
Candidate domain entities.

Plain data built from a validated payload. Persistence lives in
app.repositories.candidate_repository.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from app.schemas.candidates import CandidateIn
from app.utils.datetime_utils import get_now_utc


@dataclass
class Education:
    institution: str
    title: str
    start_date: date
    end_date: Optional[date] = None


@dataclass
class WorkExperience:
    company: str
    position: str
    start_date: date
    description: Optional[str] = None
    end_date: Optional[date] = None


@dataclass
class Resume:
    file_path: str
    file_type: str
    upload_date: datetime = field(default_factory=get_now_utc)


@dataclass
class Candidate:
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    id: Optional[int] = None
    educations: List[Education] = field(default_factory=list)
    work_experiences: List[WorkExperience] = field(default_factory=list)
    resumes: List[Resume] = field(default_factory=list)

    @property
    def is_persisted(self) -> bool:
        """A candidate carrying an id refers to an existing record."""
        return self.id is not None

    @classmethod
    def from_payload(cls, payload: CandidateIn) -> "Candidate":
        candidate = cls(
            id=payload.id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
        )
        for education in payload.educations or []:
            candidate.educations.append(
                Education(
                    institution=education.institution,
                    title=education.title,
                    start_date=education.start_date,
                    end_date=education.end_date,
                )
            )
        for experience in payload.work_experiences or []:
            candidate.work_experiences.append(
                WorkExperience(
                    company=experience.company,
                    position=experience.position,
                    description=experience.description,
                    start_date=experience.start_date,
                    end_date=experience.end_date,
                )
            )
        if payload.cv is not None:
            candidate.resumes.append(
                Resume(file_path=payload.cv.file_path, file_type=payload.cv.file_type)
            )
        return candidate
