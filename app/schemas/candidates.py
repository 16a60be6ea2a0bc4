"""
Candidate request and response Pydantic schemas.

Wire format uses camelCase keys; Python attributes are snake_case.
"""

import unicodedata
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class EducationIn(CamelModel):
    institution: str
    title: str
    start_date: date
    end_date: Optional[date] = None


class WorkExperienceIn(CamelModel):
    company: str
    position: str
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None


class ResumeIn(CamelModel):
    file_path: str = Field(..., description="Path returned by the upload endpoint.")
    file_type: str = Field(..., description="MIME type of the uploaded file.")


class CandidateIn(CamelModel):
    """Typed form of a payload that already passed validate_candidate_data."""

    id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    educations: Optional[List[EducationIn]] = None
    work_experiences: Optional[List[WorkExperienceIn]] = None
    cv: Optional[ResumeIn] = Field(None, validation_alias=AliasChoices("cv", "resume"))

    @field_validator("first_name", "last_name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        return unicodedata.normalize("NFC", value)

    @field_validator("phone", "cv", mode="before")
    @classmethod
    def blank_as_missing(cls, value: Any) -> Any:
        # Blank optional form fields arrive as "" or {}
        if value == "" or value == {}:
            return None
        return value


class EducationOut(CamelModel):
    id: int
    institution: str
    title: str
    start_date: date
    end_date: Optional[date] = None


class WorkExperienceOut(CamelModel):
    id: int
    company: str
    position: str
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None


class ResumeOut(CamelModel):
    id: int
    file_path: str
    file_type: str
    upload_date: datetime


class CandidateOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    educations: List[EducationOut] = []
    work_experiences: List[WorkExperienceOut] = []
    resumes: List[ResumeOut] = []


__all__ = [
    "EducationIn",
    "WorkExperienceIn",
    "ResumeIn",
    "CandidateIn",
    "EducationOut",
    "WorkExperienceOut",
    "ResumeOut",
    "CandidateOut",
]
