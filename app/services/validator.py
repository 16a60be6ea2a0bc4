"""
Candidate Payload Validator

Fail-fast field rules applied to a raw candidate payload before anything is
persisted. Rules run in a fixed order and the first violation raises a
ValidationError naming the failing field category.
"""

import re
import unicodedata
from datetime import date
from typing import Any, Mapping, Optional

from app.utils.datetime_utils import parse_date_safe
from app.utils.exceptions import ValidationError

NAME_PATTERN = re.compile(r"(?:[^\W\d_]| )+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"[679][0-9]{8}")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 100
INSTITUTION_MAX_LENGTH = 100
TITLE_MAX_LENGTH = 250
COMPANY_MAX_LENGTH = 100
POSITION_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200
FILE_PATH_MAX_LENGTH = 500

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def _is_bounded_string(value: Any, max_length: int, min_length: int = 1) -> bool:
    return isinstance(value, str) and min_length <= len(value) <= max_length


def validate_name(name: Any) -> None:
    if isinstance(name, str):
        # Decomposed accents (e + U+0301) must match as letters
        name = unicodedata.normalize("NFC", name)
    if not _is_bounded_string(name, NAME_MAX_LENGTH, NAME_MIN_LENGTH) or not name.strip():
        raise ValidationError("Invalid name")
    if not NAME_PATTERN.fullmatch(name):
        raise ValidationError("Invalid name")


def validate_email(email: Any) -> None:
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email")


def validate_phone(phone: Any) -> None:
    if phone is None or phone == "":
        return
    if not isinstance(phone, str) or not PHONE_PATTERN.fullmatch(phone):
        raise ValidationError("Invalid phone")


def validate_address(address: Any) -> None:
    if address is None:
        return
    if not isinstance(address, str) or len(address) > ADDRESS_MAX_LENGTH:
        raise ValidationError("Invalid address")


def _validate_date_range(entry: Mapping[str, Any], label: str) -> None:
    """Check startDate / endDate of an education or work experience entry."""
    try:
        start: date = parse_date_safe(entry.get("startDate"))
    except ValueError:
        raise ValidationError(f"Invalid {label} start date")

    end_value = entry.get("endDate")
    if end_value is None:
        return
    try:
        end: Optional[date] = parse_date_safe(end_value)
    except ValueError:
        raise ValidationError(f"Invalid {label} end date")

    if end < start:
        raise ValidationError(f"Invalid {label} dates: end date is before start date")


def validate_education(education: Any) -> None:
    if not isinstance(education, Mapping):
        raise ValidationError("Invalid education")
    if not _is_bounded_string(education.get("institution"), INSTITUTION_MAX_LENGTH):
        raise ValidationError("Invalid education")
    if not _is_bounded_string(education.get("title"), TITLE_MAX_LENGTH):
        raise ValidationError("Invalid education")
    _validate_date_range(education, "education")


def validate_work_experience(experience: Any) -> None:
    if not isinstance(experience, Mapping):
        raise ValidationError("Invalid work experience")
    if not _is_bounded_string(experience.get("company"), COMPANY_MAX_LENGTH):
        raise ValidationError("Invalid work experience")
    if not _is_bounded_string(experience.get("position"), POSITION_MAX_LENGTH):
        raise ValidationError("Invalid work experience")
    description = experience.get("description")
    if description is not None and not _is_bounded_string(description, DESCRIPTION_MAX_LENGTH, 0):
        raise ValidationError("Invalid work experience")
    _validate_date_range(experience, "work experience")


def validate_resume(resume: Any) -> None:
    if not isinstance(resume, Mapping):
        raise ValidationError("Invalid resume")
    if not _is_bounded_string(resume.get("filePath"), FILE_PATH_MAX_LENGTH):
        raise ValidationError("Invalid resume")
    if resume.get("fileType") not in ALLOWED_RESUME_TYPES:
        raise ValidationError("Invalid resume")


def _validate_id(candidate_id: Any) -> None:
    if candidate_id is None:
        return
    # bool is an int subclass
    if isinstance(candidate_id, bool):
        raise ValidationError("Invalid candidate id")
    if isinstance(candidate_id, int) and candidate_id > 0:
        return
    if isinstance(candidate_id, str) and candidate_id.isascii() and candidate_id.isdigit() and int(candidate_id) > 0:
        return
    raise ValidationError("Invalid candidate id")


def validate_candidate_data(data: Any) -> None:
    """
    Validate a raw candidate payload.

    Args:
        data: Decoded JSON body of the candidate form

    Raises:
        ValidationError: On the first rule the payload breaks
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid candidate data")

    _validate_id(data.get("id"))

    validate_name(data.get("firstName"))
    validate_name(data.get("lastName"))
    validate_email(data.get("email"))
    validate_phone(data.get("phone"))
    validate_address(data.get("address"))

    educations = data.get("educations")
    if educations is not None:
        if not isinstance(educations, list):
            raise ValidationError("Invalid education")
        for education in educations:
            validate_education(education)

    experiences = data.get("workExperiences")
    if experiences is not None:
        if not isinstance(experiences, list):
            raise ValidationError("Invalid work experience")
        for experience in experiences:
            validate_work_experience(experience)

    resume = data.get("cv", data.get("resume"))
    # Blank form sections arrive as {}
    if resume is not None and resume != {}:
        validate_resume(resume)
