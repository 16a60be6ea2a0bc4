import copy

import pytest

from app.services.validator import validate_candidate_data
from app.utils.exceptions import ValidationError


def base_data(**overrides):
    data = {
        "firstName": "Juan",
        "lastName": "Pérez",
        "email": "juan.perez@email.com",
        "phone": "612345678",
        "address": "Calle Mayor 123",
    }
    data.update(overrides)
    return data


def test_valid_candidate_data():
    validate_candidate_data(base_data())


def test_complete_candidate_data_is_valid(complete_candidate_data):
    validate_candidate_data(complete_candidate_data)


def test_validation_is_pure(complete_candidate_data):
    before = copy.deepcopy(complete_candidate_data)
    validate_candidate_data(complete_candidate_data)
    validate_candidate_data(complete_candidate_data)
    assert complete_candidate_data == before


@pytest.mark.parametrize("first_name", [None, "", "J", "Juan3", "Juan_Carlos", "Ana-María", "   ", "x" * 101])
def test_invalid_first_name(first_name):
    with pytest.raises(ValidationError, match="Invalid name"):
        validate_candidate_data(base_data(firstName=first_name))


def test_missing_last_name():
    data = base_data()
    del data["lastName"]
    with pytest.raises(ValidationError, match="Invalid name"):
        validate_candidate_data(data)


@pytest.mark.parametrize("name", ["José Luis", "Ñoño", "Zoë", "Łukasz", "Müller"])
def test_accented_names_are_valid(name):
    validate_candidate_data(base_data(firstName=name, lastName=name))


def test_name_checked_before_email():
    with pytest.raises(ValidationError, match="Invalid name"):
        validate_candidate_data(base_data(firstName="", email="invalid-email"))


@pytest.mark.parametrize("email", [None, "", "invalid-email-format", "juan@", "@email.com", "juan@email", "juan perez@email.com"])
def test_invalid_email(email):
    with pytest.raises(ValidationError, match="Invalid email"):
        validate_candidate_data(base_data(email=email))


@pytest.mark.parametrize("phone", ["123456789", "61234567", "6123456789", "61234567a", "512345678", 612345678])
def test_invalid_phone(phone):
    with pytest.raises(ValidationError, match="Invalid phone"):
        validate_candidate_data(base_data(phone=phone))


@pytest.mark.parametrize("phone", ["612345678", "712345678", "912345678", None])
def test_valid_phone(phone):
    validate_candidate_data(base_data(phone=phone))


def test_phone_is_optional():
    data = base_data()
    del data["phone"]
    validate_candidate_data(data)


def test_address_too_long():
    with pytest.raises(ValidationError, match="Invalid address"):
        validate_candidate_data(base_data(address="a" * 101))


def test_education_is_valid():
    validate_candidate_data(base_data(educations=[
        {
            "institution": "Universidad Complutense",
            "title": "Ingeniería Informática",
            "startDate": "2018-09-01",
            "endDate": "2022-06-30",
        }
    ]))


def test_education_without_end_date_is_valid():
    validate_candidate_data(base_data(educations=[
        {"institution": "UPM", "title": "Máster", "startDate": "2023-09-01"}
    ]))


@pytest.mark.parametrize("education", [
    {"title": "Grado", "startDate": "2018-09-01"},
    {"institution": "UPM", "startDate": "2018-09-01"},
    {"institution": "x" * 101, "title": "Grado", "startDate": "2018-09-01"},
    "UPM",
])
def test_invalid_education(education):
    with pytest.raises(ValidationError, match="Invalid education"):
        validate_candidate_data(base_data(educations=[education]))


def test_education_start_date_required():
    with pytest.raises(ValidationError, match="Invalid education start date"):
        validate_candidate_data(base_data(educations=[{"institution": "UPM", "title": "Grado"}]))


def test_education_impossible_date():
    with pytest.raises(ValidationError, match="Invalid education end date"):
        validate_candidate_data(base_data(educations=[
            {"institution": "UPM", "title": "Grado", "startDate": "2018-09-01", "endDate": "2022-02-30"}
        ]))


def test_education_end_before_start():
    with pytest.raises(ValidationError, match="end date is before start date"):
        validate_candidate_data(base_data(educations=[
            {"institution": "UPM", "title": "Grado", "startDate": "2022-09-01", "endDate": "2018-06-30"}
        ]))


def test_educations_must_be_a_list():
    with pytest.raises(ValidationError, match="Invalid education"):
        validate_candidate_data(base_data(educations={"institution": "UPM"}))


def test_work_experience_is_valid():
    validate_candidate_data(base_data(workExperiences=[
        {
            "company": "TechCorp",
            "position": "Desarrollador Senior",
            "description": "Desarrollo de aplicaciones web",
            "startDate": "2020-01-15",
            "endDate": "2023-12-31",
        }
    ]))


def test_work_experience_description_too_long():
    with pytest.raises(ValidationError, match="Invalid work experience"):
        validate_candidate_data(base_data(workExperiences=[
            {"company": "TechCorp", "position": "Dev", "description": "d" * 201, "startDate": "2020-01-15"}
        ]))


def test_work_experience_missing_position():
    with pytest.raises(ValidationError, match="Invalid work experience"):
        validate_candidate_data(base_data(workExperiences=[{"company": "TechCorp", "startDate": "2020-01-15"}]))


def test_work_experience_end_before_start():
    with pytest.raises(ValidationError, match="Invalid work experience dates"):
        validate_candidate_data(base_data(workExperiences=[
            {"company": "TechCorp", "position": "Dev", "startDate": "2023-01-15", "endDate": "2020-01-15"}
        ]))


def test_resume_with_unsupported_type():
    with pytest.raises(ValidationError, match="Invalid resume"):
        validate_candidate_data(base_data(cv={"filePath": "/uploads/cv.png", "fileType": "image/png"}))


def test_resume_without_path():
    with pytest.raises(ValidationError, match="Invalid resume"):
        validate_candidate_data(base_data(cv={"fileType": "application/pdf"}))


def test_resume_key_is_accepted():
    validate_candidate_data(base_data(resume={"filePath": "/uploads/cv.docx", "fileType": "application/vnd.openxmlformats-officedocument.wordprocessingml.document"}))


@pytest.mark.parametrize("data", [None, [], "candidate"])
def test_payload_must_be_an_object(data):
    with pytest.raises(ValidationError, match="Invalid candidate data"):
        validate_candidate_data(data)


@pytest.mark.parametrize("candidate_id", [0, -1, "abc", True, 1.5])
def test_invalid_candidate_id(candidate_id):
    with pytest.raises(ValidationError, match="Invalid candidate id"):
        validate_candidate_data(base_data(id=candidate_id))


@pytest.mark.parametrize("candidate_id", [1, "42"])
def test_valid_candidate_id(candidate_id):
    validate_candidate_data(base_data(id=candidate_id))


@pytest.mark.parametrize("start_date", [" 2018-09-01", "2018-09-01 ", "2018-9-1", "01/09/2018"])
def test_education_start_date_must_be_exact(start_date):
    with pytest.raises(ValidationError, match="Invalid education start date"):
        validate_candidate_data(base_data(educations=[
            {"institution": "UPM", "title": "Grado", "startDate": start_date}
        ]))


def test_work_experience_start_date_must_be_exact():
    with pytest.raises(ValidationError, match="Invalid work experience start date"):
        validate_candidate_data(base_data(workExperiences=[
            {"company": "TechCorp", "position": "Dev", "startDate": " 2020-01-15"}
        ]))


def test_work_experience_start_date_required():
    with pytest.raises(ValidationError, match="Invalid work experience start date"):
        validate_candidate_data(base_data(workExperiences=[{"company": "TechCorp", "position": "Dev"}]))


def test_work_experience_impossible_end_date():
    with pytest.raises(ValidationError, match="Invalid work experience end date"):
        validate_candidate_data(base_data(workExperiences=[
            {"company": "TechCorp", "position": "Dev", "startDate": "2020-01-15", "endDate": "2023-13-01"}
        ]))


def test_blank_phone_is_treated_as_missing():
    validate_candidate_data(base_data(phone=""))


def test_blank_resume_is_treated_as_missing():
    validate_candidate_data(base_data(cv={}))


def test_decomposed_accents_are_valid():
    validate_candidate_data(base_data(firstName="Jose\u0301", lastName="Nu\u0303n\u0303ez"))
