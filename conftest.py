import os

# Config is read at import time by app.api.main and the service container
os.environ.setdefault("DATABASE_URL", "sqlite:///./candidates-test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.config import get_config
from app.db.database import init_db
from app.main import app
from app.repositories.candidate_repository import SqlAlchemyCandidateRepository
from app.services.candidate_service import CandidateService
from app.services.container import get_candidate_service


@pytest.fixture
def config():
    return get_config()


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'candidates.db'}")
    init_db(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def repository(session_factory):
    return SqlAlchemyCandidateRepository(session_factory)


@pytest.fixture
def candidate_service(config, repository):
    return CandidateService(config, repository=repository)


@pytest.fixture
def client(candidate_service):
    app.dependency_overrides[get_candidate_service] = lambda: candidate_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def complete_candidate_data():
    return {
        "firstName": "Roberto",
        "lastName": "Díaz",
        "email": "roberto.diaz@email.com",
        "phone": "712345678",
        "address": "Avenida Principal 456",
        "educations": [
            {
                "institution": "Universidad Politécnica",
                "title": "Ingeniería de Software",
                "startDate": "2019-09-01",
                "endDate": "2023-06-30",
            }
        ],
        "workExperiences": [
            {
                "company": "InnovationTech",
                "position": "Full Stack Developer",
                "description": "Desarrollo de aplicaciones web y móviles",
                "startDate": "2021-03-01",
                "endDate": "2024-01-31",
            }
        ],
        "cv": {
            "filePath": "/uploads/cv-roberto-diaz.pdf",
            "fileType": "application/pdf",
        },
    }
