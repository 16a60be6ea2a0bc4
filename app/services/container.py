from app.config import get_config
from app.services.candidate_service import CandidateService
from app.services.resume_service import ResumeService

config = get_config()

# Initialize services
candidate_service = CandidateService(config)
resume_service = ResumeService(config)


def get_candidate_service() -> CandidateService:
    return candidate_service


def get_resume_service() -> ResumeService:
    return resume_service
