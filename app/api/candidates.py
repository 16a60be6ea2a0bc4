from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.services.candidate_service import CandidateService
from app.services.container import get_candidate_service
from app.utils.exceptions import NotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Candidate intake endpoints
router = APIRouter(prefix="/candidates", tags=["Candidates"])


def _error_body(message: str, error: Exception) -> dict:
    return {"message": message, "error": f"Error: {error}"}


async def _read_json(request: Request) -> Any:
    """Decode the request body; anything undecodable is left for the validator to reject."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("")
async def add_candidate_controller(
    request: Request,
    candidate_service: CandidateService = Depends(get_candidate_service),
):
    """
    Add a candidate, or update one when the body carries an id.

    Every failure, validation or storage, is answered with 400.
    """
    data = await _read_json(request)
    try:
        candidate = candidate_service.add_candidate(data)
    except Exception as e:
        logger.warning(f"[API] Error adding candidate: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Error adding candidate", e),
        )

    logger.info(f"[API] Candidate {candidate.get('id')} added")
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"message": "Candidate added successfully", "data": candidate},
    )


@router.get("/{candidate_id}")
async def get_candidate_controller(
    candidate_id: int,
    candidate_service: CandidateService = Depends(get_candidate_service),
):
    """Fetch a stored candidate with its education, work experience and resumes."""
    try:
        return candidate_service.get_candidate(candidate_id)
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body("Candidate not found", e),
        )
    except Exception as e:
        logger.warning(f"[API] Error retrieving candidate {candidate_id}: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Error retrieving candidate", e),
        )
