from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status

from app.schemas.resume import UploadResumeResponse
from app.services.container import get_resume_service
from app.services.resume_service import ResumeService
from app.utils.exceptions import AppError
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Resume upload endpoints
router = APIRouter(tags=["Resume"])


@router.post("/upload", response_model=UploadResumeResponse)
async def upload_resume(
    file: UploadFile = File(...),
    resume_service: ResumeService = Depends(get_resume_service),
):
    """
    Upload a resume file.

    Stores PDF or DOC/DOCX files and returns the path and type to send as
    the candidate's `cv`.
    """
    # Handle case where file might be None or empty
    if not file or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file provided"
        )

    logger.info(f"[API] Received resume upload: {file.filename} ({file.content_type})")

    file_content = await file.read()

    is_valid, error_msg = resume_service.validate_file(
        file_content, file.filename, file.content_type
    )
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_msg
        )

    try:
        file_path = resume_service.save_file(file_content, file.filename)
    except AppError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    file_type = resume_service.resolve_file_type(file.filename, file.content_type)
    return UploadResumeResponse(filePath=file_path, fileType=file_type)
