"""
Resume Upload Service

Checks uploaded resume files and stores them on disk. The returned path and
MIME type are what a candidate form sends back as its `cv`.
"""

import re
from pathlib import Path
from typing import Optional, Tuple

from app.config import Config
from app.services.validator import ALLOWED_RESUME_TYPES
from app.utils.datetime_utils import get_now_utc
from app.utils.exceptions import AppError
from app.utils.logger import get_logger

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class ResumeService:
    """Service for storing resume files"""

    EXTENSION_MIME_TYPES = {
        '.pdf': 'application/pdf',
        '.doc': 'application/msword',
        '.docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    }
    ALLOWED_EXTENSIONS = set(EXTENSION_MIME_TYPES)
    ALLOWED_MIME_TYPES = ALLOWED_RESUME_TYPES

    def __init__(self, config: Config):
        self.config = config
        self.upload_dir = Path(config.upload.directory)

    @property
    def max_file_size(self) -> int:
        return self.config.upload.max_file_size

    def validate_file(self, file_content: bytes, filename: str, content_type: Optional[str] = None) -> Tuple[bool, Optional[str]]:
        """
        Validate resume file.

        Args:
            file_content: File content as bytes
            filename: Original filename
            content_type: MIME type of file

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not file_content:
            return False, "Uploaded file is empty"

        # Check file size
        if len(file_content) > self.max_file_size:
            return False, f"File size exceeds maximum of {self.max_file_size / 1024 / 1024:g}MB"

        # Check extension
        file_ext = Path(filename).suffix.lower()
        if file_ext not in self.ALLOWED_EXTENSIONS:
            return False, f"File type not supported. Allowed: {', '.join(sorted(self.ALLOWED_EXTENSIONS))}"

        # Check MIME type if provided
        if content_type and content_type not in self.ALLOWED_MIME_TYPES:
            return False, "Invalid file type. Expected PDF or DOC/DOCX"

        return True, None

    def resolve_file_type(self, filename: str, content_type: Optional[str] = None) -> str:
        """MIME type of an accepted file, taken from its extension when the client sent none."""
        return content_type or self.EXTENSION_MIME_TYPES[Path(filename).suffix.lower()]

    def save_file(self, file_content: bytes, filename: str) -> str:
        """
        Write the file under the upload directory with a timestamped name.

        Returns:
            Path of the stored file

        Raises:
            AppError: If the file cannot be written
        """
        safe_name = _UNSAFE_CHARS.sub("_", Path(filename).name) or "resume"
        stored_name = f"{int(get_now_utc().timestamp() * 1000)}-{safe_name}"
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            target = self.upload_dir / stored_name
            target.write_bytes(file_content)
        except OSError as e:
            logger.error(f"[ResumeService] Failed to store {filename}: {e}")
            raise AppError(f"Failed to store file: {str(e)}", "ResumeService")

        logger.info(f"[ResumeService] ✅ Stored resume {stored_name} ({len(file_content)} bytes)")
        return str(target)
