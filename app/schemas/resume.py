"""
Resume upload related Pydantic schemas.
"""

from pydantic import BaseModel


class UploadResumeResponse(BaseModel):
    filePath: str
    fileType: str


__all__ = ["UploadResumeResponse"]
