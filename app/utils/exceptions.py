"""
Application exceptions.

Every error carries a user-facing message and the component that raised it.
"""

from typing import Optional


class AppError(Exception):
    """Base error for the candidate intake backend"""

    def __init__(self, message: str, component: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.component = component

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Raised by the validator on the first rule a payload breaks"""

    def __init__(self, message: str):
        super().__init__(message, "Validator")


class NotFoundError(AppError):
    """Update or lookup target does not exist"""


class DuplicateError(AppError):
    """Unique constraint violation (candidate email)"""


class ConnectivityError(AppError):
    """Storage backend unreachable"""
