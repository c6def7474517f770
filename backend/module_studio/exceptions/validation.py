from typing import Optional
from fastapi import status
from .base import ErrorKind, ModuleStudioException


class ValidationError(ModuleStudioException):
    """Exception raised when a required field is missing or an id is malformed"""

    kind = ErrorKind.VALIDATION

    def __init__(self, detail: str, field: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )
        self.field = field
