from fastapi import HTTPException, status
import enum


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DELETE_INEFFECTIVE = "delete_ineffective"
    STORAGE = "storage"


class ModuleStudioException(HTTPException):
    """Base exception for Module Studio"""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers: dict = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def __str__(self):
        return self.detail
