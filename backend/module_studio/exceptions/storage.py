from fastapi import status
from .base import ErrorKind, ModuleStudioException


class StorageError(ModuleStudioException):
    """Exception raised when the storage engine fails.

    The original driver error is kept as ``__cause__``; ``detail`` is never
    sent to clients.
    """

    kind = ErrorKind.STORAGE

    def __init__(self, detail: str = "Storage operation failed"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


class DeleteIneffectiveError(ModuleStudioException):
    """Exception raised when a delete passed its existence check but removed no rows"""

    kind = ErrorKind.DELETE_INEFFECTIVE

    def __init__(self, detail: str = "Module deletion failed - no rows affected"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
