from fastapi import status
from .base import ErrorKind, ModuleStudioException


class NotFoundError(ModuleStudioException):
    """Exception raised when a resource is not found"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str = None):
        if identifier:
            detail = f"{resource} with ID {identifier} not found"
        else:
            detail = f"{resource} not found"
        super().__init__(
            detail=detail,
            status_code=status.HTTP_404_NOT_FOUND
        )
        self.resource = resource
        self.identifier = identifier
