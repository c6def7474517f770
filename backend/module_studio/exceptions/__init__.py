from .base import ErrorKind, ModuleStudioException
from .not_found import NotFoundError
from .validation import ValidationError
from .storage import StorageError, DeleteIneffectiveError

__all__ = [
    "ErrorKind",
    "ModuleStudioException",
    "NotFoundError",
    "ValidationError",
    "StorageError",
    "DeleteIneffectiveError",
]
