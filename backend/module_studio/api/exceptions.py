from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from ..exceptions import ErrorKind, ModuleStudioException
from .responses import error_response
import logging

logger = logging.getLogger(__name__)

# Storage failures reach clients only as these messages
FAILURE_MESSAGES = {
    "GET": "Failed to fetch modules",
    "POST": "Failed to create module",
    "PUT": "Failed to update module",
    "DELETE": "Failed to delete module",
}
GENERIC_FAILURE_MESSAGE = "Internal server error"


def sanitized_failure_message(request: Request) -> str:
    """Client-facing message for a failure whose details must not leak"""
    if request.url.path.startswith("/api/modules"):
        return FAILURE_MESSAGES.get(request.method, GENERIC_FAILURE_MESSAGE)
    return GENERIC_FAILURE_MESSAGE


async def module_studio_exception_handler(request: Request, exc: ModuleStudioException):
    """Map tagged application errors to status codes"""
    if exc.kind in (ErrorKind.VALIDATION, ErrorKind.NOT_FOUND):
        logger.warning(f"{exc.kind.value}: {exc.detail} - {request.method} {request.url}")
        return error_response(exc.detail, exc.status_code, headers=exc.headers)

    if exc.kind == ErrorKind.DELETE_INEFFECTIVE:
        logger.error(f"Delete ineffective: {exc.detail} - {request.method} {request.url}")
        return error_response(exc.detail, exc.status_code)

    logger.error(f"Storage error: {exc.detail} - {request.method} {request.url}", exc_info=exc)
    return error_response(sanitized_failure_message(request), status.HTTP_500_INTERNAL_SERVER_ERROR)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies with a 400 envelope"""
    errors = exc.errors()
    logger.warning(f"Validation error: {errors} - {request.url}")
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"Invalid module data: {location}: {first.get('msg')}" if location else f"Invalid module data: {first.get('msg')}"
    else:
        detail = "Invalid module data"
    return error_response(detail, status.HTTP_400_BAD_REQUEST)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc} - {request.url}", exc_info=True)
    return error_response(sanitized_failure_message(request), status.HTTP_500_INTERNAL_SERVER_ERROR)
