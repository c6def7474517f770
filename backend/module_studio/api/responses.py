from typing import Any
from fastapi import status
from fastapi.responses import JSONResponse
from ..schemas import ApiResponse

_UNSET = object()


def success_response(
    data: Any = _UNSET,
    message: str = None,
    status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Wrap a payload in a success envelope"""
    fields = {"success": True}
    if data is not _UNSET:
        fields["data"] = data
    if message is not None:
        fields["message"] = message
    return JSONResponse(status_code=status_code, content=ApiResponse(**fields).to_body())


def error_response(error: str, status_code: int, headers: dict = None) -> JSONResponse:
    """Wrap an error message in a failure envelope"""
    body = ApiResponse(success=False, error=error).to_body()
    return JSONResponse(status_code=status_code, content=body, headers=headers)
