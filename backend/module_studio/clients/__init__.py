from .module_api import (
    ModuleApiClient,
    ApiError,
    NetworkError,
    NETWORK_ERROR_MESSAGE,
    is_api_error,
    get_error_message,
)

__all__ = [
    "ModuleApiClient",
    "ApiError",
    "NetworkError",
    "NETWORK_ERROR_MESSAGE",
    "is_api_error",
    "get_error_message",
]
