"""
Client for the module HTTP API.

Wraps httpx, unwraps the ``{success, data, error, message}`` envelope and
turns every failure into an ApiError. Requests that would obviously be
rejected are refused locally with the same messages the server uses.
"""
from typing import Any, Callable, Dict, List, Optional
from pydantic import BaseModel, TypeAdapter, ValidationError as PydanticValidationError
from ..config import settings
from ..exceptions import ValidationError
from ..schemas import Module
from ..validation import validate_module_id, validate_module_data
import httpx
import logging

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error: Unable to connect to server. Please check your connection."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
INVALID_RESPONSE_MESSAGE = "Invalid response from server"

_MODULE_LIST = TypeAdapter(List[Module])


class ApiError(Exception):
    """Any failure observed by the client: local validation, HTTP error or bad envelope"""

    def __init__(self, message: str, status: int, response: Any = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        self.field = field

    def __repr__(self):
        return f"{self.__class__.__name__}(message={self.message!r}, status={self.status})"


class NetworkError(ApiError):
    """The request never reached the server"""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(message, 0)


def is_api_error(error: Any) -> bool:
    """Check if an error came from the API client"""
    return isinstance(error, ApiError)


def get_error_message(error: Any) -> str:
    """User-facing message for any error"""
    if is_api_error(error):
        return error.message
    if isinstance(error, Exception) and str(error):
        return str(error)
    return UNEXPECTED_ERROR_MESSAGE


def _to_json(module_data: Any) -> Any:
    if isinstance(module_data, BaseModel):
        return module_data.model_dump(mode="json", by_alias=True)
    return module_data


def _parse_module_list(data: Any) -> List[Module]:
    return _MODULE_LIST.validate_python(data or [])


class ModuleApiClient:
    """Typed access to /api/modules"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        """
        Args:
            base_url: Server root, defaults to settings.api_base_url
            http_client: Client to send requests with; one is created (and owned) if None
            timeout: Request timeout for an owned client, defaults to settings.client_timeout
            headers: Extra headers sent with every request
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout or settings.client_timeout)
        self._headers = {"Content-Type": "application/json", **(headers or {})}

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ModuleApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, endpoint: str, parse: Optional[Callable[[Any], Any]] = None,
                **options: Any) -> Any:
        """
        Send a request and return the envelope's ``data``

        Args:
            method: HTTP method
            endpoint: Path below base_url, e.g. "/api/modules"
            parse: Applied to ``data`` before it is returned; a pydantic
                ValidationError from it becomes an ApiError
            **options: Passed to httpx; ``headers`` are merged over the defaults

        Raises:
            NetworkError: The server could not be reached
            ApiError: The server answered with an error or a malformed envelope
        """
        url = f"{self.base_url}{endpoint}"
        headers = {**self._headers, **(options.pop("headers", None) or {})}
        logger.debug(f"API {method} {url}")

        try:
            response = self._client.request(method, url, headers=headers, **options)
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            logger.error(f"API {method} {url} could not connect: {e}")
            raise NetworkError() from e
        except httpx.HTTPError as e:
            logger.error(f"API {method} {url} failed: {e}")
            raise ApiError(str(e) or UNEXPECTED_ERROR_MESSAGE, 0) from e

        logger.debug(f"API {method} {url} -> {response.status_code}")
        body = self._unwrap(response)
        if parse is None:
            return body.get("data")

        try:
            return parse(body.get("data"))
        except PydanticValidationError as e:
            logger.error(f"API {method} {url} returned data of the wrong shape: {e}")
            raise ApiError(INVALID_RESPONSE_MESSAGE, response.status_code, body) from e

    @staticmethod
    def _unwrap(response: httpx.Response) -> Dict[str, Any]:
        status_line = f"HTTP {response.status_code}: {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            raise ApiError(status_line, response.status_code, response.text)

        if not response.is_success:
            raise ApiError(body.get("error") or status_line, response.status_code, body)

        if not body.get("success"):
            raise ApiError(body.get("error") or "API request failed", response.status_code, body)

        return body

    @staticmethod
    def _preflight(module_id: Any = None, module_data: Any = None, check_id: bool = False,
                   check_data: bool = False) -> Optional[int]:
        try:
            if check_id:
                module_id = validate_module_id(module_id)
            if check_data:
                validate_module_data(module_data)
        except ValidationError as e:
            raise ApiError(e.detail, e.status_code, field=e.field) from e
        return module_id

    def fetch_modules(self) -> List[Module]:
        """Fetch all modules, newest first"""
        try:
            return self.request("GET", "/api/modules", parse=_parse_module_list)
        except ApiError as e:
            logger.error(f"Failed to fetch modules: {e}")
            raise

    def get_module(self, module_id: int) -> Module:
        """Fetch one module"""
        module_id = self._preflight(module_id, check_id=True)
        try:
            return self.request("GET", f"/api/modules/{module_id}", parse=Module.model_validate)
        except ApiError as e:
            logger.error(f"Failed to fetch module {module_id}: {e}")
            raise

    def create_module(self, module_data: Any) -> Module:
        """Create a module from ``{prompt, en, kn}``"""
        self._preflight(module_data=module_data, check_data=True)
        try:
            return self.request("POST", "/api/modules", parse=Module.model_validate,
                                json=_to_json(module_data))
        except ApiError as e:
            logger.error(f"Failed to create module: {e}")
            raise

    def update_module(self, module_id: int, module_data: Any) -> Module:
        """Replace the content of a module"""
        module_id = self._preflight(module_id, module_data, check_id=True, check_data=True)
        try:
            return self.request("PUT", f"/api/modules/{module_id}", parse=Module.model_validate,
                                json=_to_json(module_data))
        except ApiError as e:
            logger.error(f"Failed to update module {module_id}: {e}")
            raise

    def delete_module(self, module_id: int) -> None:
        """Delete a module"""
        module_id = self._preflight(module_id, check_id=True)
        try:
            self.request("DELETE", f"/api/modules/{module_id}")
        except ApiError as e:
            logger.error(f"Failed to delete module {module_id}: {e}")
            raise
