from pydantic import BaseModel
from typing import Any, Optional


class ApiResponse(BaseModel):
    """Uniform wrapper around every HTTP response body"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None

    def to_body(self) -> dict:
        """Only the keys that apply are sent"""
        return self.model_dump(exclude_unset=True)
