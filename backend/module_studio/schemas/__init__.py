from .module import (
    Module,
    ModuleContent,
    ModuleData,
    ModuleCreate,
    ModuleContentPayload,
    ModulePayload,
)
from .envelope import ApiResponse

__all__ = [
    "Module",
    "ModuleContent",
    "ModuleData",
    "ModuleCreate",
    "ModuleContentPayload",
    "ModulePayload",
    "ApiResponse",
]
