from .module_service import ModuleService
from .seed_service import SeedService, DEFAULT_MODULES

__all__ = [
    "ModuleService",
    "SeedService",
    "DEFAULT_MODULES",
]
