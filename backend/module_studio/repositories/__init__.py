from .base import BaseRepository
from .module_repository import ModuleRepository
from .mapping import row_to_module, module_to_columns

__all__ = [
    "BaseRepository",
    "ModuleRepository",
    "row_to_module",
    "module_to_columns",
]
