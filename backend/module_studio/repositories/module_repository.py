from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.module import Module
from .base import BaseRepository


class ModuleRepository(BaseRepository[Module]):
    """Repository for Module rows"""

    def __init__(self, db: Session):
        super().__init__(Module, db)

    def get_all_newest_first(self) -> List[Module]:
        """Get all modules, most recently created first"""
        return self.list_ordered(Module.created_at.desc(), Module.id.desc())

    def get_by_id(self, module_id: int) -> Optional[Module]:
        """Get a module row by ID"""
        return self.get(module_id)
