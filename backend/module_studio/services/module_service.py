from typing import Any, List, Optional
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from ..repositories import ModuleRepository, row_to_module, module_to_columns
from ..schemas import Module, ModulePayload
from ..exceptions import NotFoundError, ValidationError, DeleteIneffectiveError
from ..validation import validate_module_id, validate_module_data, is_storable_id
from ..core.telemetry import get_tracer
from ..utils import get_current_timestamp, next_timestamp
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class ModuleService:
    """
    Module operations over the flat ``modules`` table.

    Every operation validates before touching storage, mutations follow
    validate -> check existence -> write -> re-read, and every returned
    entity is mapped from the row as stored.
    """

    def __init__(self, db: Session):
        self.module_repo = ModuleRepository(db)
        self.db = db

    @staticmethod
    def _coerce_payload(module_data: Any) -> Any:
        validate_module_data(module_data)
        if isinstance(module_data, dict):
            try:
                return ModulePayload.model_validate(module_data)
            except PydanticValidationError as e:
                logger.warning(f"Rejected module payload: {e}")
                raise ValidationError("Invalid module data", field="data") from e
        return module_data

    def list_modules(self) -> List[Module]:
        """List all modules, newest first"""
        logger.debug("Listing modules")
        rows = self.module_repo.get_all_newest_first()
        return [row_to_module(row) for row in rows]

    def get_module_by_id(self, module_id: Any) -> Optional[Module]:
        """Get a module, or None when no row has this ID"""
        module_id = validate_module_id(module_id)
        logger.debug(f"Getting module {module_id}")
        if not is_storable_id(module_id):
            return None
        row = self.module_repo.get_by_id(module_id)
        if row is None:
            return None
        return row_to_module(row)

    def get_module(self, module_id: Any) -> Module:
        """Get a module, raising NotFoundError when it does not exist"""
        module = self.get_module_by_id(module_id)
        if module is None:
            raise NotFoundError("Module", str(module_id))
        return module

    def create_module(self, module_data: Any) -> Module:
        """Create a new module"""
        payload = self._coerce_payload(module_data)
        logger.info(f"Creating module '{payload.en.name.strip()}'")

        with tracer.start_as_current_span("modules.create") as span:
            try:
                now = get_current_timestamp()
                module_id = self.module_repo.insert(
                    created_at=now,
                    updated_at=now,
                    **module_to_columns(payload)
                )
                self.module_repo.commit()
                span.set_attribute("module.id", module_id)
                logger.info(f"Module created successfully: {module_id}")
                return row_to_module(self.module_repo.get_by_id(module_id))
            except Exception as e:
                logger.error(f"Error creating module: {e}")
                self.module_repo.rollback()
                raise

    def update_module(self, module_id: Any, module_data: Any) -> Module:
        """Replace all content fields of a module"""
        module_id = validate_module_id(module_id)
        payload = self._coerce_payload(module_data)
        logger.info(f"Updating module {module_id}")
        if not is_storable_id(module_id):
            raise NotFoundError("Module", str(module_id))

        with tracer.start_as_current_span("modules.update") as span:
            span.set_attribute("module.id", module_id)
            try:
                if not self.module_repo.exists(module_id):
                    raise NotFoundError("Module", str(module_id))

                if self.module_repo.update_columns(module_id, **module_to_columns(payload)) == 0:
                    raise NotFoundError("Module", str(module_id))

                # The write lock is held from here on, so the stamp follows every committed update
                current = self.module_repo.get_by_id(module_id)
                self.module_repo.update_columns(
                    module_id,
                    updated_at=next_timestamp(current.updated_at)
                )
                # Re-read before commit so the result is this write, not a later one
                updated = row_to_module(self.module_repo.get_by_id(module_id))
                self.module_repo.commit()
                logger.info(f"Module updated successfully: {module_id}")
                return updated
            except Exception as e:
                logger.error(f"Error updating module: {e}")
                self.module_repo.rollback()
                raise

    def delete_module(self, module_id: Any) -> None:
        """Delete a module"""
        module_id = validate_module_id(module_id)
        logger.info(f"Deleting module {module_id}")
        if not is_storable_id(module_id):
            raise NotFoundError("Module", str(module_id))

        with tracer.start_as_current_span("modules.delete") as span:
            span.set_attribute("module.id", module_id)
            try:
                if not self.module_repo.exists(module_id):
                    raise NotFoundError("Module", str(module_id))

                if self.module_repo.delete_by_id(module_id) == 0:
                    logger.error(f"Module {module_id} existed but delete affected no rows")
                    raise DeleteIneffectiveError()

                self.module_repo.commit()
                logger.info(f"Module deleted successfully: {module_id}")
            except Exception as e:
                logger.error(f"Error deleting module: {e}")
                self.module_repo.rollback()
                raise

    def clear_modules(self) -> int:
        """Delete every module; return how many were removed"""
        logger.warning("Clearing all modules")
        try:
            removed = self.module_repo.delete_all()
            self.module_repo.commit()
            logger.info(f"Cleared {removed} modules")
            return removed
        except Exception as e:
            logger.error(f"Error clearing modules: {e}")
            self.module_repo.rollback()
            raise
