from typing import Generic, TypeVar, Type, Optional, List, Any
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..core.database import Base
from ..exceptions import StorageError
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Statement execution for one table.

    The only place that issues data-manipulation statements. Engine errors are
    re-raised as StorageError without interpretation.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _storage_error(self, action: str, error: SQLAlchemyError) -> StorageError:
        logger.error(f"Storage error while trying to {action} {self.model.__name__}: {error}")
        return StorageError(f"Failed to {action} {self.model.__name__}")

    def get(self, id: int) -> Optional[ModelType]:
        """Get a record by ID, always reloaded from the database"""
        try:
            stmt = select(self.model).where(self.model.id == id).execution_options(populate_existing=True)
            return self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            raise self._storage_error("fetch", e) from e

    def exists(self, id: int) -> bool:
        """Check whether a record with the ID exists"""
        try:
            stmt = select(self.model.id).where(self.model.id == id)
            return self.db.execute(stmt).first() is not None
        except SQLAlchemyError as e:
            raise self._storage_error("check", e) from e

    def list_ordered(self, *order_by: Any) -> List[ModelType]:
        """Get all records in the given order"""
        try:
            stmt = select(self.model).order_by(*order_by)
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise self._storage_error("list", e) from e

    def count(self) -> int:
        """Count all records"""
        try:
            return self.db.execute(select(func.count()).select_from(self.model)).scalar_one()
        except SQLAlchemyError as e:
            raise self._storage_error("count", e) from e

    def insert(self, **columns: Any) -> int:
        """Insert a record and return its new ID"""
        try:
            instance = self.model(**columns)
            self.db.add(instance)
            self.db.flush()  # Flush instead of commit to allow rollback
            logger.debug(f"Created {self.model.__name__} with id: {instance.id}")
            return instance.id
        except SQLAlchemyError as e:
            raise self._storage_error("create", e) from e

    def update_columns(self, id: int, **columns: Any) -> int:
        """Replace columns of one record in a single UPDATE; return the affected row count"""
        try:
            stmt = (
                update(self.model)
                .where(self.model.id == id)
                .values(**columns)
                .execution_options(synchronize_session=False)
            )
            result = self.db.execute(stmt)
            self.db.expire_all()
            logger.debug(f"Updated {self.model.__name__} with id: {id} ({result.rowcount} rows)")
            return result.rowcount
        except SQLAlchemyError as e:
            raise self._storage_error("update", e) from e

    def delete_by_id(self, id: int) -> int:
        """Delete one record; return the affected row count"""
        try:
            stmt = delete(self.model).where(self.model.id == id).execution_options(synchronize_session=False)
            result = self.db.execute(stmt)
            self.db.expire_all()
            logger.debug(f"Deleted {self.model.__name__} with id: {id} ({result.rowcount} rows)")
            return result.rowcount
        except SQLAlchemyError as e:
            raise self._storage_error("delete", e) from e

    def delete_all(self) -> int:
        """Delete every record; return the affected row count"""
        try:
            result = self.db.execute(delete(self.model).execution_options(synchronize_session=False))
            self.db.expire_all()
            return result.rowcount
        except SQLAlchemyError as e:
            raise self._storage_error("delete", e) from e

    def commit(self) -> None:
        """Commit the current transaction"""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error("commit", e) from e

    def rollback(self) -> None:
        """Rollback the current transaction"""
        self.db.rollback()
