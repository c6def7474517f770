"""
Dependency providers for API routes.

The store is created by the application factory and kept on ``app.state``;
each request gets its own session and service.
"""
from typing import Iterator
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from ..core.database import Database
from ..services import ModuleService


def get_database(request: Request) -> Database:
    """Get the Database owned by the running application"""
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """Get a database session for the duration of one request"""
    yield from database.get_db()


def get_module_service(db: Session = Depends(get_db)) -> ModuleService:
    """
    Get ModuleService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        ModuleService instance
    """
    return ModuleService(db)
