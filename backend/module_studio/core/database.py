from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from contextlib import contextmanager
from typing import Iterator
from ..exceptions import StorageError
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable WAL mode and set busy timeout for SQLite connections"""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds in milliseconds
    cursor.close()
    logger.debug("SQLite WAL mode and busy timeout enabled")


class Database:
    """
    Owns the engine and session factory for one module store.

    Constructed explicitly and handed to whoever needs it, so every test can
    build an isolated store.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        # Wait up to 30 seconds for the single SQLite writer lock
        connect_args = {}
        if self.is_sqlite:
            connect_args = {
                "check_same_thread": False,
                "timeout": 30.0,
            }

        self.engine = create_engine(
            database_url,
            connect_args=connect_args,
            echo=echo,
            pool_pre_ping=True,
        )

        # WAL allows multiple readers and a single writer simultaneously
        if self.is_sqlite:
            event.listen(self.engine, "connect", _set_sqlite_pragma)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def ensure_schema(self) -> None:
        """Create the modules table if it does not exist. Never drops anything."""
        from .. import models  # noqa: F401  registers tables on Base.metadata

        logger.info("Ensuring database schema...")
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Error creating database schema: {e}")
            raise StorageError("Failed to initialize database schema") from e
        logger.info("Database schema ready")

    def get_db(self) -> Iterator[Session]:
        """Yield a session and close it afterwards (FastAPI dependency style)"""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager for a session that commits on success"""
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        """Close all pooled connections"""
        self.engine.dispose()
        logger.info("Database connections closed")
