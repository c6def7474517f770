from contextlib import asynccontextmanager
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from .core.database import Database
from .core.logging_config import setup_logging
from .api.routes import modules
from .api.exceptions import (
    module_studio_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .exceptions import ModuleStudioException
from .schemas import Module
from .services import ModuleService, SeedService
from .config import settings, Settings
import logging

logger = logging.getLogger(__name__)


def initialize_database(database: Database, seed: bool = True) -> List[Module]:
    """Create the schema and, if asked, seed an empty store. Returns seeded modules."""
    database.ensure_schema()
    if not seed:
        return []
    with database.session() as db:
        return SeedService(ModuleService(db)).seed()


def create_app(app_settings: Settings = None, database: Database = None) -> FastAPI:
    """
    Build the API application

    Args:
        app_settings: Settings to use (module settings if None)
        database: Store to serve (built from app_settings.database_url if None)

    Returns:
        FastAPI application; the store is initialized when its lifespan starts
    """
    app_settings = app_settings or settings
    if database is None:
        database = Database(app_settings.database_url, echo=app_settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Seeding finishes before the first request is accepted
        initialize_database(database, seed=app_settings.seed_on_startup)
        logger.info("Database initialized")
        yield
        database.dispose()

    app = FastAPI(title="Module Studio API", version="1.0.0", lifespan=lifespan)
    app.state.database = database
    app.state.settings = app_settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(ModuleStudioException, module_studio_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(modules.router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": "Module Studio API"}

    @app.get("/health")
    def health():
        return {"status": "OK", "message": "Server is running"}

    if app_settings.telemetry_enabled:
        from .core.telemetry import setup_telemetry
        setup_telemetry(app, engine=database.engine)

    return app


# Setup logging first
setup_logging()

app = create_app()
