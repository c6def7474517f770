import pytest
from fastapi.testclient import TestClient

from module_studio.config import Settings
from module_studio.core.database import Database
from module_studio.main import create_app
from module_studio.services import ModuleService


@pytest.fixture
def database(tmp_path):
    """Create an isolated module store in a temporary SQLite file"""
    database = Database(f"sqlite:///{tmp_path / 'modules.db'}")
    database.ensure_schema()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    """Create a test database session"""
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def module_service(db):
    return ModuleService(db)


@pytest.fixture
def client(database):
    """Create a test client over an empty store"""
    app = create_app(Settings(seed_on_startup=False), database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(database):
    """Create a test client whose startup seeds the default modules"""
    app = create_app(Settings(seed_on_startup=True), database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def module_payload():
    return {
        "prompt": "Summarize:",
        "en": {
            "name": "Summarizer",
            "description": "Summarize text",
            "inputPlaceholder": "Paste text here...",
        },
        "kn": {
            "name": "ಸಾರಾಂಶ",
            "description": "ಪಠ್ಯವನ್ನು ಸಾರಾಂಶಗೊಳಿಸಿ",
            "inputPlaceholder": "ಪಠ್ಯವನ್ನು ಇಲ್ಲಿ ಅಂಟಿಸಿ...",
        },
    }
