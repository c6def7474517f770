from pydantic_settings import BaseSettings
from typing import Optional
import logging

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    database_url: str = "sqlite:///./modules.db"
    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    # Client API
    api_base_url: str = "http://localhost:3001"
    client_timeout: float = 10.0
    # Startup
    seed_on_startup: bool = True
    # Logging
    log_level: str = "INFO"
    debug: bool = False
    # CORS
    cors_origins: list = ["http://localhost:5173"]
    # Telemetry
    telemetry_enabled: bool = False
    telemetry_service_name: str = "module-studio-api"
    telemetry_exporter: Optional[str] = "console"

    class Config:
        env_file = ".env"
        case_sensitive = False


def validate_settings(settings: Settings) -> None:
    """Validate settings"""
    errors = []

    if not 0 < settings.port < 65536:
        errors.append(f"PORT must be between 1 and 65535, got {settings.port}")

    if settings.log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")

    if not settings.api_base_url.startswith(("http://", "https://")):
        errors.append("API_BASE_URL must start with http:// or https://")

    if not settings.database_url:
        errors.append("DATABASE_URL is required")

    if errors:
        error_message = "Configuration errors:\n" + "\n".join(f"  - {error}" for error in errors)
        raise ValueError(error_message)


settings = Settings()
validate_settings(settings)
logger.info("Settings loaded and validated successfully")
