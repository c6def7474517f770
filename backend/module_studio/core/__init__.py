from .database import Base, Database
from .logging_config import setup_logging
from .telemetry import setup_telemetry, get_tracer

__all__ = [
    "Base",
    "Database",
    "setup_logging",
    "setup_telemetry",
    "get_tracer",
]
