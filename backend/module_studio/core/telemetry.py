"""
OpenTelemetry Setup

Instruments FastAPI routes, SQLAlchemy queries and httpx client calls when
``TELEMETRY_ENABLED`` is set. Spans are exported to the console.
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from ..config import settings
import logging

logger = logging.getLogger(__name__)


def setup_telemetry(app, engine=None):
    """
    Setup OpenTelemetry instrumentation for the FastAPI app

    Args:
        app: FastAPI application instance
        engine: SQLAlchemy engine of the module store, if it should be traced

    Returns:
        The configured TracerProvider
    """
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

    resource = Resource.create({
        "service.name": settings.telemetry_service_name,
        "service.version": "1.0.0",
        "service.namespace": "module-studio",
    })

    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    exporter_type = (settings.telemetry_exporter or "").lower()
    if exporter_type == "console":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console exporter enabled")
    else:
        logger.warning(f"Unknown telemetry exporter '{exporter_type}', spans will not be exported")

    FastAPIInstrumentor.instrument_app(app)

    if engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=engine)

    HTTPXClientInstrumentor().instrument()

    logger.info("OpenTelemetry instrumentation enabled")
    return tracer_provider


def get_tracer(name: str):
    """
    Get a tracer for custom spans

    Args:
        name: Name of the tracer (usually __name__)

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
