"""
OpenTelemetry Setup

Instruments FastAPI routes and SQLAlchemy queries when telemetry is enabled.

This provides:
- Request/response timing for all FastAPI routes
- Database query timing (SQLAlchemy)
- Request correlation via trace IDs (picked up by the log formatter)
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from ..config import settings
from .database import engine
import logging

logger = logging.getLogger(__name__)


def setup_telemetry(app):
    """
    Setup OpenTelemetry instrumentation for FastAPI app

    Args:
        app: FastAPI application instance

    Returns:
        The configured TracerProvider
    """
    resource = Resource.create({
        "service.name": "studio-api",
        "service.version": "1.0.0",
        "service.namespace": "studio",
    })

    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    exporter_type = settings.telemetry_exporter.lower()
    if exporter_type == "console":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console span exporter enabled")
    else:
        logger.warning(f"Unknown telemetry exporter '{exporter_type}', spans will not be exported")

    FastAPIInstrumentor.instrument_app(app)
    SQLAlchemyInstrumentor().instrument(engine=engine)

    logger.info("OpenTelemetry instrumentation enabled for routes and database queries")
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
