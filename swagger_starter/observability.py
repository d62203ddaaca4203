"""
Swagger Starter logging and tracing.

Logging is always configured from STARTER_LOG_LEVEL. Tracing (OpenTelemetry)
needs the `otel` extra and is switched on with:
- STARTER_OTEL_ENABLED=true
- STARTER_OTEL_SERVICE_NAME (defaults to the service name in config)
- STARTER_OTEL_EXPORTER=console|otlp
- STARTER_OTEL_OTLP_ENDPOINT=https://... (only if exporter=otlp)

Spans carry the service version and the provider API prefix, and health
checks are not traced.
"""

from __future__ import annotations

import logging
import os
from typing import Dict

from swagger_starter.config import API_PREFIX, LOG_FORMAT, LOG_LEVEL, SERVICE_NAME, STARTER_VERSION

logger = logging.getLogger(__name__)

EXPORTERS = ("console", "otlp")
UNTRACED_URLS = "health"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def tracing_enabled() -> bool:
    raw = os.environ.get("STARTER_OTEL_ENABLED", "")
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def tracing_exporter() -> str:
    exporter = os.environ.get("STARTER_OTEL_EXPORTER", "console").strip().lower()
    if exporter not in EXPORTERS:
        logger.warning("unknown STARTER_OTEL_EXPORTER %r, using console", exporter)
        return "console"
    return exporter


def resource_attributes() -> Dict[str, str]:
    """OpenTelemetry resource attributes identifying this provider."""
    return {
        "service.name": os.environ.get("STARTER_OTEL_SERVICE_NAME", SERVICE_NAME),
        "service.version": STARTER_VERSION,
        "service.namespace": "liberty-app-accelerator",
        "starter.technology": "swagger",
        "starter.api_prefix": API_PREFIX,
    }


def configure_tracing() -> bool:
    if not tracing_enabled():
        return False
    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    except ImportError:
        logger.warning("STARTER_OTEL_ENABLED is set but opentelemetry-sdk is not installed")
        return False

    attributes = resource_attributes()
    exporter = tracing_exporter()
    if exporter == "otlp":
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        endpoint = os.environ.get("STARTER_OTEL_OTLP_ENDPOINT")
        span_exporter = OTLPSpanExporter(endpoint=endpoint) if endpoint else OTLPSpanExporter()
    else:
        span_exporter = ConsoleSpanExporter()

    provider = TracerProvider(resource=Resource.create(attributes))
    provider.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(provider)
    logger.info("tracing %s %s with the %s exporter",
                attributes["service.name"], attributes["service.version"], exporter)
    return True


def instrument_app(app) -> bool:
    if not tracing_enabled():
        return False
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
        from opentelemetry.instrumentation.logging import LoggingInstrumentor
    except ImportError:
        return False

    LoggingInstrumentor().instrument(set_logging_format=True)
    FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)
    return True
