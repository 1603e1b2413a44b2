from fastapi import FastAPI
from loguru import logger
from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.psycopg2 import Psycopg2Instrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from app.core.config import get_settings

# Health probes and the long-lived dashboard socket are not traced
EXCLUDED_URLS = "/api/health,/ws"


def service_resource() -> Resource:
    """OTel resource shared by traces, metrics and logs."""
    settings = get_settings()
    return Resource.create(
        {
            "service.name": settings.OTEL_SERVICE_NAME,
            "deployment.environment": settings.ENVIRONMENT,
        }
    )


def _instrument_once(app: FastAPI) -> None:
    if getattr(setup_telemetry, "_instrumented", False):
        return
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
    SQLAlchemyInstrumentor().instrument(enable_commenter=True)  # type: ignore
    Psycopg2Instrumentor().instrument(  # type: ignore
        enable_commenter=True, skip_dep_check=True
    )
    setup_telemetry._instrumented = True  # type: ignore


def setup_telemetry(app: FastAPI) -> bool:
    """
    Export traces and metrics over OTLP when an endpoint is configured.

    Registers OTLP tracer and meter providers built from the application
    settings, then instruments the FastAPI app, SQLAlchemy and psycopg2 once
    per process. Setup failures are logged and swallowed so the API still
    starts without a collector.

    Parameters:
        app (FastAPI): Application to instrument.

    Returns:
        bool: True if telemetry was activated, False if it stayed disabled.
    """
    settings = get_settings()
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    if not endpoint:
        logger.warning("No OTLP endpoint configured; tracing and metrics are off")
        return False
    try:
        resource = service_resource()
        insecure = settings.OTEL_EXPORTER_OTLP_INSECURE

        tracer_provider = TracerProvider(resource=resource)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=insecure))
        )
        trace.set_tracer_provider(tracer_provider)

        metric_reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=endpoint, insecure=insecure)
        )
        metrics.set_meter_provider(
            MeterProvider(resource=resource, metric_readers=[metric_reader])
        )

        _instrument_once(app)

        logger.info(f"Sending traces and metrics to {endpoint}")
        return True

    except Exception as e:
        logger.error(f"Could not start tracing and metrics: {e}")
        return False
