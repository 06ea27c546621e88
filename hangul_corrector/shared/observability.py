# hangul_corrector\shared\observability.py
import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from hangul_corrector import __version__
from hangul_corrector.shared.config import settings

logger = logging.getLogger(__name__)

def setup_telemetry(service_name: str = settings.OTEL_SERVICE_NAME):
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("Telemetry disabled: No OTEL_EXPORTER_OTLP_ENDPOINT configured.")
        return

    logger.info(f"Initializing Telemetry for service: {service_name}")

    # 1. Define Resource (Service Identity)
    resource = Resource.create(attributes={
        "service.name": service_name,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    # 2. Configure Tracer Provider
    trace_provider = TracerProvider(resource=resource)

    # 3. Configure Exporter (Send data to Jaeger/Tempo)
    otlp_exporter = OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    # 4. Optional: Console Exporter for local Debugging
    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)

def instrument_fastapi(app):
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests.
    """
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
