# corenlp_bridge/shared/observability.py
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from corenlp_bridge.shared.config import settings

def setup_observability() -> TracerProvider:
    """
    Configures OpenTelemetry for the process.

    1. Sets the Global Tracer Provider.
    2. In DEBUG mode, exports finished spans to the console.

    The global provider can only be set once per process, so a provider
    installed earlier (by this function or by the host application) is kept.
    """
    current = trace.get_tracer_provider()
    if isinstance(current, TracerProvider):
        return current

    resource = Resource.create(attributes={
        "service.name": settings.APP_NAME,
    })

    provider = TracerProvider(resource=resource)

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
