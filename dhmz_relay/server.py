import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from starlette.exceptions import HTTPException as StarletteHTTPException

from dhmz_relay import __version__
from dhmz_relay.fallback import fallback_exception_handler
from dhmz_relay.relay.route import router
from dhmz_relay.vars import OTLP_ENDPOINT, OTLP_HEADERS, SERVICE_NAME

logger = logging.getLogger("uvicorn.error")


def configure_tracing(app: FastAPI) -> None:
    """Install the SDK tracer provider; spans are exported only when OTLP_ENDPOINT is set."""
    trace.set_tracer_provider(
        TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    )
    tracer_provider = trace.get_tracer_provider()
    if OTLP_ENDPOINT:
        otlp_exporter = OTLPSpanExporter(
            endpoint=OTLP_ENDPOINT,
            headers=OTLP_HEADERS or None,
        )
        tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        logger.info(f"Exporting traces to {OTLP_ENDPOINT}")

    FastAPIInstrumentor.instrument_app(app)


app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)
app.add_exception_handler(StarletteHTTPException, fallback_exception_handler)

configure_tracing(app)

app.include_router(router)
