import os
import logging
import time
import uuid

import structlog
from fastapi import FastAPI, Request
from prometheus_fastapi_instrumentator import Instrumentator

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
REQUEST_ID_HEADER = "X-Request-ID"

access_logger = structlog.get_logger("storefront.access")


def add_otel_ids(logger, log_method, event_dict):
    """Stamps the active trace/span ids on the event so logs and traces join up."""
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict


def configure_logging(level: str = LOG_LEVEL):
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_otel_ids,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_request_context(app: FastAPI):
    """
    Binds a request id (the caller's X-Request-ID, or a fresh one) plus the
    method and path into structlog's context for the lifetime of each request,
    echoes the id back on the response and writes one access line per request.
    """

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        access_logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            customer_id=getattr(request.state, "customer_id", None),
        )
        return response


def configure_tracing(app: FastAPI, service_name: str):
    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    trace.set_tracer_provider(provider)

    # Spans are only shipped when a collector is configured
    otlp_endpoint = os.getenv("OTLP_ENDPOINT")
    if otlp_endpoint:
        insecure = os.getenv("OTLP_INSECURE", "true").lower() == "true"
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=insecure))
        )

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,metrics")


def configure_metrics(app: FastAPI):
    # HTTP latency and status histograms, served on /metrics
    Instrumentator(excluded_handlers=["/health", "/metrics"]).instrument(app).expose(
        app, include_in_schema=False
    )


def setup_observability(app: FastAPI, service_name: str):
    """
    Bootstraps logging, request context, tracing and metrics for the API.
    Call once, right after the FastAPI app is created.
    """
    configure_logging()
    configure_request_context(app)
    configure_tracing(app, service_name)
    configure_metrics(app)
