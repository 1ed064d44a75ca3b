"""
cep_weather.observability.tracing

Span recording and trace-context propagation (OpenTelemetry).

Responsibilities:
- Define the `SpanRecorder` capability handlers receive instead of a global tracer.
- Inject/extract W3C trace context into/from HTTP headers.
- Build the per-service TracerProvider (OTLP gRPC export when configured).
- Instrument outbound HTTP clients with client spans.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol

import httpx
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Span, Status, StatusCode, Tracer
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from cep_weather import __version__
from cep_weather.observability.logging import get_logger
from cep_weather.settings import Settings

log = get_logger(__name__)


class SpanRecorder(Protocol):
    def span(
        self, name: str, *, context: Context | None = None
    ) -> AbstractContextManager[Span]: ...

    def record_error(self, span: Span, error: BaseException) -> None: ...

    def inject(self, headers: MutableMapping[str, str]) -> None: ...

    def extract(self, headers: Mapping[str, str]) -> Context: ...


class OtelSpanRecorder:
    """
    SpanRecorder backed by an OpenTelemetry tracer and an explicit W3C propagator.

    Spans are started as "current" so `inject` picks up whichever span is active
    at the call site; nothing here touches the global tracer provider.
    """

    def __init__(self, tracer: Tracer, propagator: TextMapPropagator | None = None) -> None:
        self._tracer = tracer
        self._propagator = propagator or TraceContextTextMapPropagator()

    @contextmanager
    def span(self, name: str, *, context: Context | None = None) -> Iterator[Span]:
        # Errors are recorded explicitly on failure branches; an exception passing
        # through must not be recorded a second time.
        with self._tracer.start_as_current_span(
            name,
            context=context,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            yield span

    def record_error(self, span: Span, error: BaseException) -> None:
        if not span.is_recording():
            return
        span.record_exception(error)
        span.set_status(Status(StatusCode.ERROR, str(error)))
        span.set_attribute("error.type", type(error).__name__)

    def inject(self, headers: MutableMapping[str, str]) -> None:
        self._propagator.inject(headers)

    def extract(self, headers: Mapping[str, str]) -> Context:
        return self._propagator.extract(carrier=dict(headers))


class NoopSpanRecorder(OtelSpanRecorder):
    """Records nothing; inject adds no headers because no span is ever valid."""

    def __init__(self) -> None:
        super().__init__(trace.NoOpTracer())


def configure_tracing(*, settings: Settings, service_name: str) -> TracerProvider:
    """
    Per-service provider. Without an OTLP endpoint spans are still created (so
    trace ids reach the logs and outbound headers) but never exported.
    """

    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: service_name, SERVICE_VERSION: __version__})
    )
    endpoint = settings.otel_exporter_otlp_endpoint
    if endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        log.info("tracing_export_enabled", endpoint=endpoint)
    else:
        log.info("tracing_export_disabled")
    return provider


def instrument_http_client(http: httpx.AsyncClient, *, provider: TracerProvider) -> None:
    """
    Adds an HTTP client span (and its traceparent) around every request sent
    through `http`, below the manual span active at the call site.
    """

    HTTPXClientInstrumentor.instrument_client(http, tracer_provider=provider)


# --- Module Notes -----------------------------------------------------------
# The propagation format is opaque to the services: they only call
# `inject(headers)` on the way out and `extract(headers)` on the way in.
