"""
cep_weather.api.app

FastAPI app factories for the gateway and enrichment services.

Responsibilities:
- Build each FastAPI application and register routers/middleware/error handlers.
- Wire settings, HTTP client, span recorder and collaborators into the stage service.
- Close what the app created itself (HTTP client, tracer provider) on shutdown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import httpx
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from cep_weather import __version__
from cep_weather.api.errors import register_error_handlers
from cep_weather.api.routers.gateway import router as gateway_router
from cep_weather.api.routers.health import router as health_router
from cep_weather.api.routers.weather import router as weather_router
from cep_weather.clients.directory import DirectoryClient
from cep_weather.clients.enrichment import EnrichmentClient
from cep_weather.clients.weather import WeatherProvider, build_weather_provider
from cep_weather.observability.logging import configure_logging, get_logger
from cep_weather.observability.middleware import RequestContextMiddleware
from cep_weather.observability.tracing import (
    OtelSpanRecorder,
    SpanRecorder,
    configure_tracing,
    instrument_http_client,
)
from cep_weather.services.enrichment_service import EnrichmentService
from cep_weather.services.gateway_service import GatewayService
from cep_weather.settings import Settings

log = get_logger(__name__)

GATEWAY_SERVICE_NAME = "cep-gateway"
ENRICHMENT_SERVICE_NAME = "cep-enrichment"


def _lifespan(
    *,
    service_name: str,
    settings: Settings,
    http: httpx.AsyncClient | None,
    provider: TracerProvider | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    # `http` / `provider` are only the resources this app created; injected ones
    # belong to the caller.
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", service=service_name, env=settings.env)
        try:
            yield
        finally:
            if http is not None:
                await http.aclose()
            if provider is not None:
                # Flushes the batch span processor before exit.
                provider.shutdown()
            log.info("shutdown", service=service_name)

    return lifespan


def _base_app(*, title: str, lifespan) -> FastAPI:
    app = FastAPI(title=title, version=__version__, lifespan=lifespan)
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    return app


def _tracing(
    *, settings: Settings, service_name: str, recorder: SpanRecorder | None
) -> tuple[SpanRecorder, TracerProvider | None]:
    if recorder is not None:
        return recorder, None
    provider = configure_tracing(settings=settings, service_name=service_name)
    return OtelSpanRecorder(provider.get_tracer(service_name)), provider


def create_gateway_app(
    *,
    settings: Settings,
    http: httpx.AsyncClient | None = None,
    recorder: SpanRecorder | None = None,
) -> FastAPI:
    configure_logging(service_name=GATEWAY_SERVICE_NAME, level=settings.log_level)

    recorder, provider = _tracing(
        settings=settings, service_name=GATEWAY_SERVICE_NAME, recorder=recorder
    )
    owned_http = None
    if http is None:
        http = owned_http = httpx.AsyncClient(timeout=settings.gateway_timeout_s)
        if provider is not None:
            instrument_http_client(http, provider=provider)

    service = GatewayService(
        recorder=recorder,
        client=EnrichmentClient(settings=settings, http=http, recorder=recorder),
    )

    app = _base_app(
        title="CEP Gateway",
        lifespan=_lifespan(
            service_name=GATEWAY_SERVICE_NAME,
            settings=settings,
            http=owned_http,
            provider=provider,
        ),
    )
    app.state.http = http
    app.state.gateway_service = service
    app.include_router(gateway_router, tags=["gateway"])
    return app


def create_enrichment_app(
    *,
    settings: Settings,
    http: httpx.AsyncClient | None = None,
    recorder: SpanRecorder | None = None,
    weather: WeatherProvider | None = None,
) -> FastAPI:
    configure_logging(service_name=ENRICHMENT_SERVICE_NAME, level=settings.log_level)

    recorder, provider = _tracing(
        settings=settings, service_name=ENRICHMENT_SERVICE_NAME, recorder=recorder
    )
    owned_http = None
    if http is None:
        http = owned_http = httpx.AsyncClient(timeout=settings.downstream_timeout_s)
        if provider is not None:
            instrument_http_client(http, provider=provider)

    service = EnrichmentService(
        recorder=recorder,
        directory=DirectoryClient(settings=settings, http=http, recorder=recorder),
        # Strategy is fixed for the process lifetime.
        weather=weather
        or build_weather_provider(settings=settings, http=http, recorder=recorder),
    )

    app = _base_app(
        title="CEP Weather Enrichment",
        lifespan=_lifespan(
            service_name=ENRICHMENT_SERVICE_NAME,
            settings=settings,
            http=owned_http,
            provider=provider,
        ),
    )
    app.state.http = http
    app.state.enrichment_service = service
    app.include_router(weather_router, tags=["weather"])
    return app


# --- Module Notes -----------------------------------------------------------
# Tests inject `http` (ASGI/Mock transports) and a recorder backed by an
# in-memory exporter; production lets the factories build both.
