"""
tests.conftest

Shared fixtures for the gateway/enrichment test suite.

Responsibilities:
- Deterministic settings that never read a real WEATHER_API_KEY from the environment.
- A span recorder backed by an in-memory exporter (no global tracer provider).
- Fake ViaCEP / WeatherAPI collaborators served through `httpx.MockTransport`.
- Injected HTTP clients closed at teardown.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
import pytest_asyncio
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cep_weather.observability.tracing import OtelSpanRecorder
from cep_weather.settings import Settings

DIRECTORY_HOST = "viacep.test"
WEATHER_HOST = "weather.test"

SAO_PAULO = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "complemento": "de 612 a 1510 - lado par",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "env": "test",
        "log_level": "WARNING",
        "enrichment_service_url": "http://enrichment.test",
        "directory_base_url": f"http://{DIRECTORY_HOST}",
        "weather_base_url": f"http://{WEATHER_HOST}",
        "weather_api_key": None,
        "otel_exporter_otlp_endpoint": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def recorder(span_exporter: InMemorySpanExporter) -> OtelSpanRecorder:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return OtelSpanRecorder(provider.get_tracer("tests"))


@dataclass
class FakeCollaborators:
    """
    Canned ViaCEP/WeatherAPI answers. An exception instance in `directory` or
    `weather` is raised as a transport error instead of answering.
    """

    directory: dict[str, Any] | Exception = field(default_factory=lambda: dict(SAO_PAULO))
    directory_status: int = 200
    weather: dict[str, Any] | Exception | str = field(
        default_factory=lambda: {"current": {"temp_c": 25.0}}
    )
    weather_status: int = 200
    calls: list[httpx.Request] = field(default_factory=list)
    _clients: list[httpx.AsyncClient] = field(default_factory=list, repr=False)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [c for c in self.calls if c.url.host == host]

    def _answer(self, body: Any, status: int, request: httpx.Request) -> httpx.Response:
        if isinstance(body, Exception):
            raise httpx.ConnectError(str(body), request=request)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.host == DIRECTORY_HOST:
            return self._answer(self.directory, self.directory_status, request)
        if request.url.host == WEATHER_HOST:
            return self._answer(self.weather, self.weather_status, request)
        return httpx.Response(599, text=f"unexpected host {request.url.host}")

    def client(self) -> httpx.AsyncClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        self._clients.append(http)
        return http

    async def aclose(self) -> None:
        for http in self._clients:
            await http.aclose()


@pytest_asyncio.fixture
async def collaborators() -> AsyncIterator[FakeCollaborators]:
    fake = FakeCollaborators()
    yield fake
    await fake.aclose()


class HttpClients:
    """Builds `httpx.AsyncClient`s to inject into apps and closes them after the test."""

    def __init__(self) -> None:
        self._clients: list[httpx.AsyncClient] = []

    def __call__(self, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
        http = httpx.AsyncClient(transport=transport)
        self._clients.append(http)
        return http

    async def aclose(self) -> None:
        for http in self._clients:
            await http.aclose()


@pytest_asyncio.fixture
async def http_clients() -> AsyncIterator[HttpClients]:
    clients = HttpClients()
    yield clients
    await clients.aclose()


def asgi_client(app: Any, base_url: str = "http://test") -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=base_url)
