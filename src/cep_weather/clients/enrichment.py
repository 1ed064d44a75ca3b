"""
cep_weather.clients.enrichment

Gateway-side client for the enrichment service hop.

Responsibilities:
- POST the lookup body to `{ENRICHMENT_SERVICE_URL}/weather` with trace headers injected.
- Return the downstream status and JSON body untouched for relaying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from cep_weather.domain.errors import GatewayUnavailable
from cep_weather.domain.models import LookupRequest
from cep_weather.observability.tracing import SpanRecorder
from cep_weather.settings import Settings

WEATHER_PATH = "/weather"


@dataclass(frozen=True, slots=True)
class DownstreamResponse:
    status_code: int
    body: Any


class EnrichmentClient:
    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        recorder: SpanRecorder,
    ) -> None:
        self._settings = settings
        self._http = http
        self._recorder = recorder

    async def forward(self, request: LookupRequest) -> DownstreamResponse:
        with self._recorder.span("call-enrichment-service") as span:
            url = f"{self._settings.enrichment_service_url.rstrip('/')}{WEATHER_PATH}"
            span.set_attribute("http.url", url)

            headers = {"Content-Type": "application/json"}
            # Injected while "call-enrichment-service" is current, so it becomes the remote parent.
            self._recorder.inject(headers)

            try:
                r = await self._http.post(
                    url,
                    json=request.model_dump(),
                    headers=headers,
                    timeout=self._settings.gateway_timeout_s,
                )
            except httpx.HTTPError as e:
                self._recorder.record_error(span, e)
                raise GatewayUnavailable(f"enrichment service unreachable: {e}") from e

            span.set_attribute("http.status_code", r.status_code)
            try:
                body = r.json()
            except ValueError:
                # Relayed as JSON null; status code still passes through.
                body = None
            return DownstreamResponse(status_code=r.status_code, body=body)


# --- Module Notes -----------------------------------------------------------
# No retries: a single transport failure ends the request with a plain-text 500.
