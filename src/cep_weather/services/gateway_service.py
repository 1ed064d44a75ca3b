"""
cep_weather.services.gateway_service

Gateway stage: validate the CEP locally, then relay the enrichment service's answer.

Responsibilities:
- Decode and validate the inbound body (400 / 422 before any network call).
- Forward valid requests to the enrichment service with trace context attached.
- Hand back downstream status/body unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping

from cep_weather.clients.enrichment import DownstreamResponse, EnrichmentClient
from cep_weather.domain.cep import validate_cep
from cep_weather.domain.errors import InvalidFormat, PipelineError
from cep_weather.domain.models import decode_lookup_request
from cep_weather.observability.logging import get_logger
from cep_weather.observability.tracing import SpanRecorder

log = get_logger(__name__)


class GatewayService:
    def __init__(self, *, recorder: SpanRecorder, client: EnrichmentClient) -> None:
        self._recorder = recorder
        self._client = client

    async def forward(self, raw_body: bytes, headers: Mapping[str, str]) -> DownstreamResponse:
        # Honour a caller-supplied traceparent; otherwise this span starts a new trace.
        parent = self._recorder.extract(headers)
        with self._recorder.span("handle-cep-request", context=parent) as span:
            try:
                request = decode_lookup_request(raw_body)

                with self._recorder.span("validate-cep") as validate_span:
                    if not validate_cep(request.cep):
                        err = InvalidFormat(f"invalid zipcode: {request.cep!r}")
                        self._recorder.record_error(validate_span, err)
                        raise err

                downstream = await self._client.forward(request)
            except PipelineError as e:
                self._recorder.record_error(span, e)
                log.warning("gateway_request_failed", status=e.status_code, reason=e.detail)
                raise

            log.info("gateway_request_relayed", status=downstream.status_code)
            return downstream
