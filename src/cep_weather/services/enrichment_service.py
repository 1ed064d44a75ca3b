"""
cep_weather.services.enrichment_service

Enrichment stage: CEP -> locality -> current temperature in three scales.

Responsibilities:
- Continue the caller's trace from inbound headers.
- Re-validate the CEP (the gateway's check is not trusted).
- Resolve the locality, fetch the Celsius reading, convert and round.
"""

from __future__ import annotations

from collections.abc import Mapping

from cep_weather.clients.directory import DirectoryClient
from cep_weather.clients.weather import WeatherProvider
from cep_weather.domain.cep import validate_cep
from cep_weather.domain.errors import InvalidFormat, PipelineError
from cep_weather.domain.models import EnrichedResponse, decode_lookup_request
from cep_weather.domain.temperature import convert
from cep_weather.observability.logging import get_logger
from cep_weather.observability.tracing import SpanRecorder

log = get_logger(__name__)


class EnrichmentService:
    def __init__(
        self,
        *,
        recorder: SpanRecorder,
        directory: DirectoryClient,
        weather: WeatherProvider,
    ) -> None:
        self._recorder = recorder
        self._directory = directory
        self._weather = weather

    async def lookup(self, raw_body: bytes, headers: Mapping[str, str]) -> EnrichedResponse:
        """
        Every failure raises a `PipelineError` subclass; the first one ends the
        request (no retries, no partial answers).
        """

        parent = self._recorder.extract(headers)
        with self._recorder.span("handle-weather-request", context=parent) as span:
            try:
                request = decode_lookup_request(raw_body)
                if not validate_cep(request.cep):
                    raise InvalidFormat(f"invalid zipcode: {request.cep!r}")

                record = await self._directory.lookup(request.cep)
                sample = await self._weather.current(record.localidade)
            except PipelineError as e:
                self._recorder.record_error(span, e)
                log.warning("weather_request_failed", status=e.status_code, reason=e.detail)
                raise

            temps = convert(sample.celsius)
            log.info("weather_request_enriched", city=record.localidade, temp_c=temps.celsius)
            return EnrichedResponse(
                city=record.localidade,
                temp_C=temps.celsius,
                temp_F=temps.fahrenheit,
                temp_K=temps.kelvin,
            )


# --- Module Notes -----------------------------------------------------------
# Fahrenheit/Kelvin are derived from the unrounded Celsius reading and each
# value is rounded once (see `cep_weather.domain.temperature`).
