"""
cep_weather.clients.weather

Weather Lookup collaborator.

Responsibilities:
- `RealWeatherProvider`: current Celsius temperature from WeatherAPI by locality name.
- `SimulatedWeatherProvider`: fixed reading used when no API key is configured.
- Select one provider at startup from settings.
"""

from __future__ import annotations

from typing import Protocol

import httpx
from pydantic import BaseModel, Field, ValidationError

from cep_weather.domain.errors import UpstreamFailure
from cep_weather.domain.models import TemperatureSample
from cep_weather.observability.logging import get_logger
from cep_weather.observability.tracing import SpanRecorder
from cep_weather.settings import Settings

log = get_logger(__name__)


class WeatherProvider(Protocol):
    async def current(self, locality: str) -> TemperatureSample: ...


class _Current(BaseModel):
    # json.loads accepts Infinity/NaN; they cannot be converted or rounded.
    temp_c: float = Field(allow_inf_nan=False)


class _CurrentWeatherPayload(BaseModel):
    current: _Current


class RealWeatherProvider:
    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        recorder: SpanRecorder,
        api_key: str,
    ) -> None:
        self._settings = settings
        self._http = http
        self._recorder = recorder
        self._api_key = api_key

    async def current(self, locality: str) -> TemperatureSample:
        with self._recorder.span("fetch-weather-data") as span:
            span.set_attribute("locality", locality)
            span.set_attribute("weather.simulated", False)
            try:
                # httpx query-encodes the locality ("São Paulo" -> "S%C3%A3o+Paulo").
                r = await self._http.get(
                    f"{self._settings.weather_base_url.rstrip('/')}/v1/current.json",
                    params={"key": self._api_key, "q": locality},
                    timeout=self._settings.downstream_timeout_s,
                )
                r.raise_for_status()
                payload = _CurrentWeatherPayload.model_validate(r.json())
            except (httpx.HTTPError, ValidationError, ValueError) as e:
                self._recorder.record_error(span, e)
                raise UpstreamFailure(f"weather lookup failed: {e}") from e
            return TemperatureSample(celsius=payload.current.temp_c)


class SimulatedWeatherProvider:
    """Demo/degraded mode: never performs I/O, always answers `celsius`."""

    def __init__(self, *, recorder: SpanRecorder, celsius: float = 25.0) -> None:
        self._recorder = recorder
        self._celsius = celsius

    async def current(self, locality: str) -> TemperatureSample:
        with self._recorder.span("fetch-weather-data") as span:
            span.set_attribute("locality", locality)
            span.set_attribute("weather.simulated", True)
            return TemperatureSample(celsius=self._celsius)


def build_weather_provider(
    *, settings: Settings, http: httpx.AsyncClient, recorder: SpanRecorder
) -> WeatherProvider:
    if not settings.weather_api_key:
        log.warning("weather_api_key_missing", simulated_temp_c=settings.simulated_temp_c)
        return SimulatedWeatherProvider(recorder=recorder, celsius=settings.simulated_temp_c)
    return RealWeatherProvider(
        settings=settings, http=http, recorder=recorder, api_key=settings.weather_api_key
    )


# --- Module Notes -----------------------------------------------------------
# The simulated provider is a configuration choice, not an error fallback: a
# configured key whose call fails still yields UpstreamFailure (HTTP 500).
