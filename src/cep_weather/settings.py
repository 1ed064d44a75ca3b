"""
cep_weather.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for both services.
- Hide secrets from repr/logging (e.g., the weather API key).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Both services read the same settings object; `service_role` picks which one
    `python -m cep_weather.api` starts.

    Env names are unprefixed so `ENRICHMENT_SERVICE_URL`, `WEATHER_API_KEY` and
    `OTEL_EXPORTER_OTLP_ENDPOINT` work as documented.
    """

    model_config = SettingsConfigDict(case_sensitive=False)

    env: str = "dev"
    service_role: Literal["gateway", "enrichment"] = "gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    gateway_port: int = 8080
    enrichment_port: int = 8081

    # Gateway -> Enrichment hop
    enrichment_service_url: str = "http://localhost:8081"
    gateway_timeout_s: float = 30.0

    # Enrichment -> Directory/Weather collaborators
    downstream_timeout_s: float = 10.0
    directory_base_url: str = "https://viacep.com.br"
    weather_base_url: str = "http://api.weatherapi.com"
    weather_api_key: str | None = Field(default=None, repr=False)
    simulated_temp_c: float = 25.0

    # Tracing; no endpoint means spans are recorded but never exported.
    otel_exporter_otlp_endpoint: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Absence of WEATHER_API_KEY is not an error: it selects the simulated weather
# provider at startup (see `cep_weather.clients.weather.build_weather_provider`).
