"""
cep_weather.domain.models

Wire models shared by the gateway and enrichment services.

Responsibilities:
- Decode inbound lookup bodies with the 400-vs-422 split both services use.
- Describe collaborator payloads (ViaCEP directory, WeatherAPI current weather).
- Serialise the enriched response with its public field names.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cep_weather.domain.errors import MalformedInput


class LookupRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Missing or null decodes as "" so it fails format validation (422), not decoding (400).
    cep: str = Field(default="", strict=True)

    @field_validator("cep", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class DirectoryRecord(BaseModel):
    """ViaCEP `/ws/{cep}/json/` payload. `erro` is only present on misses."""

    model_config = ConfigDict(extra="ignore")

    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""
    erro: bool = False

    @property
    def not_found(self) -> bool:
        return self.erro


class TemperatureSample(BaseModel):
    celsius: float = Field(allow_inf_nan=False)


class EnrichedResponse(BaseModel):
    city: str
    temp_C: float
    temp_F: float
    temp_K: float


class ErrorPayload(BaseModel):
    message: str


def decode_lookup_request(raw: bytes) -> LookupRequest:
    """
    Body decoding rules:
    - not JSON, not a JSON object, or `cep` not a string -> MalformedInput
    - `cep` missing or null decodes as ""; format is checked separately
    """

    try:
        data: Any = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedInput(f"body is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedInput(f"body must be a JSON object, got {type(data).__name__}")

    try:
        return LookupRequest.model_validate(data)
    except ValidationError as e:
        raise MalformedInput(f"body does not match lookup schema: {e.errors()[0]['msg']}") from e


# --- Module Notes -----------------------------------------------------------
# EnrichedResponse field names (temp_C/temp_F/temp_K) are part of the public
# contract and intentionally not snake_case.
