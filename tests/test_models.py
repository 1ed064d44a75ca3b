"""
tests.test_models

Inbound body decoding: what is a 400 (malformed) vs what reaches validation (422).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cep_weather.domain.errors import MalformedInput
from cep_weather.domain.models import (
    DirectoryRecord,
    EnrichedResponse,
    TemperatureSample,
    decode_lookup_request,
)


def test_decodes_cep() -> None:
    assert decode_lookup_request(b'{"cep": "01310100"}').cep == "01310100"


def test_unknown_fields_are_ignored() -> None:
    assert decode_lookup_request(b'{"cep": "01310100", "extra": 1}').cep == "01310100"


def test_missing_cep_decodes_as_empty_string() -> None:
    # Left for the validator to reject (422).
    assert decode_lookup_request(b"{}").cep == ""


def test_null_cep_decodes_as_empty_string() -> None:
    assert decode_lookup_request(b'{"cep": null}').cep == ""


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"not json",
        b'{"cep": ',
        b'["01310100"]',
        b'"01310100"',
        b'{"cep": 1310100}',
        b"\xff\xfe\x00",
    ],
)
def test_malformed_bodies(raw: bytes) -> None:
    with pytest.raises(MalformedInput) as exc:
        decode_lookup_request(raw)
    assert exc.value.status_code == 400
    assert exc.value.message == "invalid request body"


def test_directory_record_flags_miss() -> None:
    assert DirectoryRecord.model_validate({"erro": True}).not_found is True
    assert DirectoryRecord.model_validate({"localidade": "Recife"}).not_found is False


def test_enriched_response_uses_public_field_names() -> None:
    body = EnrichedResponse(city="Recife", temp_C=30.0, temp_F=86.0, temp_K=303.2).model_dump()
    assert body == {"city": "Recife", "temp_C": 30.0, "temp_F": 86.0, "temp_K": 303.2}


@pytest.mark.parametrize("celsius", [float("inf"), float("-inf"), float("nan")])
def test_temperature_sample_rejects_non_finite(celsius: float) -> None:
    with pytest.raises(ValidationError):
        TemperatureSample(celsius=celsius)
