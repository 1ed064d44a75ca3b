"""
cep_weather.clients.directory

Directory Lookup collaborator: resolves a CEP to its locality via ViaCEP.

Responsibilities:
- Call `GET /ws/{cep}/json/` under the configured directory base URL.
- Collapse every failure (transport, status, decode, `erro: true`) into `NotFound`.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from cep_weather.domain.errors import NotFound
from cep_weather.domain.models import DirectoryRecord
from cep_weather.observability.tracing import SpanRecorder
from cep_weather.settings import Settings


class DirectoryClient:
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

    async def lookup(self, cep: str) -> DirectoryRecord:
        with self._recorder.span("fetch-cep-data") as span:
            span.set_attribute("cep", cep)
            try:
                r = await self._http.get(
                    f"{self._settings.directory_base_url.rstrip('/')}/ws/{cep}/json/",
                    timeout=self._settings.downstream_timeout_s,
                )
                r.raise_for_status()
                record = DirectoryRecord.model_validate(r.json())
            except (httpx.HTTPError, ValidationError, ValueError) as e:
                self._recorder.record_error(span, e)
                raise NotFound(f"directory lookup failed: {e}") from e

            if record.not_found:
                err = NotFound(f"directory has no entry for {cep}")
                self._recorder.record_error(span, err)
                raise err

            span.set_attribute("locality", record.localidade)
            return record


# --- Module Notes -----------------------------------------------------------
# Callers cannot tell an unreachable directory from an unknown CEP; both answer 404.
