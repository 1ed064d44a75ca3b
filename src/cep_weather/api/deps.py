"""
cep_weather.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the per-app stage services.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from cep_weather.services.enrichment_service import EnrichmentService
from cep_weather.services.gateway_service import GatewayService


def gateway_service_dep(request: Request) -> GatewayService:
    # Built once in `cep_weather.api.app.create_gateway_app`.
    return request.app.state.gateway_service  # type: ignore[attr-defined]


def enrichment_service_dep(request: Request) -> EnrichmentService:
    return request.app.state.enrichment_service  # type: ignore[attr-defined]
