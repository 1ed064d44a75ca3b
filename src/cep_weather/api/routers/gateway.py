"""
cep_weather.api.routers.gateway

Gateway service entry point: `POST /` with `{"cep": "..."}`.

Responsibilities:
- Pass the raw body and headers to `GatewayService`.
- Relay the enrichment service's status code and JSON body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse

from cep_weather.api.deps import gateway_service_dep
from cep_weather.services.gateway_service import GatewayService

router = APIRouter()


@router.post("/")
async def lookup_cep(
    request: Request,
    service: GatewayService = Depends(gateway_service_dep),
) -> JSONResponse:
    # Body is read raw: FastAPI's own validation would answer 422 for malformed JSON.
    downstream = await service.forward(await request.body(), request.headers)
    return JSONResponse(status_code=downstream.status_code, content=downstream.body)
