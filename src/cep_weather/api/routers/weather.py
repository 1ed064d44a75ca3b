"""
cep_weather.api.routers.weather

Enrichment service entry point: `POST /weather` with `{"cep": "..."}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse

from cep_weather.api.deps import enrichment_service_dep
from cep_weather.clients.enrichment import WEATHER_PATH
from cep_weather.services.enrichment_service import EnrichmentService

router = APIRouter()


@router.post(WEATHER_PATH)
async def weather_for_cep(
    request: Request,
    service: EnrichmentService = Depends(enrichment_service_dep),
) -> JSONResponse:
    result = await service.lookup(await request.body(), request.headers)
    return JSONResponse(content=result.model_dump())
