"""
cep_weather.api.routers.health

Liveness endpoint shared by both services.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: both services are stateless, there is nothing to be "ready" for.
    return {"status": "ok"}
