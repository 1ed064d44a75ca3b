"""
cep_weather.api.__main__

Entrypoint for running either service via `python -m cep_weather.api`.

Responsibilities:
- Load settings and pick the service from `SERVICE_ROLE`.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

from typing import Literal

import uvicorn

from cep_weather.api.app import create_enrichment_app, create_gateway_app
from cep_weather.settings import Settings, get_settings


def _serve(settings: Settings) -> None:
    if settings.service_role == "enrichment":
        app = create_enrichment_app(settings=settings)
        port = settings.enrichment_port
    else:
        app = create_gateway_app(settings=settings)
        port = settings.gateway_port

    uvicorn.run(
        app,
        host=settings.api_host,
        port=port,
        log_config=None,  # structlog
    )


def _serve_role(role: Literal["gateway", "enrichment"]) -> None:
    _serve(get_settings().model_copy(update={"service_role": role}))


def main() -> None:
    _serve(get_settings())


def main_gateway() -> None:
    _serve_role("gateway")


def main_enrichment() -> None:
    _serve_role("enrichment")


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# In a two-container deployment each container sets SERVICE_ROLE (or uses the
# `cep-gateway` / `cep-enrichment` console scripts).
