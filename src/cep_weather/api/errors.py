"""
cep_weather.api.errors

Centralized error transformation for both services.

Maps pipeline errors to `{"message": ...}` JSON bodies (or plain text where the
contract asks for it) and answers 405 in plain text.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.status import HTTP_405_METHOD_NOT_ALLOWED

from cep_weather.domain.errors import PipelineError
from cep_weather.domain.models import ErrorPayload


def map_pipeline_error(error: PipelineError) -> Response:
    if not error.structured:
        return PlainTextResponse(error.message, status_code=error.status_code)
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorPayload(message=error.message).model_dump(),
    )


async def _pipeline_error_handler(_: Request, exc: PipelineError) -> Response:
    return map_pipeline_error(exc)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(
            "Method not allowed",
            status_code=HTTP_405_METHOD_NOT_ALLOWED,
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PipelineError, _pipeline_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
