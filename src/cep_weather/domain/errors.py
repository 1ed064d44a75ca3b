"""
cep_weather.domain.errors

Error taxonomy for both pipeline stages.

Responsibilities:
- Carry the HTTP status and client-facing message of every failure branch.
- Keep the internal cause (for logs/spans) separate from the public message.
"""

from __future__ import annotations


class PipelineError(Exception):
    """
    Terminal failure of one request. `message` is what the client sees;
    `detail` is the internal reason used for logs and span annotations.
    """

    status_code: int = 500
    message: str = "internal error"
    # Structured {"message": ...} body; False means a plain-text body.
    structured: bool = True

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.message
        super().__init__(self.detail)


class MalformedInput(PipelineError):
    status_code = 400
    message = "invalid request body"


class InvalidFormat(PipelineError):
    status_code = 422
    message = "invalid zipcode"


class NotFound(PipelineError):
    status_code = 404
    message = "can not find zipcode"


class UpstreamFailure(PipelineError):
    status_code = 500
    message = "failed to fetch weather data"


class GatewayUnavailable(PipelineError):
    # The gateway's "cannot reach enrichment" branch answers in plain text,
    # unlike every structured error of the enrichment service.
    status_code = 500
    message = "failed to call enrichment service"
    structured = False


# --- Module Notes -----------------------------------------------------------
# The API layer maps these to responses in `cep_weather.api.errors`.
