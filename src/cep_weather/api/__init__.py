"""
cep_weather.api

API package for the gateway and enrichment services.

Responsibilities:
- FastAPI app factories and router modules.
- API-layer dependency wiring and error-to-response mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: read the body, delegate to a service, map errors.
