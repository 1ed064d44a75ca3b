"""
cep_weather.clients

Outbound HTTP client boundary.

Responsibilities:
- Directory (ViaCEP) and weather (WeatherAPI) collaborators used by the enrichment service.
- The gateway's client for the enrichment service hop.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on these classes, never on httpx or URLs directly.
