"""
cep_weather.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
- Span recording and W3C trace-context propagation across the service hop.
"""

# Package marker.
