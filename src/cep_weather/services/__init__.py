"""
cep_weather.services

Service layer for the two pipeline stages.

Responsibilities:
- Sequence decode -> validate -> downstream call(s) -> response for each stage.
- Own span layout and failure recording; routers stay thin.
"""

# Package marker.
