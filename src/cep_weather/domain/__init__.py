"""
cep_weather.domain

Pure domain layer: postal-code validation, temperature conversion, wire models, errors.

Responsibilities:
- Hold logic that has no I/O and no framework dependency beyond pydantic models.
"""

# Package marker.
