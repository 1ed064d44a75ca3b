"""
cep_weather.api.routers

HTTP routers for both services.
"""

# Package marker.
