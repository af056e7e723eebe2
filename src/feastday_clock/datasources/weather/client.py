"""Open-Meteo API client constants and shared configuration.

API docs:
  - Forecast: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Current-conditions variables we request from Open-Meteo
CURRENT_VARS = [
    "temperature_2m",
    "weather_code",
]

# Daily variables for today's high/low
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
]

# Extra daily variable needed to draw per-day forecast icons
FORECAST_DAILY_VARS = [*DAILY_VARS, "weather_code"]

TEMPERATURE_UNIT = "fahrenheit"
