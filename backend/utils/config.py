"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

# When TESTING=true, use test DB URL so tests never touch production.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./food_rescue.db",
    )

# Nominatim-compatible geocoding provider. The public instance requires an identifying User-Agent.
GEOCODER_BASE_URL = os.environ.get("GEOCODER_BASE_URL", "https://nominatim.openstreetmap.org")
GEOCODER_USER_AGENT = os.environ.get("GEOCODER_USER_AGENT", "food-rescue-map/0.1")
GEOCODER_TIMEOUT_S = float(os.environ.get("GEOCODER_TIMEOUT_S", "10"))

# Gesture that opens the add flow from the map: "tap" or "long_press".
MAP_ADD_GESTURE = os.environ.get("MAP_ADD_GESTURE", "tap")

# Default map view ("recenter" target).
MAP_DEFAULT_LATITUDE = float(os.environ.get("MAP_DEFAULT_LATITUDE", "34.0522"))
MAP_DEFAULT_LONGITUDE = float(os.environ.get("MAP_DEFAULT_LONGITUDE", "-118.2437"))
MAP_DEFAULT_SPAN = float(os.environ.get("MAP_DEFAULT_SPAN", "0.5"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
