"""Process-wide geocoder instance, built from config on first use."""
from typing import Optional

from rescue_core.geocoder import Geocoder
from rescue_core.nominatim import NominatimGeocoder
from utils.config import GEOCODER_BASE_URL, GEOCODER_TIMEOUT_S, GEOCODER_USER_AGENT

_geocoder: Optional[Geocoder] = None


async def get_geocoder() -> Geocoder:
    """FastAPI dependency: the configured geocoder. Async so it is built on the event loop, once."""
    global _geocoder
    if _geocoder is None:
        _geocoder = NominatimGeocoder(
            base_url=GEOCODER_BASE_URL,
            user_agent=GEOCODER_USER_AGENT,
            timeout_s=GEOCODER_TIMEOUT_S,
        )
    return _geocoder


async def close_geocoder() -> None:
    """Close the geocoder's HTTP client (app shutdown)."""
    global _geocoder
    if _geocoder is not None:
        await _geocoder.aclose()
        _geocoder = None
