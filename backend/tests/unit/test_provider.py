"""Unit tests: process-wide geocoder dependency."""
import pytest

from rescue_core.nominatim import NominatimGeocoder
from rescue_core.provider import close_geocoder, get_geocoder

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_get_geocoder_builds_one_instance():
    """Built on first use, shared afterwards, dropped on close."""
    try:
        first = await get_geocoder()
        assert isinstance(first, NominatimGeocoder)
        assert await get_geocoder() is first
    finally:
        await close_geocoder()
    assert await get_geocoder() is not first
    await close_geocoder()
