"""Unit tests: forward_geocode / reverse_geocode helpers over a fake provider."""
import pytest

from rescue_core.geocoder import (
    NO_COMPONENTS_FALLBACK,
    NO_PLACEMARK_FALLBACK,
    AddressLookupFailedError,
    AddressNotFoundError,
    Coordinate,
    Placemark,
    forward_geocode,
    reverse_geocode,
)

pytestmark = pytest.mark.unit

LUBLIN = Coordinate(latitude=51.2465, longitude=22.5684)


@pytest.mark.asyncio
async def test_forward_geocode_takes_first_candidate(fake_geocoder):
    """First candidate wins."""
    fake_geocoder.coordinates = [LUBLIN, Coordinate(0.0, 0.0)]
    assert await forward_geocode(fake_geocoder, "Lublin") == LUBLIN


@pytest.mark.asyncio
async def test_forward_geocode_no_candidates(fake_geocoder):
    """Zero candidates raises AddressNotFoundError."""
    with pytest.raises(AddressNotFoundError):
        await forward_geocode(fake_geocoder, "Nowhere 999")


@pytest.mark.asyncio
async def test_forward_geocode_provider_error(fake_geocoder):
    """Provider failure is reported as not found, same as no candidates."""
    fake_geocoder.error = "timeout"
    with pytest.raises(AddressNotFoundError):
        await forward_geocode(fake_geocoder, "Lublin")


@pytest.mark.asyncio
async def test_reverse_geocode_formats_first_placemark(fake_geocoder):
    """Address is assembled from the first placemark."""
    fake_geocoder.placemarks = [Placemark(locality="Lublin", country="Poland"), Placemark(country="Other")]
    assert await reverse_geocode(fake_geocoder, LUBLIN) == "Lublin, Poland"


@pytest.mark.asyncio
async def test_reverse_geocode_no_components(fake_geocoder):
    """Placemark without components fails with the point fallback."""
    fake_geocoder.placemarks = [Placemark()]
    with pytest.raises(AddressLookupFailedError) as exc:
        await reverse_geocode(fake_geocoder, LUBLIN)
    assert exc.value.fallback_address == NO_COMPONENTS_FALLBACK


@pytest.mark.asyncio
async def test_reverse_geocode_no_placemark(fake_geocoder):
    """No placemark fails with the general fallback."""
    with pytest.raises(AddressLookupFailedError) as exc:
        await reverse_geocode(fake_geocoder, LUBLIN)
    assert exc.value.fallback_address == NO_PLACEMARK_FALLBACK


@pytest.mark.asyncio
async def test_reverse_geocode_provider_error(fake_geocoder):
    """Provider failure carries no fallback."""
    fake_geocoder.error = "boom"
    with pytest.raises(AddressLookupFailedError) as exc:
        await reverse_geocode(fake_geocoder, LUBLIN)
    assert exc.value.fallback_address is None
    assert exc.value.coordinate == LUBLIN
