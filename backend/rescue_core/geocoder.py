"""Geocoding interface: forward (address -> coordinate) and reverse (coordinate -> address).

Providers implement :class:`Geocoder`. The module-level helpers turn provider
results into what the add flow needs: the first candidate coordinate, or an
assembled address string, and raise the two domain errors otherwise. Calls are
single shot; nothing here retries.
"""
import abc
import logging
from dataclasses import dataclass
from typing import Optional

from rescue_core.address_format import format_address

LOG = logging.getLogger(__name__)

# Fallback address text when reverse geocoding cannot produce one.
NO_PLACEMARK_FALLBACK = "Address not found."
NO_COMPONENTS_FALLBACK = "Address not found for this point."


@dataclass(frozen=True)
class Coordinate:
    """WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Placemark:
    """Address components of one reverse geocoding candidate. Any component may be missing."""

    thoroughfare: Optional[str] = None  # street
    sub_thoroughfare: Optional[str] = None  # house number
    locality: Optional[str] = None  # city
    administrative_area: Optional[str] = None  # state / region
    postal_code: Optional[str] = None
    country: Optional[str] = None
    coordinate: Optional[Coordinate] = None


class GeocodingError(Exception):
    """Base class for geocoding failures."""


class GeocoderError(GeocodingError):
    """The provider call itself failed (transport, status, malformed body)."""


class AddressNotFoundError(GeocodingError):
    """Forward geocoding produced no coordinate for the address."""

    def __init__(self, address: str):
        super().__init__(f"Address not found: {address!r}")
        self.address = address


class AddressLookupFailedError(GeocodingError):
    """Reverse geocoding produced no address. fallback_address is the text to show instead, if any."""

    def __init__(self, coordinate: Coordinate, fallback_address: Optional[str] = None):
        super().__init__(f"Address lookup failed for {coordinate.latitude}, {coordinate.longitude}")
        self.coordinate = coordinate
        self.fallback_address = fallback_address


class Geocoder(abc.ABC):
    """Asynchronous geocoding provider."""

    @abc.abstractmethod
    async def geocode(self, address: str) -> list[Coordinate]:
        """Candidate coordinates for an address, best first. Empty list when nothing matches."""

    @abc.abstractmethod
    async def reverse_geocode(self, coordinate: Coordinate) -> list[Placemark]:
        """Candidate placemarks for a coordinate, best first. Empty list when nothing matches."""

    async def aclose(self) -> None:
        """Release provider resources."""
        return None


async def forward_geocode(geocoder: Geocoder, address: str) -> Coordinate:
    """Coordinate of the first candidate for address. Raises AddressNotFoundError on no candidate or error."""
    try:
        candidates = await geocoder.geocode(address)
    except GeocoderError as e:
        LOG.warning("Geocoding error for %r: %s", address, e)
        raise AddressNotFoundError(address) from e
    if not candidates:
        raise AddressNotFoundError(address)
    return candidates[0]


async def reverse_geocode(geocoder: Geocoder, coordinate: Coordinate) -> str:
    """Address text for the first placemark at coordinate. Raises AddressLookupFailedError."""
    try:
        placemarks = await geocoder.reverse_geocode(coordinate)
    except GeocoderError as e:
        LOG.warning("Reverse geocoding error for %s, %s: %s", coordinate.latitude, coordinate.longitude, e)
        raise AddressLookupFailedError(coordinate) from e
    if not placemarks:
        raise AddressLookupFailedError(coordinate, NO_PLACEMARK_FALLBACK)
    address = format_address(placemarks[0])
    if not address:
        raise AddressLookupFailedError(coordinate, NO_COMPONENTS_FALLBACK)
    return address
