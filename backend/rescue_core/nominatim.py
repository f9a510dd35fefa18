"""Nominatim (OpenStreetMap) geocoder over httpx."""
import logging
from typing import Any, Optional

import httpx

from rescue_core.geocoder import Coordinate, Geocoder, GeocoderError, Placemark

LOG = logging.getLogger(__name__)

# Nominatim address keys, in preference order, for each placemark field.
_ADDRESS_KEYS: dict[str, tuple[str, ...]] = {
    "thoroughfare": ("road", "pedestrian", "footway"),
    "sub_thoroughfare": ("house_number",),
    "locality": ("city", "town", "village", "hamlet"),
    "administrative_area": ("state", "region"),
    "postal_code": ("postcode",),
    "country": ("country",),
}


def _first_present(address: dict[str, Any], keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = address.get(key)
        if value:
            return str(value)
    return None


def _parse_coordinate(item: dict[str, Any]) -> Coordinate:
    """Nominatim returns lat/lon as strings."""
    try:
        return Coordinate(latitude=float(item["lat"]), longitude=float(item["lon"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeocoderError(f"Malformed coordinate in geocoder response: {item!r}") from e


def parse_placemark(item: dict[str, Any]) -> Placemark:
    """Build a Placemark from one Nominatim result with addressdetails."""
    address = item.get("address") or {}
    if not isinstance(address, dict):
        raise GeocoderError(f"Malformed address in geocoder response: {address!r}")
    fields = {field: _first_present(address, keys) for field, keys in _ADDRESS_KEYS.items()}
    coordinate = _parse_coordinate(item) if "lat" in item and "lon" in item else None
    return Placemark(coordinate=coordinate, **fields)


class NominatimGeocoder(Geocoder):
    """Geocoder backed by a Nominatim-compatible HTTP API (/search and /reverse)."""

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_s,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise GeocoderError(f"Geocoder request to {path} failed: {e}") from e
        except ValueError as e:
            raise GeocoderError(f"Geocoder response from {path} is not JSON") from e

    async def geocode(self, address: str) -> list[Coordinate]:
        data = await self._get_json(
            "/search",
            {"q": address, "format": "jsonv2", "limit": 5},
        )
        if not isinstance(data, list):
            raise GeocoderError(f"Unexpected search response: {data!r}")
        LOG.debug("Geocoded %r to %d candidates", address, len(data))
        return [_parse_coordinate(item) for item in data]

    async def reverse_geocode(self, coordinate: Coordinate) -> list[Placemark]:
        data = await self._get_json(
            "/reverse",
            {
                "lat": coordinate.latitude,
                "lon": coordinate.longitude,
                "format": "jsonv2",
                "addressdetails": 1,
            },
        )
        if not isinstance(data, dict):
            raise GeocoderError(f"Unexpected reverse response: {data!r}")
        # Nominatim answers 200 with {"error": "Unable to geocode"} when nothing is there.
        if "error" in data:
            return []
        return [parse_placemark(data)]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
