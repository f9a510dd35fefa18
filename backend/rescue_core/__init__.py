# Rescue core: geocoding adapter, address formatting, map geometry, add flow
from rescue_core.add_flow import AddFlowDraft, AddFlowState, apply_forward_geocode, apply_reverse_geocode, can_save
from rescue_core.address_format import format_address
from rescue_core.geocoder import (
    AddressLookupFailedError,
    AddressNotFoundError,
    Coordinate,
    Geocoder,
    GeocoderError,
    GeocodingError,
    Placemark,
    forward_geocode,
    reverse_geocode,
)
from rescue_core.map_view import Region, screen_point_to_coordinate

__all__ = [
    "AddFlowDraft",
    "AddFlowState",
    "AddressLookupFailedError",
    "AddressNotFoundError",
    "Coordinate",
    "Geocoder",
    "GeocoderError",
    "GeocodingError",
    "Placemark",
    "Region",
    "apply_forward_geocode",
    "apply_reverse_geocode",
    "can_save",
    "format_address",
    "forward_geocode",
    "reverse_geocode",
    "screen_point_to_coordinate",
]
