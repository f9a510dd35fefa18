"""Map regions and screen-point to coordinate conversion."""
from dataclasses import dataclass

from rescue_core.geocoder import Coordinate

# Span used for single-location views (detail preview, add form after a pin is set).
CLOSE_UP_SPAN = 0.01

# Add form mini-map before any coordinate is known.
ADD_FORM_DEFAULT_CENTER = Coordinate(latitude=51.2465, longitude=22.5684)
ADD_FORM_DEFAULT_SPAN = 0.1


@dataclass(frozen=True)
class Region:
    """Visible map area: center plus latitude/longitude span in degrees."""

    center: Coordinate
    latitude_delta: float
    longitude_delta: float


def clamp_coordinate(latitude: float, longitude: float) -> Coordinate:
    """Clamp latitude to [-90, 90] and wrap longitude into [-180, 180]."""
    latitude = max(-90.0, min(90.0, latitude))
    if longitude < -180.0 or longitude > 180.0:
        longitude = ((longitude + 180.0) % 360.0) - 180.0
    return Coordinate(latitude=latitude, longitude=longitude)


def default_region(latitude: float, longitude: float, span: float) -> Region:
    """Square region around a center."""
    return Region(center=Coordinate(latitude, longitude), latitude_delta=span, longitude_delta=span)


def close_up_region(center: Coordinate) -> Region:
    return Region(center=center, latitude_delta=CLOSE_UP_SPAN, longitude_delta=CLOSE_UP_SPAN)


def add_form_region(coordinate: Coordinate | None) -> Region:
    """Mini-map region of the add form: close-up on the pin, or the form default."""
    if coordinate is not None:
        return close_up_region(coordinate)
    return Region(
        center=ADD_FORM_DEFAULT_CENTER,
        latitude_delta=ADD_FORM_DEFAULT_SPAN,
        longitude_delta=ADD_FORM_DEFAULT_SPAN,
    )


def screen_point_to_coordinate(x: float, y: float, width: float, height: float, region: Region) -> Coordinate:
    """
    Convert a point in view coordinates (origin top-left, y down) to a map coordinate.

    Interpolates linearly across the region span, which is accurate enough at
    the zoom levels a person taps at. Raises ValueError for an empty viewport or
    a point outside it.
    """
    if width <= 0 or height <= 0:
        raise ValueError("viewport width and height must be positive")
    if not (0 <= x <= width and 0 <= y <= height):
        raise ValueError("point is outside the viewport")
    latitude = region.center.latitude + (0.5 - y / height) * region.latitude_delta
    longitude = region.center.longitude + (x / width - 0.5) * region.longitude_delta
    return clamp_coordinate(latitude, longitude)
