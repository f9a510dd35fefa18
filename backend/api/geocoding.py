"""Pass-through geocoding routes."""
from fastapi import APIRouter, Depends, HTTPException, Query, status

from rescue_core.geocoder import (
    AddressLookupFailedError,
    AddressNotFoundError,
    Coordinate,
    Geocoder,
    forward_geocode,
    reverse_geocode,
)
from rescue_core.provider import get_geocoder
from schemas.geocoding import ForwardGeocodeResponse, ReverseGeocodeResponse
from schemas.locations import CoordinateSchema

router = APIRouter(prefix="/geocode", tags=["geocoding"])


@router.get("/forward", response_model=ForwardGeocodeResponse)
async def geocode_forward(
    address: str = Query(min_length=1),
    geocoder: Geocoder = Depends(get_geocoder),
) -> ForwardGeocodeResponse:
    """Address to the first candidate coordinate."""
    try:
        coordinate = await forward_geocode(geocoder, address.strip())
    except AddressNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found") from e
    return ForwardGeocodeResponse(address=address, coordinate=CoordinateSchema.from_core(coordinate))


@router.get("/reverse", response_model=ReverseGeocodeResponse)
async def geocode_reverse(
    latitude: float = Query(ge=-90.0, le=90.0),
    longitude: float = Query(ge=-180.0, le=180.0),
    geocoder: Geocoder = Depends(get_geocoder),
) -> ReverseGeocodeResponse:
    """Coordinate to an address line."""
    coordinate = Coordinate(latitude=latitude, longitude=longitude)
    try:
        address = await reverse_geocode(geocoder, coordinate)
    except AddressLookupFailedError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address lookup failed") from e
    return ReverseGeocodeResponse(coordinate=CoordinateSchema.from_core(coordinate), address=address)
