"""Pydantic schemas for the pass-through geocoding API."""
from pydantic import BaseModel

from schemas.locations import CoordinateSchema


class ForwardGeocodeResponse(BaseModel):
    """Address resolved to the first candidate coordinate."""

    address: str
    coordinate: CoordinateSchema


class ReverseGeocodeResponse(BaseModel):
    """Coordinate resolved to an assembled address line."""

    coordinate: CoordinateSchema
    address: str
