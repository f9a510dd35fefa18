"""Pydantic schemas for rescue location API."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from models.rescue_location import RescueLocation
from rescue_core.geocoder import Coordinate
from rescue_core.map_view import Region, close_up_region

# Display text for missing values (list and detail views).
UNKNOWN_LOCATION = "Unknown Location"
NO_ADDRESS = "No address"
UNKNOWN_NAME = "Unknown Name"
NO_ADDRESS_PROVIDED = "No Address Provided"
NO_DETAILS = "No additional details."
NO_CONTACT = "No Contact Info"


class CoordinateSchema(BaseModel):
    """Latitude/longitude pair in degrees."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    @classmethod
    def from_core(cls, coordinate: Coordinate) -> "CoordinateSchema":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)

    def to_core(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class RegionSchema(BaseModel):
    """Map region: center and span in degrees."""

    center: CoordinateSchema
    latitude_delta: float = Field(gt=0.0, le=180.0)
    longitude_delta: float = Field(gt=0.0, le=360.0)

    @classmethod
    def from_core(cls, region: Region) -> "RegionSchema":
        return cls(
            center=CoordinateSchema.from_core(region.center),
            latitude_delta=region.latitude_delta,
            longitude_delta=region.longitude_delta,
        )

    def to_core(self) -> Region:
        return Region(
            center=self.center.to_core(),
            latitude_delta=self.latitude_delta,
            longitude_delta=self.longitude_delta,
        )


class LocationCreate(BaseModel):
    """Payload for creating a rescue location. Name, address and coordinate are required."""

    name: str = Field(max_length=255)
    address: str = Field(max_length=512)
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    details: str | None = None
    contact: str | None = Field(default=None, max_length=255)

    @field_validator("name", "address")
    @classmethod
    def _required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class LocationResponse(BaseModel):
    """Rescue location in API responses."""

    id: str
    name: str
    address: str
    latitude: float
    longitude: float
    details: str | None = None
    contact: str | None = None
    timestamp: datetime
    title: str
    subtitle: str

    @classmethod
    def from_row(cls, loc: RescueLocation) -> "LocationResponse":
        return cls(
            id=loc.id,
            name=loc.name,
            address=loc.address,
            latitude=loc.latitude,
            longitude=loc.longitude,
            details=loc.details,
            contact=loc.contact,
            timestamp=loc.timestamp,
            title=loc.title or UNKNOWN_LOCATION,
            subtitle=loc.subtitle or NO_ADDRESS,
        )


class DeleteLocationsRequest(BaseModel):
    """Batch delete (several rows removed from the list at once)."""

    ids: list[str] = Field(min_length=1)


class DeleteLocationsResponse(BaseModel):
    deleted: list[str]


class MapPreview(BaseModel):
    """Static map snippet: one marker, close-up region, no interaction."""

    region: RegionSchema
    marker: CoordinateSchema
    marker_title: str
    interactive: bool = False


class LocationDetail(BaseModel):
    """All fields of one location plus display text and a map preview."""

    location: LocationResponse
    display_name: str
    display_address: str
    display_details: str
    display_contact: str
    contact_copyable: bool
    preview: MapPreview

    @classmethod
    def from_row(cls, loc: RescueLocation) -> "LocationDetail":
        coordinate = Coordinate(latitude=loc.latitude, longitude=loc.longitude)
        return cls(
            location=LocationResponse.from_row(loc),
            display_name=loc.name or UNKNOWN_NAME,
            display_address=loc.address or NO_ADDRESS_PROVIDED,
            display_details=loc.details or NO_DETAILS,
            display_contact=loc.contact or NO_CONTACT,
            contact_copyable=bool(loc.contact),
            preview=MapPreview(
                region=RegionSchema.from_core(close_up_region(coordinate)),
                marker=CoordinateSchema.from_core(coordinate),
                marker_title=loc.name or "Location",
            ),
        )
