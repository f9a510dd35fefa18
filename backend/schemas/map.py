"""Pydantic schemas for the map API."""
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from models.rescue_location import RescueLocation
from schemas.locations import CoordinateSchema, RegionSchema

Gesture = Literal["tap", "long_press"]


class MapMarker(BaseModel):
    """One stored location drawn on the map."""

    id: str
    title: str
    subtitle: str
    coordinate: CoordinateSchema
    tint: str = "red"

    @classmethod
    def from_row(cls, loc: RescueLocation) -> "MapMarker":
        return cls(
            id=loc.id,
            title=loc.title or "Location",
            subtitle=loc.subtitle or "",
            coordinate=CoordinateSchema(latitude=loc.latitude, longitude=loc.longitude),
        )


class MapResponse(BaseModel):
    markers: list[MapMarker]
    region: RegionSchema


class ScreenPoint(BaseModel):
    """Point in view coordinates: origin top-left, y grows downward."""

    x: float
    y: float


class Viewport(BaseModel):
    """What the map view showed when the gesture happened."""

    region: RegionSchema
    width: float = Field(gt=0.0)
    height: float = Field(gt=0.0)


class MapSelectRequest(BaseModel):
    """Coordinate-selection gesture: either a coordinate, or a screen point with its viewport."""

    gesture: Gesture = "tap"
    coordinate: CoordinateSchema | None = None
    point: ScreenPoint | None = None
    viewport: Viewport | None = None

    @model_validator(mode="after")
    def _coordinate_or_point(self) -> "MapSelectRequest":
        if self.coordinate is None and (self.point is None or self.viewport is None):
            raise ValueError("provide coordinate, or point together with viewport")
        return self
