# Schemas package
from .health import HealthResponse
from .locations import CoordinateSchema, LocationCreate, LocationDetail, LocationResponse, RegionSchema

__all__ = [
    "CoordinateSchema",
    "HealthResponse",
    "LocationCreate",
    "LocationDetail",
    "LocationResponse",
    "RegionSchema",
]
