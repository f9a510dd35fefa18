"""Map API routes: markers, default region, coordinate selection."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from db import get_db
from repositories.location_repository import list_locations as repo_list_locations
from rescue_core.add_flow import start_from_map
from rescue_core.geocoder import Geocoder
from rescue_core.map_view import default_region, screen_point_to_coordinate
from rescue_core.provider import get_geocoder
from schemas.add_flow import DraftOut
from schemas.locations import RegionSchema
from schemas.map import MapMarker, MapResponse, MapSelectRequest
from utils.config import MAP_ADD_GESTURE, MAP_DEFAULT_LATITUDE, MAP_DEFAULT_LONGITUDE, MAP_DEFAULT_SPAN

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/map", tags=["map"])


def _default_region() -> RegionSchema:
    return RegionSchema.from_core(default_region(MAP_DEFAULT_LATITUDE, MAP_DEFAULT_LONGITUDE, MAP_DEFAULT_SPAN))


@router.get("", response_model=MapResponse)
def get_map(db: Session = Depends(get_db)) -> MapResponse:
    """All stored locations as markers (oldest first) and the default region."""
    markers = [MapMarker.from_row(loc) for loc in repo_list_locations(db, sort="timestamp")]
    return MapResponse(markers=markers, region=_default_region())


@router.get("/region", response_model=RegionSchema)
def get_default_region() -> RegionSchema:
    """Fixed default view the map recenters to."""
    return _default_region()


@router.post("/select", response_model=DraftOut)
async def select_coordinate(
    body: MapSelectRequest,
    geocoder: Geocoder = Depends(get_geocoder),
) -> DraftOut:
    """Open the add flow at a selected map point, pre-filled with its coordinate and looked-up address."""
    if body.gesture != MAP_ADD_GESTURE:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Gesture '{body.gesture}' does not add locations; use '{MAP_ADD_GESTURE}'",
        )
    if body.coordinate is not None:
        coordinate = body.coordinate.to_core()
    else:
        try:
            coordinate = screen_point_to_coordinate(
                body.point.x,
                body.point.y,
                body.viewport.width,
                body.viewport.height,
                body.viewport.region.to_core(),
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    LOG.info("Add flow opened from map at %s, %s", coordinate.latitude, coordinate.longitude)
    draft = await start_from_map(coordinate, geocoder)
    return DraftOut.from_core(draft)
