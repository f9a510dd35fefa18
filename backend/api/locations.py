"""Rescue location API routes: list/search, create, detail, contact, delete."""
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from db import get_db
from models.rescue_location import RescueLocation
from repositories.location_repository import create_location as repo_create_location
from repositories.location_repository import delete_location as repo_delete_location
from repositories.location_repository import delete_locations as repo_delete_locations
from repositories.location_repository import get_location as repo_get_location
from repositories.location_repository import list_locations as repo_list_locations
from repositories.location_repository import search_locations as repo_search_locations
from schemas.locations import (
    DeleteLocationsRequest,
    DeleteLocationsResponse,
    LocationCreate,
    LocationDetail,
    LocationResponse,
)

router = APIRouter(prefix="/locations", tags=["locations"])


def _get_or_404(db: Session, location_id: str) -> RescueLocation:
    loc = repo_get_location(db, location_id)
    if loc is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return loc


@router.get("", response_model=list[LocationResponse])
def list_locations(
    search: str | None = Query(default=None, description="Case-insensitive substring of name or address"),
    sort: Literal["name", "timestamp"] = "name",
    db: Session = Depends(get_db),
) -> list[LocationResponse]:
    """List all locations sorted by name (or timestamp), optionally filtered by search text."""
    if search:
        locations = repo_search_locations(db, search, sort=sort)
    else:
        locations = repo_list_locations(db, sort=sort)
    return [LocationResponse.from_row(loc) for loc in locations]


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    db: Session = Depends(get_db),
) -> LocationResponse:
    """Create a new location."""
    loc = repo_create_location(
        db,
        name=body.name,
        address=body.address,
        latitude=body.latitude,
        longitude=body.longitude,
        details=body.details,
        contact=body.contact,
    )
    return LocationResponse.from_row(loc)


@router.post("/delete", response_model=DeleteLocationsResponse)
def delete_locations(body: DeleteLocationsRequest, db: Session = Depends(get_db)) -> DeleteLocationsResponse:
    """Delete several locations at once. Unknown ids are ignored."""
    return DeleteLocationsResponse(deleted=repo_delete_locations(db, body.ids))


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: str, db: Session = Depends(get_db)) -> LocationResponse:
    """Get one location."""
    return LocationResponse.from_row(_get_or_404(db, location_id))


@router.get("/{location_id}/detail", response_model=LocationDetail)
def get_location_detail(location_id: str, db: Session = Depends(get_db)) -> LocationDetail:
    """Detail view: all fields, display text and a static map preview."""
    return LocationDetail.from_row(_get_or_404(db, location_id))


@router.get("/{location_id}/contact", response_class=PlainTextResponse)
def get_location_contact(location_id: str, db: Session = Depends(get_db)) -> PlainTextResponse:
    """Contact text for copying to the clipboard."""
    loc = _get_or_404(db, location_id)
    if not loc.contact:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location has no contact info")
    return PlainTextResponse(loc.contact)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: str, db: Session = Depends(get_db)) -> None:
    """Delete a location by id."""
    if not repo_delete_location(db, location_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
