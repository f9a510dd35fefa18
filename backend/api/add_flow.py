"""Add-location flow API routes: geocode steps and save."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import get_db
from repositories.location_repository import create_location as repo_create_location
from rescue_core.add_flow import apply_forward_geocode, apply_reverse_geocode
from rescue_core.geocoder import Geocoder
from rescue_core.provider import get_geocoder
from schemas.add_flow import DraftIn, DraftOut
from schemas.locations import LocationResponse

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/add-flow", tags=["add-flow"])


@router.post("/geocode", response_model=DraftOut)
async def geocode_draft(body: DraftIn, geocoder: Geocoder = Depends(get_geocoder)) -> DraftOut:
    """Pin the draft's coordinate from its address. Failure clears the coordinate and sets an alert."""
    if not body.address.strip():
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Address is required")
    draft = await apply_forward_geocode(body.to_core(), geocoder)
    return DraftOut.from_core(draft)


@router.post("/reverse-geocode", response_model=DraftOut)
async def reverse_geocode_draft(body: DraftIn, geocoder: Geocoder = Depends(get_geocoder)) -> DraftOut:
    """Fill the draft's address from its coordinate. Failure sets a fallback address and an alert."""
    if body.coordinate is None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Coordinate is required")
    draft = await apply_reverse_geocode(body.to_core(), geocoder)
    return DraftOut.from_core(draft)


@router.post("/save", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def save_draft(body: DraftIn, db: Session = Depends(get_db)) -> LocationResponse:
    """Create the location from a ready draft."""
    draft = body.to_core()
    if not draft.can_save:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Name, address and coordinate are required",
        )
    try:
        loc = repo_create_location(
            db,
            name=draft.name.strip(),
            address=draft.address.strip(),
            latitude=draft.coordinate.latitude,
            longitude=draft.coordinate.longitude,
            details=draft.details,
            contact=draft.contact,
        )
    except SQLAlchemyError:
        LOG.exception("Error saving location %r", draft.name)
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Location could not be saved",
        )
    return LocationResponse.from_row(loc)
