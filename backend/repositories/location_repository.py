"""Rescue location repository: list, search, get, create, delete."""
import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Literal, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.rescue_location import RescueLocation

LOG = logging.getLogger(__name__)

SortKey = Literal["name", "timestamp"]


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def list_locations(session: Session, sort: SortKey = "name") -> list[RescueLocation]:
    """Return all locations, by name (list view) or by creation time (map view)."""
    if sort == "timestamp":
        order = (RescueLocation.timestamp, RescueLocation.name)
    else:
        order = (RescueLocation.name, RescueLocation.timestamp)
    result = session.execute(select(RescueLocation).order_by(*order))
    return list(result.scalars().all())


def search_locations(session: Session, query: str | None, sort: SortKey = "name") -> list[RescueLocation]:
    """Case-insensitive substring match on name or address, text used as typed.

    Empty or missing query returns everything. Results keep the list order for sort.
    """
    locations = list_locations(session, sort=sort)
    if not query:
        return locations
    needle = query.casefold()
    return [
        loc for loc in locations
        if needle in (loc.name or "").casefold() or needle in (loc.address or "").casefold()
    ]


def get_location(session: Session, location_id: str) -> Optional[RescueLocation]:
    """Return a location by id or None."""
    return session.get(RescueLocation, location_id)


def create_location(
    session: Session,
    name: str,
    address: str,
    latitude: float,
    longitude: float,
    details: str | None = None,
    contact: str | None = None,
    location_id: str | None = None,
    timestamp: datetime | None = None,
) -> RescueLocation:
    """Create a location, commit, and return it. Id and timestamp are generated if not provided."""
    loc = RescueLocation(
        id=location_id or str(uuid.uuid4()),
        name=name,
        address=address,
        latitude=latitude,
        longitude=longitude,
        details=_blank_to_none(details),
        contact=_blank_to_none(contact),
        timestamp=timestamp or datetime.now(timezone.utc),
    )
    session.add(loc)
    session.commit()
    session.refresh(loc)
    LOG.info("Created rescue location %s (%s)", loc.id, loc.name)
    return loc


def count_locations(session: Session) -> int:
    """Return the number of locations."""
    result = session.execute(select(func.count()).select_from(RescueLocation))
    return result.scalar() or 0


def delete_location(session: Session, location_id: str) -> bool:
    """Delete a location by id. Returns True if deleted, False if not found."""
    loc = get_location(session, location_id)
    if loc is None:
        return False
    session.delete(loc)
    session.commit()
    LOG.info("Deleted rescue location %s", location_id)
    return True


def delete_locations(session: Session, location_ids: Iterable[str]) -> list[str]:
    """Delete every existing location in location_ids in one commit. Returns the ids actually deleted."""
    deleted: list[str] = []
    for location_id in dict.fromkeys(location_ids):
        loc = get_location(session, location_id)
        if loc is None:
            continue
        session.delete(loc)
        deleted.append(location_id)
    if deleted:
        session.commit()
        LOG.info("Deleted %d rescue locations", len(deleted))
    return deleted
