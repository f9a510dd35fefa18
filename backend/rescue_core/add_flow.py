"""Add-location flow: draft state, save gating, and the geocoding steps that fill it in.

The draft is held by the client between requests; every step takes a draft and
returns the updated one. Nothing here persists intermediate state.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from rescue_core.geocoder import (
    AddressLookupFailedError,
    AddressNotFoundError,
    Coordinate,
    Geocoder,
    forward_geocode,
    reverse_geocode,
)
from rescue_core.map_view import Region, add_form_region


class AddFlowState(str, Enum):
    """empty: nothing entered. coordinate_pending: partially filled. ready: name, address and coordinate present."""
    EMPTY = "empty"
    COORDINATE_PENDING = "coordinate_pending"
    READY = "ready"


class AlertKind(str, Enum):
    ADDRESS_NOT_FOUND = "address_not_found"
    ADDRESS_LOOKUP_FAILED = "address_lookup_failed"


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    title: str
    message: str


ADDRESS_NOT_FOUND_ALERT = Alert(
    kind=AlertKind.ADDRESS_NOT_FOUND,
    title="Address Not Found",
    message=(
        "Could not find coordinates for the provided address. "
        "Please try a different address or be more specific."
    ),
)
ADDRESS_LOOKUP_FAILED_ALERT = Alert(
    kind=AlertKind.ADDRESS_LOOKUP_FAILED,
    title="Address Lookup Failed",
    message="Could not find a street address for the selected location.",
)


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def can_save(name: Optional[str], address: Optional[str], coordinate: Optional[Coordinate]) -> bool:
    """True iff name and address are non-empty and a coordinate is set."""
    return _present(name) and _present(address) and coordinate is not None


@dataclass(frozen=True)
class AddFlowDraft:
    """Form state of one add-location flow."""

    name: str = ""
    address: str = ""
    contact: str = ""
    details: str = ""
    coordinate: Optional[Coordinate] = None
    from_map: bool = False
    alert: Optional[Alert] = None

    @property
    def can_save(self) -> bool:
        return can_save(self.name, self.address, self.coordinate)

    @property
    def state(self) -> AddFlowState:
        if self.can_save:
            return AddFlowState.READY
        if any(_present(v) for v in (self.name, self.address, self.contact, self.details)) or self.coordinate:
            return AddFlowState.COORDINATE_PENDING
        return AddFlowState.EMPTY

    @property
    def region(self) -> Region:
        return add_form_region(self.coordinate)

    @property
    def geocode_available(self) -> bool:
        """The explicit "geocode address" action is offered only for flows not started from the map."""
        return not self.from_map


async def apply_forward_geocode(draft: AddFlowDraft, geocoder: Geocoder) -> AddFlowDraft:
    """Pin the coordinate for draft.address. On failure clear the coordinate and raise the not-found alert."""
    try:
        coordinate = await forward_geocode(geocoder, draft.address.strip())
    except AddressNotFoundError:
        return replace(draft, coordinate=None, alert=ADDRESS_NOT_FOUND_ALERT)
    return replace(draft, coordinate=coordinate, alert=None)


async def apply_reverse_geocode(draft: AddFlowDraft, geocoder: Geocoder) -> AddFlowDraft:
    """Fill draft.address from draft.coordinate. On failure keep or replace the address with the fallback text."""
    if draft.coordinate is None:
        raise ValueError("draft has no coordinate to look up")
    try:
        address = await reverse_geocode(geocoder, draft.coordinate)
    except AddressLookupFailedError as e:
        fallback = e.fallback_address if e.fallback_address is not None else draft.address
        return replace(draft, address=fallback, alert=ADDRESS_LOOKUP_FAILED_ALERT)
    return replace(draft, address=address, alert=None)


async def start_from_map(coordinate: Coordinate, geocoder: Geocoder) -> AddFlowDraft:
    """New draft pre-filled with a map coordinate, then an automatic reverse-geocode attempt."""
    draft = AddFlowDraft(coordinate=coordinate, from_map=True)
    return await apply_reverse_geocode(draft, geocoder)
