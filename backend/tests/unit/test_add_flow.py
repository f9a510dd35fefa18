"""Unit tests: add flow draft (state, save gating, geocode steps)."""
import pytest

from rescue_core.add_flow import (
    AddFlowDraft,
    AddFlowState,
    AlertKind,
    apply_forward_geocode,
    apply_reverse_geocode,
    can_save,
    start_from_map,
)
from rescue_core.geocoder import NO_COMPONENTS_FALLBACK, Coordinate, Placemark

pytestmark = pytest.mark.unit

PIN = Coordinate(latitude=51.2465, longitude=22.5684)


@pytest.mark.parametrize(
    "name, address, coordinate, expected",
    [
        ("Food Bank", "1 Main St", PIN, True),
        ("", "1 Main St", PIN, False),
        ("Food Bank", "", PIN, False),
        ("Food Bank", "1 Main St", None, False),
        ("   ", "1 Main St", PIN, False),
    ],
)
def test_can_save(name, address, coordinate, expected):
    """Save needs name, address and coordinate."""
    assert can_save(name, address, coordinate) is expected


def test_state_transitions():
    """empty -> coordinate_pending -> ready."""
    assert AddFlowDraft().state is AddFlowState.EMPTY
    assert AddFlowDraft(address="1 Main St").state is AddFlowState.COORDINATE_PENDING
    assert AddFlowDraft(coordinate=PIN).state is AddFlowState.COORDINATE_PENDING
    assert AddFlowDraft(name="Bank", address="1 Main St", coordinate=PIN).state is AddFlowState.READY


def test_geocode_available_only_without_map_start():
    assert AddFlowDraft().geocode_available is True
    assert AddFlowDraft(coordinate=PIN, from_map=True).geocode_available is False


@pytest.mark.asyncio
async def test_forward_geocode_pins_coordinate(fake_geocoder):
    fake_geocoder.coordinates = [PIN]
    draft = await apply_forward_geocode(AddFlowDraft(name="Bank", address="Lublin"), fake_geocoder)
    assert draft.coordinate == PIN
    assert draft.alert is None
    assert draft.state is AddFlowState.READY


@pytest.mark.asyncio
async def test_forward_geocode_not_found_clears_coordinate(fake_geocoder):
    """A stale coordinate is cleared when the new address cannot be found."""
    draft = AddFlowDraft(name="Bank", address="Nowhere", coordinate=PIN)
    draft = await apply_forward_geocode(draft, fake_geocoder)
    assert draft.coordinate is None
    assert draft.alert.kind is AlertKind.ADDRESS_NOT_FOUND
    assert draft.can_save is False


@pytest.mark.asyncio
async def test_reverse_geocode_fills_address(fake_geocoder):
    fake_geocoder.placemarks = [Placemark(locality="Lublin", country="Poland")]
    draft = await apply_reverse_geocode(AddFlowDraft(coordinate=PIN), fake_geocoder)
    assert draft.address == "Lublin, Poland"
    assert draft.alert is None


@pytest.mark.asyncio
async def test_reverse_geocode_no_components_sets_fallback(fake_geocoder):
    fake_geocoder.placemarks = [Placemark()]
    draft = await apply_reverse_geocode(AddFlowDraft(coordinate=PIN), fake_geocoder)
    assert draft.address == NO_COMPONENTS_FALLBACK
    assert draft.alert.kind is AlertKind.ADDRESS_LOOKUP_FAILED


@pytest.mark.asyncio
async def test_reverse_geocode_error_keeps_address(fake_geocoder):
    """On provider error the typed address is left as it was."""
    fake_geocoder.error = "offline"
    draft = await apply_reverse_geocode(AddFlowDraft(address="typed", coordinate=PIN), fake_geocoder)
    assert draft.address == "typed"
    assert draft.alert.kind is AlertKind.ADDRESS_LOOKUP_FAILED


@pytest.mark.asyncio
async def test_reverse_geocode_requires_coordinate(fake_geocoder):
    with pytest.raises(ValueError):
        await apply_reverse_geocode(AddFlowDraft(), fake_geocoder)


@pytest.mark.asyncio
async def test_start_from_map(fake_geocoder):
    """Map start pre-fills the coordinate and looks the address up once."""
    fake_geocoder.placemarks = [Placemark(thoroughfare="Main St", locality="Springfield")]
    draft = await start_from_map(PIN, fake_geocoder)
    assert draft.coordinate == PIN
    assert draft.from_map is True
    assert draft.address == "Main St, Springfield"
    assert fake_geocoder.calls == [("reverse_geocode", PIN)]
    assert draft.state is AddFlowState.COORDINATE_PENDING
