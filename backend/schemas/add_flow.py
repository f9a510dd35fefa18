"""Pydantic schemas for the add-location flow."""
from pydantic import BaseModel, Field

from rescue_core.add_flow import AddFlowDraft, Alert, AddFlowState, AlertKind
from schemas.locations import CoordinateSchema, RegionSchema


class AlertSchema(BaseModel):
    kind: AlertKind
    title: str
    message: str

    @classmethod
    def from_core(cls, alert: Alert) -> "AlertSchema":
        return cls(kind=alert.kind, title=alert.title, message=alert.message)


class DraftIn(BaseModel):
    """Add form fields as the client currently holds them."""

    name: str = Field(default="", max_length=255)
    address: str = Field(default="", max_length=512)
    contact: str = Field(default="", max_length=255)
    details: str = ""
    coordinate: CoordinateSchema | None = None
    from_map: bool = False

    def to_core(self) -> AddFlowDraft:
        return AddFlowDraft(
            name=self.name,
            address=self.address,
            contact=self.contact,
            details=self.details,
            coordinate=self.coordinate.to_core() if self.coordinate else None,
            from_map=self.from_map,
        )


class DraftOut(DraftIn):
    """Draft after a step, with derived form state."""

    state: AddFlowState
    can_save: bool
    geocode_available: bool
    region: RegionSchema
    alert: AlertSchema | None = None

    @classmethod
    def from_core(cls, draft: AddFlowDraft) -> "DraftOut":
        return cls(
            name=draft.name,
            address=draft.address,
            contact=draft.contact,
            details=draft.details,
            coordinate=CoordinateSchema.from_core(draft.coordinate) if draft.coordinate else None,
            from_map=draft.from_map,
            state=draft.state,
            can_save=draft.can_save,
            geocode_available=draft.geocode_available,
            region=RegionSchema.from_core(draft.region),
            alert=AlertSchema.from_core(draft.alert) if draft.alert else None,
        )
