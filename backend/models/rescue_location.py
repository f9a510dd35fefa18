"""Rescue location model for DB persistence."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RescueLocation(Base):
    """rescue_location table: id, name, address, latitude, longitude, details, contact, timestamp."""

    __tablename__ = "rescue_location"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Phone number or email, free text.
    contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Creation time; never changes (records are not edited).
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    @property
    def coordinate(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)

    @property
    def title(self) -> str:
        """Marker title on the map."""
        return self.name

    @property
    def subtitle(self) -> str:
        """Marker subtitle on the map."""
        return self.address
