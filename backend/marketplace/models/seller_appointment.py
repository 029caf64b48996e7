"""Seller appointment model.

Buyers book a time with a seller, optionally about a specific listing, to
view or collect an item. The seller approves, rejects or completes it.
"""

from __future__ import annotations

import enum
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.listing import Listing
    from marketplace.models.seller_profile import SellerProfile
    from marketplace.models.user import User


class AppointmentStatus(str, enum.Enum):
    """Appointment lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_OPEN_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.APPROVED)


class SellerAppointment(Base):
    """Appointment between a buyer and a seller."""

    __tablename__ = "seller_appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    seller_profile_id: Mapped[int] = mapped_column(
        ForeignKey("seller_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    buyer_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    listing_id: Mapped[int | None] = mapped_column(
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=True,
    )

    appointment_datetime: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    status: Mapped[AppointmentStatus] = mapped_column(
        Enum(AppointmentStatus, name="appointment_status", create_constraint=True),
        nullable=False,
        default=AppointmentStatus.PENDING,
    )

    # === Messages ===
    buyer_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    seller_response: Mapped[str | None] = mapped_column(Text, nullable=True)
    meeting_location: Mapped[str | None] = mapped_column(Text, nullable=True)
    meeting_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    seller_profile: Mapped[SellerProfile] = relationship()
    buyer: Mapped[User] = relationship()
    listing: Mapped[Listing | None] = relationship()

    # === Time ===
    def end_time(self) -> datetime:
        return self.appointment_datetime + timedelta(minutes=self.duration_minutes)

    def is_upcoming(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.appointment_datetime > now

    def formatted_duration(self) -> str:
        """E.g. "45 minutes", "1 hour", "2 hours 30 minutes"."""
        hours, minutes = divmod(self.duration_minutes, 60)
        if hours == 0:
            return f"{minutes} minutes"
        hours_text = "1 hour" if hours == 1 else f"{hours} hours"
        return hours_text if minutes == 0 else f"{hours_text} {minutes} minutes"

    # === Status ===
    def can_be_cancelled(self, now: datetime | None = None) -> bool:
        return self.status in _OPEN_STATUSES and self.is_upcoming(now)

    def can_be_completed(self, now: datetime | None = None) -> bool:
        return self.status == AppointmentStatus.APPROVED and not self.is_upcoming(now)

    def __repr__(self) -> str:
        return f"<SellerAppointment(id={self.id}, status={self.status}, at={self.appointment_datetime})>"
