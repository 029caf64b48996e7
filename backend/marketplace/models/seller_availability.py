"""Seller availability model.

One row per weekly slot in which a seller accepts appointments.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Time, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.seller_profile import SellerProfile


class SellerAvailability(Base):
    """Weekly availability slot, e.g. monday 09:00-12:00."""

    __tablename__ = "seller_availabilities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    seller_profile_id: Mapped[int] = mapped_column(
        ForeignKey("seller_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Lower-case English day name
    day_of_week: Mapped[str] = mapped_column(String(10), nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    seller_profile: Mapped[SellerProfile] = relationship(back_populates="availabilities")

    def duration_minutes(self) -> int:
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return end - start

    def __repr__(self) -> str:
        return f"<SellerAvailability(id={self.id}, day={self.day_of_week}, {self.start_time}-{self.end_time})>"
