"""Seller profile model.

A user with the seller role owns one profile holding business details and the
verification state moderators set.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.listing import Listing
    from marketplace.models.seller_availability import SellerAvailability
    from marketplace.models.user import User


class SellerProfile(Base):
    """Business profile attached to a seller account."""

    __tablename__ = "seller_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # === Business ===
    business_name: Mapped[str] = mapped_column(String(255), nullable=False)
    business_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    business_type: Mapped[str] = mapped_column(String(50), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    # === Address ===
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    listing_fee_balance: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))

    # === Verification ===
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    user: Mapped[User] = relationship(back_populates="seller_profile")
    listings: Mapped[list[Listing]] = relationship(back_populates="seller_profile")
    availabilities: Mapped[list[SellerAvailability]] = relationship(back_populates="seller_profile")

    def full_address(self) -> str:
        """Join the non-empty address parts with commas."""
        parts = [self.address, self.city, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)

    def __repr__(self) -> str:
        return f"<SellerProfile(id={self.id}, business_name={self.business_name})>"
