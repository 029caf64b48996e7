"""Listing model.

Listings are owned by a seller profile, belong to a category and carry an
ordered set of images (one primary, the rest gallery).
"""

from __future__ import annotations

import enum
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base
from marketplace.models.image import ImageType

if TYPE_CHECKING:
    from marketplace.models.category import Category
    from marketplace.models.image import Image
    from marketplace.models.seller_profile import SellerProfile


class ListingStatus(str, enum.Enum):
    """Listing lifecycle states."""

    DRAFT = "draft"
    ACTIVE = "active"
    SOLD = "sold"
    EXPIRED = "expired"
    SUSPENDED = "suspended"
    PENDING_APPROVAL = "pending_approval"
    REJECTED = "rejected"


class ListingCondition(str, enum.Enum):
    """Item condition."""

    NEW = "new"
    LIKE_NEW = "like_new"
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Listing(Base):
    """Item offered for sale by a seller."""

    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    seller_profile_id: Mapped[int] = mapped_column(
        ForeignKey("seller_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # === Content ===
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    original_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    condition: Mapped[ListingCondition | None] = mapped_column(
        Enum(ListingCondition, name="listing_condition", create_constraint=True),
        nullable=True,
    )
    location: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    # === Delivery ===
    can_deliver_globally: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    requires_appointment: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # === Status ===
    status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, name="listing_status", create_constraint=True),
        nullable=False,
        default=ListingStatus.DRAFT,
        index=True,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured_until: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # === Counters ===
    views_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    favorites_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    contact_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # === SEO ===
    meta_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    seller_profile: Mapped[SellerProfile] = relationship(back_populates="listings")
    category: Mapped[Category | None] = relationship()
    images: Mapped[list[Image]] = relationship(
        back_populates="listing",
        order_by="Image.sort_order",
    )

    __table_args__ = (
        Index("idx_listing_status_published", "status", "published_at"),
    )

    # === Images ===
    def primary_image(self) -> Image | None:
        for image in self.images:
            if image.type == ImageType.LISTING_PRIMARY and image.is_active:
                return image
        return None

    def gallery_images(self) -> list[Image]:
        return [
            image
            for image in self.images
            if image.type == ImageType.LISTING_GALLERY and image.is_active
        ]

    def primary_image_url(self) -> str | None:
        """URL of the primary image, falling back to the first gallery image."""
        image = self.primary_image()
        if image is None:
            gallery = self.gallery_images()
            image = gallery[0] if gallery else None
        return image.url if image is not None else None

    def image_urls(self) -> list[str]:
        return [image.url for image in self.images if image.is_active]

    def total_image_size(self) -> int:
        return sum(image.file_size or 0 for image in self.images)

    # === State ===
    def is_active(self) -> bool:
        return self.status == ListingStatus.ACTIVE

    def is_published(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.published_at is not None and self.published_at <= now

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.expires_at is not None and self.expires_at <= now

    def can_be_viewed(self, now: datetime | None = None) -> bool:
        return self.is_active() and self.is_published(now) and not self.is_expired(now)

    def is_currently_featured(self, now: datetime | None = None) -> bool:
        """Featured, and the featured period (if any) has not ended."""
        now = now or datetime.now(timezone.utc)
        return self.is_featured and (self.featured_until is None or self.featured_until > now)

    def days_active(self, now: datetime | None = None) -> int:
        if self.published_at is None:
            return 0
        now = now or datetime.now(timezone.utc)
        return max((now - self.published_at).days, 0)

    def is_expiring_soon(self, now: datetime | None = None, days: int = 7) -> bool:
        """Expires within ``days``. Already expired listings are not expiring soon."""
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now < self.expires_at <= now + timedelta(days=days)

    # === Pricing ===
    def has_discount(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    def discount_percentage(self) -> int | None:
        if not self.has_discount():
            return None
        return int(round((1 - self.price / self.original_price) * 100))

    def formatted_price(self) -> str:
        return f"€{self.price:,.2f}"

    # === Presentation ===
    def location_display(self) -> str:
        location = self.location or {}
        return ", ".join(part for part in (location.get("city"), location.get("country")) if part)

    def slug(self) -> str:
        base = re.sub(r"[^a-z0-9]+", "-", self.title.lower()).strip("-")
        return f"{base}-{self.id}"

    def __repr__(self) -> str:
        return f"<Listing(id={self.id}, title={self.title[:30]}...)>"
