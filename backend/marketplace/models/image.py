"""Image model for profile photos and listing galleries."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, Enum, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.config import settings
from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.listing import Listing


class ImageType(str, enum.Enum):
    """Where an image is used."""

    LISTING_PRIMARY = "listing_primary"
    LISTING_GALLERY = "listing_gallery"
    SELLER_PROFILE_AVATAR = "seller_profile_avatar"
    SELLER_PROFILE_COVER = "seller_profile_cover"
    SELLER_PROFILE_VERIFICATION = "seller_profile_verification"
    USER_AVATAR = "user_avatar"
    USER_COVER = "user_cover"
    APPOINTMENT_ATTACHMENT = "appointment_attachment"

    @property
    def label(self) -> str:
        return IMAGE_TYPE_LABELS[self]


IMAGE_TYPE_LABELS = {
    ImageType.LISTING_PRIMARY: "Listing Primary Image",
    ImageType.LISTING_GALLERY: "Listing Gallery Image",
    ImageType.SELLER_PROFILE_AVATAR: "Seller Profile Avatar",
    ImageType.SELLER_PROFILE_COVER: "Seller Profile Cover",
    ImageType.SELLER_PROFILE_VERIFICATION: "Seller Verification Document",
    ImageType.USER_AVATAR: "User Avatar",
    ImageType.USER_COVER: "User Cover Image",
    ImageType.APPOINTMENT_ATTACHMENT: "Appointment Attachment",
}

_SIZE_UNITS = ("B", "KB", "MB", "GB")


class Image(Base):
    """Uploaded image file and its display metadata."""

    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    listing_id: Mapped[int | None] = mapped_column(
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    type: Mapped[ImageType] = mapped_column(
        Enum(ImageType, name="image_type", create_constraint=True),
        nullable=False,
        index=True,
    )

    # === File ===
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    width: Mapped[int | None] = mapped_column(Integer, nullable=True)
    height: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # === Display ===
    alt_text: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    image_metadata: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    listing: Mapped[Listing | None] = relationship(back_populates="images")

    @property
    def url(self) -> str:
        return f"{settings.storage_url.rstrip('/')}/{self.file_path.lstrip('/')}"

    def thumbnail_url(self) -> str:
        thumbnails = (self.image_metadata or {}).get("thumbnails") or {}
        return thumbnails.get("thumbnail") or self.url

    def formatted_size(self) -> str:
        """Human readable file size, e.g. "1.5 MB"."""
        size = float(self.file_size or 0)
        unit = 0
        while size > 1024 and unit < len(_SIZE_UNITS) - 1:
            size /= 1024
            unit += 1
        return f"{round(size, 2):g} {_SIZE_UNITS[unit]}"

    def dimensions(self) -> str | None:
        if self.width and self.height:
            return f"{self.width} x {self.height}"
        return None

    def is_image(self) -> bool:
        return (self.mime_type or "").startswith("image/")

    def __repr__(self) -> str:
        return f"<Image(id={self.id}, type={self.type}, file_name={self.file_name})>"
