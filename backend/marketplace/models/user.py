"""User model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base
from marketplace.models.role import RoleName

if TYPE_CHECKING:
    from marketplace.models.role import Role
    from marketplace.models.seller_profile import SellerProfile


class User(Base):
    """Marketplace account. Every user has exactly one role."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id"), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    role: Mapped[Role] = relationship(back_populates="users")
    seller_profile: Mapped[SellerProfile | None] = relationship(back_populates="user", uselist=False)

    @property
    def role_name(self) -> str | None:
        return self.role.name if self.role is not None else None

    def has_role(self, role_name: str) -> bool:
        return self.role_name == role_name

    def is_buyer(self) -> bool:
        return self.has_role(RoleName.BUYER.value)

    def is_seller(self) -> bool:
        return self.has_role(RoleName.SELLER.value)

    def is_moderator(self) -> bool:
        return self.has_role(RoleName.MODERATOR.value)

    def is_admin(self) -> bool:
        return self.has_role(RoleName.ADMIN.value)

    # Permission checks delegate to the role
    def can_sell(self) -> bool:
        return self.role is not None and self.role.can_sell()

    def can_moderate(self) -> bool:
        return self.role is not None and self.role.can_moderate()

    def can_access_admin(self) -> bool:
        return self.role is not None and self.role.can_access_admin()

    def can_upgrade_to_seller(self) -> bool:
        return self.is_buyer()

    def is_verified_seller(self) -> bool:
        return self.seller_profile is not None and bool(self.seller_profile.is_verified)

    def has_active_seller_account(self) -> bool:
        return self.seller_profile is not None and bool(self.seller_profile.is_active)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
