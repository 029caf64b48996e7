"""Role model for buyer/seller/moderator/admin authorization."""

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.user import User


class RoleName(str, enum.Enum):
    """Built-in role names."""

    BUYER = "buyer"
    SELLER = "seller"
    MODERATOR = "moderator"
    ADMIN = "admin"


class Role(Base):
    """Authorization role assigned to a user."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    permissions: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    users: Mapped[list["User"]] = relationship(back_populates="role")

    def is_buyer(self) -> bool:
        return self.name == RoleName.BUYER.value

    def is_seller(self) -> bool:
        return self.name == RoleName.SELLER.value

    def is_moderator(self) -> bool:
        return self.name == RoleName.MODERATOR.value

    def is_admin(self) -> bool:
        return self.name == RoleName.ADMIN.value

    def can_sell(self) -> bool:
        return self.name in (RoleName.SELLER.value, RoleName.ADMIN.value)

    def can_moderate(self) -> bool:
        return self.name in (RoleName.MODERATOR.value, RoleName.ADMIN.value)

    def can_access_admin(self) -> bool:
        return self.is_admin()

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
