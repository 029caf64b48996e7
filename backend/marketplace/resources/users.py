"""User resource.

Besides the projected profile fields, a user renders its role and the
permission flags the frontend uses to decide which areas to show.
"""

from typing import Any

from marketplace.models.user import User
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource
from marketplace.resources.roles import RoleResource

USER_FIELDS = FieldMapRegistry.register(
    "user",
    {
        "name": "name",
        "email": "email",
        "emailVerifiedAt": "email_verified_at",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class UserResource(JsonResource):
    fields = USER_FIELDS
    record: User

    def computed(self) -> dict[str, Any]:
        user = self.record
        return {
            "id": user.id,
            "isSeller": user.is_seller(),
            "isVerifiedSeller": user.is_verified_seller(),
            "hasActiveSellerAccount": user.has_active_seller_account(),
            "role": RoleResource.make(user.role),
            "permissions": {
                "canSell": user.can_sell(),
                "canModerate": user.can_moderate(),
                "canAccessAdmin": user.can_access_admin(),
                "canUpgradeToSeller": user.can_upgrade_to_seller(),
            },
        }
