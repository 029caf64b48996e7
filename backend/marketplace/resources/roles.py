"""Role resource."""

from typing import Any

from marketplace.models.role import Role
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource

ROLE_FIELDS = FieldMapRegistry.register(
    "role",
    {
        "name": "name",
        "displayName": "display_name",
        "description": "description",
        "permissions": "permissions",
        "isActive": "is_active",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class RoleResource(JsonResource):
    fields = ROLE_FIELDS
    record: Role

    def computed(self) -> dict[str, Any]:
        return {"id": self.record.id}
