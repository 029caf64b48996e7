"""Seller profile and availability resources."""

from typing import Any

from marketplace.models.seller_availability import SellerAvailability
from marketplace.models.seller_profile import SellerProfile
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource

SELLER_PROFILE_FIELDS = FieldMapRegistry.register(
    "seller_profile",
    {
        "businessName": "business_name",
        "businessDescription": "business_description",
        "businessType": "business_type",
        "phone": "phone",
        "address": "address",
        "city": "city",
        "postalCode": "postal_code",
        "country": "country",
        "listingFeeBalance": "listing_fee_balance",
        "isActive": "is_active",
        "isVerified": "is_verified",
        "verifiedAt": "verified_at",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class SellerProfileResource(JsonResource):
    fields = SELLER_PROFILE_FIELDS
    record: SellerProfile

    def computed(self) -> dict[str, Any]:
        return {
            "id": self.record.id,
            "userId": self.record.user_id,
            "fullAddress": self.record.full_address(),
        }


SELLER_AVAILABILITY_FIELDS = FieldMapRegistry.register(
    "seller_availability",
    {
        "dayOfWeek": "day_of_week",
        "startTime": "start_time",
        "endTime": "end_time",
        "isActive": "is_active",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class SellerAvailabilityResource(JsonResource):
    """Weekly availability slot. Times render as wall-clock "HH:MM:SS"."""

    fields = SELLER_AVAILABILITY_FIELDS
    record: SellerAvailability

    def computed(self) -> dict[str, Any]:
        return {
            "id": self.record.id,
            "durationMinutes": self.record.duration_minutes(),
        }
