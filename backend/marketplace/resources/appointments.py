"""Appointment resource."""

from typing import Any

from marketplace.config import settings
from marketplace.models.seller_appointment import SellerAppointment
from marketplace.projections import FieldMapRegistry, format_timestamp
from marketplace.resources.base import JsonResource
from marketplace.resources.sellers import SellerProfileResource
from marketplace.resources.users import UserResource

APPOINTMENT_FIELDS = FieldMapRegistry.register(
    "appointment",
    {
        "appointmentDatetime": "appointment_datetime",
        "durationMinutes": "duration_minutes",
        "status": "status",
        "buyerMessage": "buyer_message",
        "sellerResponse": "seller_response",
        "meetingLocation": "meeting_location",
        "meetingNotes": "meeting_notes",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


class AppointmentResource(JsonResource):
    fields = APPOINTMENT_FIELDS
    record: SellerAppointment

    def computed(self) -> dict[str, Any]:
        appointment = self.record
        return {
            "id": appointment.id,
            "listingId": appointment.listing_id,
            "endTime": format_timestamp(appointment.end_time(), settings.timestamp_precision),
            "formattedDuration": appointment.formatted_duration(),
            "canBeCancelled": appointment.can_be_cancelled(),
            "canBeCompleted": appointment.can_be_completed(),
            "seller": SellerProfileResource.make(appointment.seller_profile),
            "buyer": UserResource.make(appointment.buyer),
        }
