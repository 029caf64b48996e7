"""SQLAlchemy models."""

from marketplace.models.category import Category
from marketplace.models.image import Image, ImageType
from marketplace.models.listing import Listing, ListingCondition, ListingStatus
from marketplace.models.role import Role, RoleName
from marketplace.models.seller_appointment import AppointmentStatus, SellerAppointment
from marketplace.models.seller_availability import SellerAvailability
from marketplace.models.seller_profile import SellerProfile
from marketplace.models.user import User

__all__ = [
    "AppointmentStatus",
    "Category",
    "Image",
    "ImageType",
    "Listing",
    "ListingCondition",
    "ListingStatus",
    "Role",
    "RoleName",
    "SellerAppointment",
    "SellerAvailability",
    "SellerProfile",
    "User",
]
