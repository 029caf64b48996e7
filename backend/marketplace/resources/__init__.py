"""JSON resources.

Resources render domain records for API responses. Importing this package
registers every resource's field map with the FieldMapRegistry.
"""

from marketplace.resources.appointments import AppointmentResource
from marketplace.resources.base import JsonResource, ResourceCollection
from marketplace.resources.categories import CategoryResource, NestedCategoryResource
from marketplace.resources.images import ImageResource
from marketplace.resources.listings import (
    ListingCardResource,
    ListingDetailResource,
    ListingResource,
)
from marketplace.resources.roles import RoleResource
from marketplace.resources.sellers import SellerAvailabilityResource, SellerProfileResource
from marketplace.resources.users import UserResource

__all__ = [
    "AppointmentResource",
    "CategoryResource",
    "ImageResource",
    "JsonResource",
    "ListingCardResource",
    "ListingDetailResource",
    "ListingResource",
    "NestedCategoryResource",
    "ResourceCollection",
    "RoleResource",
    "SellerAvailabilityResource",
    "SellerProfileResource",
    "UserResource",
]
