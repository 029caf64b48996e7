"""Listing resources.

``ListingResource`` is the shape used by the seller dashboard.
``ListingDetailResource`` is the public listing page; its related records are
rendered only when loaded. ``ListingCardResource`` is the compact shape used in
search results and category grids.
"""

from typing import Any

from marketplace.config import settings
from marketplace.models.listing import Listing
from marketplace.projections import FieldMapRegistry
from marketplace.resources.base import JsonResource, is_loaded
from marketplace.resources.categories import CategoryResource, breadcrumb, loaded_path
from marketplace.resources.images import ImageResource
from marketplace.resources.sellers import SellerProfileResource

LISTING_FIELDS = FieldMapRegistry.register(
    "listing",
    {
        "title": "title",
        "description": "description",
        "price": "price",
        "categoryId": "category_id",
        "condition": "condition",
        "location": "location",
        "canDeliverGlobally": "can_deliver_globally",
        "requiresAppointment": "requires_appointment",
        "status": "status",
        "publishedAt": "published_at",
        "expiresAt": "expires_at",
        "viewsCount": "views_count",
        "favoritesCount": "favorites_count",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)

LISTING_CARD_FIELDS = FieldMapRegistry.register(
    "listing_card",
    {
        "title": "title",
        "price": "price",
        "originalPrice": "original_price",
        "condition": "condition",
        "brand": "brand",
        "viewsCount": "views_count",
        "favoritesCount": "favorites_count",
        "isFeatured": "is_featured",
        "publishedAt": "published_at",
    },
)

LISTING_DETAIL_FIELDS = FieldMapRegistry.register(
    "listing_detail",
    {
        "title": "title",
        "description": "description",
        "price": "price",
        "originalPrice": "original_price",
        "condition": "condition",
        "brand": "brand",
        "model": "model",
        "year": "year",
        "canDeliverGlobally": "can_deliver_globally",
        "requiresAppointment": "requires_appointment",
        "status": "status",
        "viewsCount": "views_count",
        "favoritesCount": "favorites_count",
        "contactCount": "contact_count",
        "featuredUntil": "featured_until",
        "publishedAt": "published_at",
        "expiresAt": "expires_at",
        "metaTitle": "meta_title",
        "metaDescription": "meta_description",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
)


def owned_by(viewer: Any, listing: Listing) -> bool:
    """Only the owning seller may edit or delete a listing."""
    profile = getattr(viewer, "seller_profile", None)
    if profile is None:
        return False
    return profile.id == listing.seller_profile_id


class ListingResource(JsonResource):
    fields = LISTING_FIELDS
    record: Listing

    def computed(self) -> dict[str, Any]:
        listing = self.record
        images = listing.images
        return {
            "id": listing.id,
            "slug": listing.slug(),
            "shareUrl": f"{settings.app_url.rstrip('/')}/product/{listing.id}",
            "formattedPrice": listing.formatted_price(),
            "conditionLabel": listing.condition.label if listing.condition is not None else None,
            "locationString": listing.location_display(),
            "isActive": listing.is_active(),
            "isPublished": listing.is_published(),
            "isExpired": listing.is_expired(),
            "canBeViewed": listing.can_be_viewed(),
            "hasDiscount": listing.has_discount(),
            "images": {
                "primary": ImageResource.make(listing.primary_image()),
                "gallery": ImageResource.collection(listing.gallery_images()).to_list(),
                "hasImages": bool(images),
                "imagesCount": len(images),
                "totalFileSize": listing.total_image_size(),
            },
            "seller": SellerProfileResource.make(listing.seller_profile),
            "canEdit": owned_by(self.viewer, listing),
        }


class ListingCardResource(JsonResource):
    fields = LISTING_CARD_FIELDS
    record: Listing

    def computed(self) -> dict[str, Any]:
        listing = self.record
        seller = listing.seller_profile
        category = listing.category
        return {
            "id": listing.id,
            "slug": listing.slug(),
            "locationDisplay": listing.location_display(),
            "hasDiscount": listing.has_discount(),
            "discountPercentage": listing.discount_percentage(),
            "primaryImageUrl": listing.primary_image_url(),
            "seller": (
                {
                    "id": seller.id,
                    "businessName": seller.business_name,
                    "isVerified": bool(seller.is_verified),
                }
                if seller is not None
                else None
            ),
            "category": (
                {"id": category.id, "name": category.name, "slug": category.slug}
                if category is not None
                else None
            ),
        }


class ListingDetailResource(JsonResource):
    fields = LISTING_DETAIL_FIELDS
    record: Listing

    def computed(self) -> dict[str, Any]:
        listing = self.record
        data: dict[str, Any] = {
            "id": listing.id,
            "slug": listing.slug(),
            "isFeatured": listing.is_currently_featured(),
            "isActive": listing.is_active(),
            "canEdit": owned_by(self.viewer, listing),
            "canDelete": owned_by(self.viewer, listing),
            "hasDiscount": listing.has_discount(),
            "discountPercentage": listing.discount_percentage(),
            "locationDisplay": listing.location_display(),
            "locationData": listing.location or {},
            "daysActive": listing.days_active(),
            "isExpiringSoon": listing.is_expiring_soon(),
        }
        if is_loaded(listing, "seller_profile"):
            data["seller"] = SellerProfileResource.make(listing.seller_profile)
        if is_loaded(listing, "category"):
            category = listing.category
            path = loaded_path(category) if category is not None else None
            data["category"] = CategoryResource.make(category)
            data["categoryPath"] = breadcrumb(path) if path is not None else None
        if is_loaded(listing, "images"):
            data["images"] = ImageResource.collection(listing.images).to_list()
            data["imageUrls"] = listing.image_urls()
            data["primaryImageUrl"] = listing.primary_image_url()
        return data
