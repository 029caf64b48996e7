"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- HTTP client for API testing
- Transient marketplace records (no database needed)
- In-memory SQLite sessions for persisted and detached records
"""

from datetime import datetime, time, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from marketplace.database import Base
from marketplace.main import app
from marketplace.models import (
    AppointmentStatus,
    Category,
    Image,
    ImageType,
    Listing,
    ListingCondition,
    ListingStatus,
    Role,
    SellerAppointment,
    SellerAvailability,
    SellerProfile,
    User,
)

CREATED_AT = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 2, 1, 8, 30, 15, 250000, tzinfo=timezone.utc)


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client():
    """Async test client for the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def category_engine():
    """In-memory SQLite engine with only the categories table."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine, tables=[Category.__table__])
    yield engine
    engine.dispose()


@pytest.fixture
def category_session(category_engine):
    """Session factory bound to the category engine."""

    def _session() -> Session:
        return Session(category_engine, expire_on_commit=False)

    return _session


# =============================================================================
# Record Fixtures
# =============================================================================


def make_role(name: str = "seller", **overrides) -> Role:
    """Create a transient Role."""
    values = {
        "id": 2,
        "name": name,
        "display_name": name.title(),
        "description": None,
        "permissions": ["listings.create", "listings.update"],
        "is_active": True,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return Role(**values)


def make_seller_profile(**overrides) -> SellerProfile:
    """Create a transient SellerProfile."""
    values = {
        "id": 5,
        "user_id": 7,
        "business_name": "Velo Vintage",
        "business_description": "Restored road bikes",
        "business_type": "individual",
        "phone": "+33 4 00 00 00 00",
        "address": "12 Rue Merciere",
        "city": "Lyon",
        "postal_code": "69002",
        "country": "France",
        "listing_fee_balance": Decimal("12.50"),
        "is_active": True,
        "is_verified": True,
        "verified_at": CREATED_AT,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return SellerProfile(**values)


def make_image(image_type: ImageType = ImageType.LISTING_PRIMARY, **overrides) -> Image:
    """Create a transient Image."""
    values = {
        "id": 3,
        "type": image_type,
        "original_name": "bike.jpg",
        "file_name": "abc123.jpg",
        "file_path": "listings/primary/abc123.jpg",
        "file_size": 1536,
        "mime_type": "image/jpeg",
        "width": 800,
        "height": 600,
        "alt_text": None,
        "sort_order": 0,
        "is_primary": image_type == ImageType.LISTING_PRIMARY,
        "is_active": True,
        "image_metadata": None,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return Image(**values)


def make_listing(**overrides) -> Listing:
    """Create a transient Listing."""
    values = {
        "id": 42,
        "seller_profile_id": 5,
        "category_id": None,
        "title": "Vintage Road Bike",
        "description": "Steel frame, new tyres",
        "brand": "Peugeot",
        "model": "PX-10",
        "year": 1978,
        "price": Decimal("250.00"),
        "original_price": Decimal("500.00"),
        "condition": ListingCondition.LIKE_NEW,
        "location": {"city": "Lyon", "country": "France"},
        "can_deliver_globally": False,
        "requires_appointment": True,
        "status": ListingStatus.ACTIVE,
        "is_featured": False,
        "featured_until": None,
        "published_at": CREATED_AT,
        "expires_at": None,
        "views_count": 10,
        "favorites_count": 2,
        "contact_count": 1,
        "meta_title": None,
        "meta_description": None,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return Listing(**values)


def make_category(**overrides) -> Category:
    """Create a transient Category."""
    values = {
        "id": 1,
        "name": "Vehicles",
        "slug": "vehicles",
        "description": None,
        "icon": "car",
        "color": "#336699",
        "sort_order": 0,
        "is_active": True,
        "is_featured": False,
        "meta_title": None,
        "meta_description": None,
        "attributes": None,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return Category(**values)


def make_availability(**overrides) -> SellerAvailability:
    """Create a transient SellerAvailability."""
    values = {
        "id": 11,
        "seller_profile_id": 5,
        "day_of_week": "monday",
        "start_time": time(9, 0),
        "end_time": time(12, 30),
        "is_active": True,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return SellerAvailability(**values)


def make_appointment(**overrides) -> SellerAppointment:
    """Create a transient SellerAppointment."""
    values = {
        "id": 21,
        "seller_profile_id": 5,
        "buyer_id": 8,
        "listing_id": 42,
        "appointment_datetime": datetime(2024, 3, 1, 14, 0, 0, tzinfo=timezone.utc),
        "duration_minutes": 90,
        "status": AppointmentStatus.APPROVED,
        "buyer_message": "Can I test ride it?",
        "seller_response": None,
        "meeting_location": "12 Rue Merciere, Lyon",
        "meeting_notes": None,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(overrides)
    return SellerAppointment(**values)


@pytest.fixture
def seller_role() -> Role:
    return make_role("seller")


@pytest.fixture
def seller_profile() -> SellerProfile:
    return make_seller_profile()


@pytest.fixture
def seller_user(seller_role: Role, seller_profile: SellerProfile) -> User:
    """A verified seller with an active profile."""
    return User(
        id=7,
        name="Alice",
        email="alice@example.com",
        password="hashed",
        email_verified_at=None,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
        role=seller_role,
        seller_profile=seller_profile,
    )
