"""
Schemas Pydantic do cliente.
"""

from vitrine.schemas.base import BaseSchema, MessageResponse
from vitrine.schemas.enums import ClickType, ModerationStatus, PlanTier, SortMode
from vitrine.schemas.user import AuthResponse, AuthResult, RegistrationForm, User
from vitrine.schemas.taxonomy import CheckoutSession, Plan, Taxonomy
from vitrine.schemas.listing import (
    DashboardStats,
    EngagementStats,
    Listing,
    ListingDetail,
    ListingFilters,
    ListingPage,
    OwnedListing,
    Photo,
)
from vitrine.schemas.profile import (
    PhotoFile,
    ProfileForm,
    ProfilePayload,
    RejectedFile,
    UploadReport,
)

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    # Enums
    "ClickType",
    "ModerationStatus",
    "PlanTier",
    "SortMode",
    # User
    "AuthResponse",
    "AuthResult",
    "RegistrationForm",
    "User",
    # Taxonomy
    "CheckoutSession",
    "Plan",
    "Taxonomy",
    # Listing
    "DashboardStats",
    "EngagementStats",
    "Listing",
    "ListingDetail",
    "ListingFilters",
    "ListingPage",
    "OwnedListing",
    "Photo",
    # Profile
    "PhotoFile",
    "ProfileForm",
    "ProfilePayload",
    "RejectedFile",
    "UploadReport",
]
