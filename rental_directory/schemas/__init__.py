"""Pydantic schemas for API and validation."""
from rental_directory.schemas.software import (
    FeatureResponse,
    PricingPlanResponse,
    SupportOptionResponse,
    SoftwareResponse,
    EnrichedProduct,
    CatalogPage,
    SoftwareSearchResult,
    SoftwareListingCreate,
)
from rental_directory.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    ReviewListResponse,
    ContactCreate,
    ContactResponse,
    SoftwareInterestCreate,
    SoftwareInterestResponse,
)
from rental_directory.schemas.comparison import FeatureRow, ComparisonResponse

__all__ = [
    "FeatureResponse",
    "PricingPlanResponse",
    "SupportOptionResponse",
    "SoftwareResponse",
    "EnrichedProduct",
    "CatalogPage",
    "SoftwareSearchResult",
    "SoftwareListingCreate",
    "ReviewCreate",
    "ReviewResponse",
    "ReviewListResponse",
    "ContactCreate",
    "ContactResponse",
    "SoftwareInterestCreate",
    "SoftwareInterestResponse",
    "FeatureRow",
    "ComparisonResponse",
]
