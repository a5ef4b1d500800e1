"""SQLAlchemy ORM models."""
from rental_directory.database import Base
from rental_directory.models.software import Software, Feature, PricingPlan, SupportOption
from rental_directory.models.review import Review, ContactSubmission, SoftwareInterest

__all__ = [
    "Base",
    "Software",
    "Feature",
    "PricingPlan",
    "SupportOption",
    "Review",
    "ContactSubmission",
    "SoftwareInterest",
]
