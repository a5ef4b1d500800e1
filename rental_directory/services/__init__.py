"""Business logic services."""
from rental_directory.services.aggregator import (
    ComparisonSetError,
    FeatureMatrix,
    ProductAggregator,
    average_rating,
    build_feature_matrix,
    lowest_price,
)
from rental_directory.services.listing import ListingConflictError, create_listing

__all__ = [
    "ComparisonSetError",
    "FeatureMatrix",
    "ProductAggregator",
    "average_rating",
    "build_feature_matrix",
    "lowest_price",
    "ListingConflictError",
    "create_listing",
]
