"""Comparison Pydantic schemas."""
from pydantic import BaseModel

from rental_directory.schemas.software import EnrichedProduct


class FeatureRow(BaseModel):
    feature_name: str
    availability: list[bool]  # one entry per product, in product order


class ComparisonResponse(BaseModel):
    products: list[EnrichedProduct]
    feature_names: list[str]
    feature_rows: list[FeatureRow]
    missing: list[str]
