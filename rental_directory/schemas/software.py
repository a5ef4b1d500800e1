"""Software, enriched product and listing Pydantic schemas."""
from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field, field_validator


def _none_to_list(value):
    return [] if value is None else value


# JSON list columns are nullable in the store
StrList = Annotated[list[str], BeforeValidator(_none_to_list)]


class FeatureResponse(BaseModel):
    feature_id: Optional[int] = None
    software_id: Optional[int] = None
    feature_name: str
    feature_description: Optional[str] = None

    model_config = {"from_attributes": True}


class PricingPlanResponse(BaseModel):
    plan_id: Optional[int] = None
    software_id: Optional[int] = None
    plan_name: str
    cost: Optional[float] = None
    included_features: Optional[str] = None
    payment_options: StrList = Field(default_factory=list)

    model_config = {"from_attributes": True}


class SupportOptionResponse(BaseModel):
    support_id: Optional[int] = None
    software_id: Optional[int] = None
    channels: StrList = Field(default_factory=list)
    hours: StrList = Field(default_factory=list)
    training_options: StrList = Field(default_factory=list)
    self_help_resources: bool = False

    model_config = {"from_attributes": True}


class SoftwareResponse(BaseModel):
    software_id: int
    name: str
    description: str = ""
    ui_type: StrList = Field(default_factory=list)
    ui_description: Optional[str] = None
    platform_supported: StrList = Field(default_factory=list)
    typical_customers: StrList = Field(default_factory=list)
    content: StrList = Field(default_factory=list)
    logo: Optional[str] = None
    free_trial: bool = False
    free_version: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EnrichedProduct(SoftwareResponse):
    """A product plus its related collections and derived summary fields."""

    features: list[FeatureResponse] = Field(default_factory=list)
    pricing_plans: list[PricingPlanResponse] = Field(default_factory=list)
    support_option: Optional[SupportOptionResponse] = None
    rating: Optional[float] = None
    review_count: int = 0
    cheapest_price: Optional[float] = None


class CatalogPage(BaseModel):
    items: list[EnrichedProduct]
    total: int
    page: int
    pages: int
    per_page: int


class SoftwareSearchResult(BaseModel):
    software_id: int
    name: str
    description: str = ""
    logo: Optional[str] = None

    model_config = {"from_attributes": True}


class FeatureInput(BaseModel):
    name: str = Field("", max_length=255)
    description: str = ""


class PricingPlanInput(BaseModel):
    plan_name: str = Field("", max_length=255)
    cost: Optional[Union[float, str]] = None  # free text such as "$49/mo" is accepted
    included_features: str = ""
    payment_options: list[str] = Field(default_factory=list)


class SupportInput(BaseModel):
    channels: list[str] = Field(default_factory=list)
    hours: Optional[str] = None
    training_options: list[str] = Field(default_factory=list)
    self_help_resources: bool = False


class SoftwareListingCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    ui_type: list[str] = Field(default_factory=list)
    ui_description: Optional[str] = None
    platform_supported: list[str] = Field(default_factory=list)
    typical_customers: list[str] = Field(default_factory=list)
    content: list[str] = Field(default_factory=list)
    logo: Optional[str] = Field(None, max_length=1024)
    free_trial: bool = False
    free_version: bool = False
    user_id: Optional[str] = Field(None, max_length=255)
    features: list[FeatureInput] = Field(default_factory=list)
    pricing_plans: list[PricingPlanInput] = Field(default_factory=list)
    support: SupportInput = Field(default_factory=SupportInput)

    @field_validator("name", "description")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v
