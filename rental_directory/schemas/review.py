"""Review and contact form Pydantic schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class CategoryRatings(BaseModel):
    """Per-category stars; 0 means the reviewer left the category unrated."""

    ease_of_use: int = Field(0, ge=0, le=5)
    features: int = Field(0, ge=0, le=5)
    customer_support: int = Field(0, ge=0, le=5)
    value_for_money: int = Field(0, ge=0, le=5)
    ease_of_deployment: int = Field(0, ge=0, le=5)
    ease_of_setup: int = Field(0, ge=0, le=5)


class ReviewCreate(BaseModel):
    software_id: int
    title: str = Field(..., min_length=1, max_length=512)
    first_name: str = Field("", max_length=127)
    last_name: str = Field("", max_length=127)
    email: EmailStr
    overall_rating: int = Field(..., ge=1, le=5)
    pros: str = Field(..., min_length=1)
    cons: str = Field(..., min_length=1)
    experience_description: Optional[str] = None
    category_ratings: CategoryRatings = Field(default_factory=CategoryRatings)
    pricing: str = Field("$", pattern=r"^\${1,5}$")
    recommendation: int = Field(0, ge=0, le=10)


class ReviewResponse(BaseModel):
    review_id: int
    software_id: int
    title: str
    reviewer_name: Optional[str] = None
    overall_rating: float
    pros: str
    cons: str
    experience_description: Optional[str] = None
    category_ratings: Optional[list[int]] = None
    pricing_perception: Optional[int] = None
    recommendation_score: Optional[int] = None
    recommendation_text: str = ""
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ReviewListResponse(BaseModel):
    software_id: int
    software_name: str
    rating: Optional[float] = None
    review_count: int
    distribution: dict[int, int]
    items: list[ReviewResponse]
    total: int


class ContactCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=255)
    subject: str = Field(..., min_length=1, max_length=512)
    message: str = Field(..., min_length=1)


class ContactResponse(BaseModel):
    success: bool = True
    message: str = "Contact form submitted successfully"


class SoftwareInterestCreate(BaseModel):
    """Lead captured from the contact popup on a software card."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    contact_number: str = Field(..., min_length=1, max_length=64)
    software_name: str = Field(..., min_length=1, max_length=255)


class SoftwareInterestResponse(BaseModel):
    success: bool = True
    message: str = "Contact information saved successfully"
