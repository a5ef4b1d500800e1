"""Review display helpers and review submission."""
import logging
import math
from collections.abc import Sequence
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rental_directory.models import Review
from rental_directory.schemas.review import ReviewCreate

logger = logging.getLogger(__name__)

SORT_OPTIONS = ("newest", "oldest", "highest", "lowest")


def rating_distribution(reviews: Sequence[Any]) -> dict[int, int]:
    """Count of reviews per whole-star bucket, 5 down to 1."""
    distribution = {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}
    for review in reviews:
        stars = math.floor(review.overall_rating)
        if 1 <= stars <= 5:
            distribution[stars] += 1
    return distribution


def _created_key(review: Any) -> tuple:
    # undated rows sort as oldest; ties broken by insertion order
    created = review.created_at
    return (created is not None, created if created is not None else 0, review.review_id)


def sort_and_filter(reviews: Sequence[Any], sort_by: str = "newest", star: Optional[int] = None) -> list[Any]:
    filtered = list(reviews)
    if star is not None:
        filtered = [r for r in filtered if math.floor(r.overall_rating) == star]

    if sort_by == "newest":
        filtered.sort(key=_created_key, reverse=True)
    elif sort_by == "oldest":
        filtered.sort(key=_created_key)
    elif sort_by == "highest":
        filtered.sort(key=lambda r: r.overall_rating, reverse=True)
    elif sort_by == "lowest":
        filtered.sort(key=lambda r: r.overall_rating)
    return filtered


def recommendation_text(score: Optional[int]) -> str:
    if not score:
        return ""
    if score >= 9:
        return "Highly recommended"
    if score >= 7:
        return "Recommended"
    if score >= 5:
        return "Neutral"
    return "Not recommended"


def build_review(payload: ReviewCreate) -> Review:
    """Map the review form onto a Review row."""
    categories = payload.category_ratings
    rated = [
        r
        for r in (
            categories.ease_of_use,
            categories.features,
            categories.customer_support,
            categories.value_for_money,
            categories.ease_of_deployment,
            categories.ease_of_setup,
        )
        if r > 0
    ]
    return Review(
        software_id=payload.software_id,
        title=payload.title,
        reviewer_name=f"{payload.first_name} {payload.last_name}".strip(),
        reviewer_email=payload.email,
        overall_rating=payload.overall_rating,
        pros=payload.pros,
        cons=payload.cons,
        experience_description=payload.experience_description or None,
        category_ratings=rated or None,
        pricing_perception=len(payload.pricing) * 20,
        recommendation_score=payload.recommendation,
    )


async def list_reviews(db: AsyncSession, software_id: int) -> list[Review]:
    result = await db.execute(
        select(Review).where(Review.software_id == software_id).order_by(Review.created_at.desc())
    )
    return list(result.scalars().all())


async def submit_review(db: AsyncSession, payload: ReviewCreate) -> Review:
    review = build_review(payload)
    db.add(review)
    await db.flush()
    await db.refresh(review)
    logger.info("Stored review %s for software %s", review.review_id, review.software_id)
    return review
