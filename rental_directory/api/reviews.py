"""Review submission API."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rental_directory.database import get_db
from rental_directory.models import Software
from rental_directory.schemas.review import ReviewCreate, ReviewResponse
from rental_directory.services.reviews import recommendation_text, submit_review

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse, status_code=201)
async def create_review(
    payload: ReviewCreate,
    db: AsyncSession = Depends(get_db),
):
    """Submit a review for a listed product."""
    result = await db.execute(select(Software.software_id).where(Software.software_id == payload.software_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Software not found")
    review = await submit_review(db, payload)
    return ReviewResponse.model_validate(review).model_copy(
        update={"recommendation_text": recommendation_text(review.recommendation_score)}
    )
