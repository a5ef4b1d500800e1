"""Contact form API."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rental_directory.database import get_db
from rental_directory.models import ContactSubmission, SoftwareInterest
from rental_directory.schemas.review import (
    ContactCreate,
    ContactResponse,
    SoftwareInterestCreate,
    SoftwareInterestResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactResponse)
async def submit_contact_form(
    payload: ContactCreate,
    db: AsyncSession = Depends(get_db),
):
    """Store a contact form submission."""
    submission = ContactSubmission(**payload.model_dump())
    db.add(submission)
    await db.flush()
    logger.info("Stored contact submission %s", submission.submission_id)
    return ContactResponse()


@router.post("/software-interest", response_model=SoftwareInterestResponse)
async def submit_software_interest(
    payload: SoftwareInterestCreate,
    db: AsyncSession = Depends(get_db),
):
    """Store a lead left from a software card."""
    interest = SoftwareInterest(**payload.model_dump())
    db.add(interest)
    await db.flush()
    logger.info("Stored interest %s in %s", interest.interest_id, interest.software_name)
    return SoftwareInterestResponse()
