"""Vendor listing submission: a Software row with its features, plans and support option."""
import logging
import re
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rental_directory.models import Feature, PricingPlan, Software, SupportOption
from rental_directory.schemas.software import SoftwareListingCreate

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")


class ListingConflictError(ValueError):
    """A listing with the same product name already exists."""


def parse_cost(value: Optional[Union[float, int, str]]) -> Optional[float]:
    """Monthly cost from free text like "$49.99 / month"; None when no number is present."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    numeric = _NON_NUMERIC.sub("", value)
    if not numeric:
        return None
    try:
        return float(numeric)
    except ValueError:
        return None


def build_feature_rows(software_id: int, payload: SoftwareListingCreate) -> list[Feature]:
    return [
        Feature(software_id=software_id, feature_name=f.name, feature_description=f.description)
        for f in payload.features
        if f.name.strip() or f.description.strip()
    ]


def build_pricing_rows(software_id: int, payload: SoftwareListingCreate) -> list[PricingPlan]:
    return [
        PricingPlan(
            software_id=software_id,
            plan_name=p.plan_name,
            cost=parse_cost(p.cost),
            included_features=p.included_features,
            payment_options=p.payment_options,
        )
        for p in payload.pricing_plans
        if p.plan_name.strip()
    ]


def build_support_row(software_id: int, payload: SoftwareListingCreate) -> SupportOption:
    support = payload.support
    return SupportOption(
        software_id=software_id,
        channels=support.channels,
        hours=[support.hours] if support.hours else [],
        training_options=support.training_options,
        self_help_resources=support.self_help_resources,
    )


async def create_listing(db: AsyncSession, payload: SoftwareListingCreate) -> Software:
    """Insert the listing. Raises ListingConflictError on a duplicate name."""
    existing = await db.execute(select(Software.software_id).where(Software.name == payload.name))
    if existing.scalar_one_or_none() is not None:
        raise ListingConflictError(f"Software {payload.name!r} is already listed")

    software = Software(
        name=payload.name,
        description=payload.description,
        ui_type=payload.ui_type,
        ui_description=payload.ui_description,
        platform_supported=payload.platform_supported,
        typical_customers=payload.typical_customers,
        content=payload.content,
        logo=payload.logo or None,
        free_trial=payload.free_trial,
        free_version=payload.free_version,
        user_id=payload.user_id,
    )
    db.add(software)
    try:
        await db.flush()
    except IntegrityError as e:
        raise ListingConflictError(f"Software {payload.name!r} is already listed") from e

    db.add_all(build_feature_rows(software.software_id, payload))
    db.add_all(build_pricing_rows(software.software_id, payload))
    db.add(build_support_row(software.software_id, payload))
    await db.flush()
    await db.refresh(software)
    logger.info("Created listing %s (%r)", software.software_id, software.name)
    return software
