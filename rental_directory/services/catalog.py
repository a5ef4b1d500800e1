"""Directory listing: load, filter, paginate and look up software."""
import logging
import math
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from rental_directory.models import Review, Software
from rental_directory.schemas.software import EnrichedProduct
from rental_directory.services.aggregator import enrich_product

logger = logging.getLogger(__name__)

MIN_SEARCH_TERM_LENGTH = 3
LIKE_ESCAPE = "\\"


@dataclass
class CatalogFilters:
    search: str = ""
    features: list[str] = field(default_factory=list)
    models: list[str] = field(default_factory=list)
    min_rating: Optional[float] = None


@dataclass
class Page:
    items: list[EnrichedProduct]
    total: int
    page: int
    pages: int
    per_page: int


async def load_catalog(db: AsyncSession) -> list[EnrichedProduct]:
    """Every listing with its related collections and review summary."""
    result = await db.execute(
        select(Software)
        .options(
            selectinload(Software.features),
            selectinload(Software.pricing_plans),
            selectinload(Software.support_options),
        )
        .order_by(Software.created_at.desc(), Software.software_id.desc())
    )
    software_rows = list(result.scalars().all())

    ratings_result = await db.execute(select(Review.software_id, Review.overall_rating))
    ratings_by_software: dict[int, list[float]] = defaultdict(list)
    for software_id, rating in ratings_result.all():
        ratings_by_software[software_id].append(rating)

    return [
        enrich_product(
            s,
            s.features,
            s.pricing_plans,
            s.support_options[0] if s.support_options else None,
            ratings_by_software.get(s.software_id, []),
        )
        for s in software_rows
    ]


def _matches_model(product: EnrichedProduct, model: str) -> bool:
    if model == "Free":
        return product.free_version
    if model == "Free Trial":
        return product.free_trial
    if model == "Subscription":
        return any("Subscription" in p.payment_options for p in product.pricing_plans)
    if model == "One time purchase":
        return any("One time" in p.payment_options for p in product.pricing_plans)
    return True


def apply_filters(products: Sequence[EnrichedProduct], filters: CatalogFilters) -> list[EnrichedProduct]:
    filtered = list(products)

    term = filters.search.strip().lower()
    if term:
        filtered = [p for p in filtered if term in p.name.lower() or term in p.description.lower()]

    if filters.features:
        wanted = [f.lower() for f in filters.features]
        filtered = [
            p
            for p in filtered
            if any(
                any(w in f.feature_name.lower() for f in p.features) or w in p.description.lower()
                for w in wanted
            )
        ]

    if filters.models:
        filtered = [p for p in filtered if any(_matches_model(p, m) for m in filters.models)]

    if filters.min_rating is not None:
        filtered = [p for p in filtered if (p.rating or 0) >= filters.min_rating]

    return filtered


def paginate(items: Sequence[EnrichedProduct], page: int = 1, per_page: int = 8) -> Page:
    total = len(items)
    pages = math.ceil(total / per_page) if per_page > 0 else 0
    start = (page - 1) * per_page
    return Page(items=list(items[start:start + per_page]), total=total, page=page, pages=pages, per_page=per_page)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def find_software_by_name(db: AsyncSession, name: str) -> Optional[Software]:
    """Exact name match, falling back to a case-insensitive match."""
    result = await db.execute(select(Software).where(Software.name == name))
    software = result.scalar_one_or_none()
    if software is not None:
        return software
    logger.debug("Exact match for %r failed, trying case-insensitive", name)
    pattern = escape_like(name)
    result = await db.execute(select(Software).where(Software.name.ilike(pattern, escape=LIKE_ESCAPE)).limit(1))
    return result.scalars().first()


async def search_by_name(db: AsyncSession, term: str, limit: int = 10) -> list[Software]:
    """Name substring search backing the review form's software picker."""
    term = term.strip()
    if len(term) < MIN_SEARCH_TERM_LENGTH:
        return []
    result = await db.execute(
        select(Software)
        .where(Software.name.ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE))
        .order_by(Software.name)
        .limit(limit)
    )
    return list(result.scalars().all())
