"""Software directory API: catalog, listing submission, search, detail and reviews."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from rental_directory.api.dependencies import get_aggregator, get_settings
from rental_directory.config import Settings
from rental_directory.database import get_db
from rental_directory.schemas.review import ReviewListResponse, ReviewResponse
from rental_directory.schemas.software import (
    CatalogPage,
    EnrichedProduct,
    SoftwareListingCreate,
    SoftwareSearchResult,
)
from rental_directory.services import catalog, reviews
from rental_directory.services.aggregator import ProductAggregator, average_rating
from rental_directory.services.listing import ListingConflictError, create_listing

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/software", tags=["software"])


@router.get("", response_model=CatalogPage)
async def list_software(
    search: str = "",
    features: list[str] = Query([]),
    models: list[str] = Query([]),
    min_rating: Optional[float] = Query(None, ge=0, le=5),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Filtered, paginated directory listing."""
    products = await catalog.load_catalog(db)
    filters = catalog.CatalogFilters(search=search, features=features, models=models, min_rating=min_rating)
    result = catalog.paginate(catalog.apply_filters(products, filters), page, settings.CATALOG_PAGE_SIZE)
    return CatalogPage(
        items=result.items,
        total=result.total,
        page=result.page,
        pages=result.pages,
        per_page=result.per_page,
    )


@router.post("", response_model=EnrichedProduct, status_code=201)
async def submit_listing(
    payload: SoftwareListingCreate,
    db: AsyncSession = Depends(get_db),
    aggregator: ProductAggregator = Depends(get_aggregator),
):
    """Create a listing with its features, pricing plans and support option."""
    try:
        software = await create_listing(db, payload)
    except ListingConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    # the aggregator reads through its own sessions
    await db.commit()
    return await aggregator.enrich(software)


@router.get("/search", response_model=list[SoftwareSearchResult])
async def search_software(
    q: str = "",
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Name search for the review form; terms shorter than three characters return nothing."""
    return await catalog.search_by_name(db, q, limit=settings.SEARCH_RESULT_LIMIT)


@router.get("/{name}", response_model=EnrichedProduct)
async def get_software(
    name: str,
    db: AsyncSession = Depends(get_db),
    aggregator: ProductAggregator = Depends(get_aggregator),
):
    """One product with its related collections and review summary."""
    software = await catalog.find_software_by_name(db, name)
    if not software:
        raise HTTPException(status_code=404, detail="Software not found")
    return await aggregator.enrich(software)


@router.get("/{name}/reviews", response_model=ReviewListResponse)
async def get_software_reviews(
    name: str,
    sort: str = Query("newest", pattern="^(newest|oldest|highest|lowest)$"),
    rating: Optional[int] = Query(None, ge=1, le=5),
    db: AsyncSession = Depends(get_db),
):
    """Reviews for a product with rating distribution, sorting and star filter."""
    software = await catalog.find_software_by_name(db, name)
    if not software:
        raise HTTPException(status_code=404, detail="Software not found")
    all_reviews = await reviews.list_reviews(db, software.software_id)
    items = [
        ReviewResponse.model_validate(r).model_copy(
            update={"recommendation_text": reviews.recommendation_text(r.recommendation_score)}
        )
        for r in reviews.sort_and_filter(all_reviews, sort, rating)
    ]
    return ReviewListResponse(
        software_id=software.software_id,
        software_name=software.name,
        rating=average_rating(r.overall_rating for r in all_reviews),
        review_count=len(all_reviews),
        distribution=reviews.rating_distribution(all_reviews),
        items=items,
        total=len(items),
    )
