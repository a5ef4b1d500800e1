"""Side-by-side comparison API."""
from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException, Query

from rental_directory.api.dependencies import get_aggregator
from rental_directory.schemas.comparison import ComparisonResponse, FeatureRow
from rental_directory.schemas.software import EnrichedProduct
from rental_directory.services.aggregator import ComparisonSetError, ProductAggregator, build_feature_matrix

router = APIRouter(prefix="/compare", tags=["compare"])


async def fetch_comparison(aggregator: ProductAggregator, names: Sequence[str]) -> list[EnrichedProduct]:
    """Comparison set for ``names``; malformed input becomes a 422."""
    try:
        return await aggregator.fetch_comparison_set(names)
    except ComparisonSetError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=ComparisonResponse)
async def compare_software(
    names: list[str] = Query([]),
    aggregator: ProductAggregator = Depends(get_aggregator),
):
    """Compare 1-4 products by name. Names that do not resolve are listed in ``missing``."""
    products = await fetch_comparison(aggregator, names)
    matrix = build_feature_matrix(products)
    resolved = {p.name for p in products}
    return ComparisonResponse(
        products=products,
        feature_names=matrix.feature_names,
        feature_rows=[
            FeatureRow(feature_name=f, availability=[matrix.has_feature(p, f) for p in products])
            for f in matrix.feature_names
        ],
        missing=[n for n in names if n not in resolved],
    )
