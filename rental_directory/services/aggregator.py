"""Product aggregation for the comparison view.

Fetches each requested product with its features, pricing plans, support
option and review ratings, derives the summary fields (average rating, review
count, cheapest price) and builds the feature matrix used as the row axis of
the comparison table.
"""
import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Any, NamedTuple, Optional

from rental_directory.models import Feature, PricingPlan, Review, Software, SupportOption
from rental_directory.schemas.software import (
    EnrichedProduct,
    FeatureResponse,
    PricingPlanResponse,
    SoftwareResponse,
    SupportOptionResponse,
)
from rental_directory.store import DataStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_PRODUCTS = 4


class ComparisonSetError(ValueError):
    """The comparison set is empty or holds more products than allowed."""


class FeatureMatrix(NamedTuple):
    feature_names: list[str]
    has_feature: Callable[[EnrichedProduct, str], bool]


def lowest_price(plans: Iterable[Any]) -> Optional[float]:
    """Minimum positive cost. Free (0) and contact-vendor (None) plans are ignored."""
    costs = [p.cost for p in plans if p.cost is not None and p.cost > 0]
    return min(costs) if costs else None


def average_rating(ratings: Iterable[Optional[float]]) -> Optional[float]:
    """Mean rating rounded half-up to one decimal, or None when there are no ratings."""
    values = [r for r in ratings if r is not None]
    if not values:
        return None
    mean = sum(values) / len(values)
    return math.floor(mean * 10 + 0.5) / 10


def has_feature(product: EnrichedProduct, feature_name: str) -> bool:
    return any(f.feature_name == feature_name for f in product.features)


def build_feature_matrix(products: Sequence[EnrichedProduct]) -> FeatureMatrix:
    names = sorted({f.feature_name for p in products for f in p.features})
    return FeatureMatrix(feature_names=names, has_feature=has_feature)


def enrich_product(
    software: Any,
    features: Iterable[Any],
    pricing_plans: Iterable[Any],
    support_option: Any | None,
    ratings: Iterable[Optional[float]],
) -> EnrichedProduct:
    """Assemble an EnrichedProduct from a Software row and its related rows."""
    base = SoftwareResponse.model_validate(software)
    plans = [PricingPlanResponse.model_validate(p) for p in pricing_plans]
    rating_values = list(ratings)
    return EnrichedProduct(
        **base.model_dump(),
        features=[FeatureResponse.model_validate(f) for f in features],
        pricing_plans=plans,
        support_option=(
            SupportOptionResponse.model_validate(support_option) if support_option is not None else None
        ),
        rating=average_rating(rating_values),
        review_count=len(rating_values),
        cheapest_price=lowest_price(plans),
    )


class ProductAggregator:
    """Builds comparison sets from the store.

    Missing or failing products are dropped from the result instead of failing
    the whole set; failing related collections are treated as empty.
    """

    def __init__(
        self,
        store: DataStore,
        timeout: Optional[float] = None,
        max_products: int = DEFAULT_MAX_PRODUCTS,
    ):
        self.store = store
        self.timeout = timeout
        self.max_products = max_products

    async def fetch_comparison_set(self, names: Sequence[str]) -> list[EnrichedProduct]:
        """Enriched products for ``names`` in input order, unresolved names omitted."""
        names = list(names)
        if not 1 <= len(names) <= self.max_products:
            raise ComparisonSetError(
                f"Select between 1 and {self.max_products} products to compare (got {len(names)})"
            )
        results = await asyncio.gather(*(self._fetch_one(name) for name in names))
        return [product for product in results if product is not None]

    async def enrich(self, software: Any) -> EnrichedProduct:
        """Fetch the related collections of one Software row concurrently and enrich it."""
        sid = software.software_id
        features, plans, supports, reviews = await asyncio.gather(
            self._fetch_related(software.name, "features", lambda: self.store.query_many(Feature, software_id=sid)),
            self._fetch_related(
                software.name, "pricing plans", lambda: self.store.query_many(PricingPlan, software_id=sid)
            ),
            self._fetch_related(
                software.name, "support options", lambda: self.store.query_many(SupportOption, software_id=sid)
            ),
            self._fetch_related(
                software.name,
                "reviews",
                lambda: self.store.query_many(Review, Review.overall_rating, software_id=sid),
            ),
        )
        return enrich_product(
            software,
            features,
            plans,
            supports[0] if supports else None,
            [r.overall_rating for r in reviews],
        )

    async def _fetch_one(self, name: str) -> Optional[EnrichedProduct]:
        try:
            software = await self._with_timeout(self.store.query_one(Software, name=name))
        except asyncio.TimeoutError:
            logger.warning("Lookup of software %r timed out after %ss", name, self.timeout)
            return None
        except Exception as e:
            logger.exception("Lookup of software %r failed: %s", name, e)
            return None
        if software is None:
            logger.info("Software %r not found, dropped from comparison", name)
            return None
        try:
            return await self.enrich(software)
        except Exception as e:
            logger.exception("Enriching software %r failed: %s", name, e)
            return None

    async def _fetch_related(
        self, name: str, relation: str, fetch: Callable[[], Awaitable[list[Any]]]
    ) -> list[Any]:
        try:
            return await self._with_timeout(fetch())
        except asyncio.TimeoutError:
            logger.warning("Fetching %s for %r timed out after %ss", relation, name, self.timeout)
        except Exception as e:
            logger.exception("Fetching %s for %r failed: %s", relation, name, e)
        return []

    async def _with_timeout(self, awaitable: Awaitable[Any]) -> Any:
        if self.timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, self.timeout)
