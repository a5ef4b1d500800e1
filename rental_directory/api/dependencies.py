"""Request-scoped dependencies built from objects owned by the app lifespan."""
from fastapi import Request

from rental_directory.config import Settings
from rental_directory.services.aggregator import ProductAggregator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_aggregator(request: Request) -> ProductAggregator:
    settings = request.app.state.settings
    return ProductAggregator(
        request.app.state.store,
        timeout=settings.FETCH_TIMEOUT_SECONDS,
        max_products=settings.COMPARISON_MAX_PRODUCTS,
    )
