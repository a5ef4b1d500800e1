"""Tabular views of a comparison set shared by the CSV and PDF exports."""
from collections.abc import Sequence
from typing import Optional

from rental_directory.schemas.software import EnrichedProduct
from rental_directory.services.aggregator import build_feature_matrix


def format_cost(cost: Optional[float]) -> str:
    if cost is None:
        return "Contact Vendor"
    if cost == 0:
        return "Free"
    if float(cost).is_integer():
        return f"${cost:.0f}"
    return f"${cost:.2f}"


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _joined(values: Sequence[str]) -> str:
    return ", ".join(values) if values else "N/A"


def overview_rows(products: Sequence[EnrichedProduct]) -> list[list[str]]:
    """Attribute rows with one column per product, header row first."""
    rows = [["Attribute", *[p.name for p in products]]]
    rows.append(
        ["Rating", *[f"{p.rating:.1f} ({p.review_count} reviews)" if p.rating is not None else "No reviews" for p in products]]
    )
    rows.append(
        [
            "Starting price",
            *[
                format_cost(p.cheapest_price) + ("/month" if p.cheapest_price else "")
                for p in products
            ],
        ]
    )
    rows.append(["Free trial", *[_yes_no(p.free_trial) for p in products]])
    rows.append(["Free version", *[_yes_no(p.free_version) for p in products]])
    rows.append(["Interface", *[_joined(p.ui_type) for p in products]])
    rows.append(["Platforms", *[_joined(p.platform_supported) for p in products]])
    rows.append(["Typical customers", *[_joined(p.typical_customers) for p in products]])

    support = [p.support_option for p in products]
    rows.append(["Support channels", *[_joined(s.channels) if s else "N/A" for s in support]])
    rows.append(["Support hours", *[_joined(s.hours) if s else "N/A" for s in support]])
    rows.append(["Training", *[_joined(s.training_options) if s else "N/A" for s in support]])
    rows.append(["Self-help resources", *[_yes_no(s.self_help_resources) if s else "N/A" for s in support]])
    return rows


def feature_rows(products: Sequence[EnrichedProduct]) -> list[list[str]]:
    """Feature matrix as Yes/No cells, header row first."""
    matrix = build_feature_matrix(products)
    rows = [["Feature", *[p.name for p in products]]]
    for name in matrix.feature_names:
        rows.append([name, *[_yes_no(matrix.has_feature(p, name)) for p in products]])
    return rows


def pricing_rows(products: Sequence[EnrichedProduct]) -> list[list[str]]:
    rows = [["Software", "Plan", "Monthly cost", "Included features", "Payment options"]]
    for p in products:
        for plan in p.pricing_plans:
            rows.append(
                [
                    p.name,
                    plan.plan_name,
                    format_cost(plan.cost),
                    plan.included_features or "",
                    ", ".join(plan.payment_options),
                ]
            )
    return rows
