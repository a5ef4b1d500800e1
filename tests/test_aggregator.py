import asyncio
import unittest
from types import SimpleNamespace

from rental_directory.models import Feature, PricingPlan, Review, Software, SupportOption
from rental_directory.services.aggregator import (
    ComparisonSetError,
    ProductAggregator,
    average_rating,
    build_feature_matrix,
    lowest_price,
)


class FakeStore:
    """In-memory DataStore keyed by model class."""

    def __init__(self, rows=None, fail=(), delay=None):
        self.rows = rows or {}
        self.fail = set(fail)
        self.delay = delay or {}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def _hit(self, model):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay.get(model, 0))
            if model in self.fail:
                raise RuntimeError(f"{model.__tablename__} unavailable")
        finally:
            self.in_flight -= 1

    def _match(self, model, filters):
        return [r for r in self.rows.get(model, []) if all(getattr(r, k) == v for k, v in filters.items())]

    async def query_one(self, model, **filters):
        self.calls.append((model, (), filters))
        await self._hit(model)
        matches = self._match(model, filters)
        return matches[0] if matches else None

    async def query_many(self, model, *columns, **filters):
        self.calls.append((model, columns, filters))
        await self._hit(model)
        matches = self._match(model, filters)
        if columns:
            return [SimpleNamespace(**{c.key: getattr(r, c.key) for c in columns}) for r in matches]
        return matches


def software(sid, name, **kw):
    row = dict(
        software_id=sid,
        name=name,
        description=f"{name} rental software",
        ui_type=["Web"],
        ui_description=None,
        platform_supported=None,
        typical_customers=None,
        content=None,
        logo=None,
        free_trial=False,
        free_version=False,
        created_at=None,
    )
    row.update(kw)
    return SimpleNamespace(**row)


def feature(sid, name):
    return SimpleNamespace(feature_id=None, software_id=sid, feature_name=name, feature_description="")


def plan(sid, cost, name="Plan"):
    return SimpleNamespace(
        plan_id=None, software_id=sid, plan_name=name, cost=cost, included_features="", payment_options=None
    )


def support(sid, channels):
    return SimpleNamespace(
        support_id=None,
        software_id=sid,
        channels=channels,
        hours=None,
        training_options=None,
        self_help_resources=True,
    )


def review(sid, rating):
    return SimpleNamespace(software_id=sid, overall_rating=rating, title="t")


def scenario_store(**kwargs):
    return FakeStore(
        rows={
            Software: [software(1, "AiRentoSoft"), software(2, "Rentall"), software(3, "FleetDesk")],
            Feature: [feature(1, "API"), feature(1, "Reporting"), feature(2, "API"), feature(2, "Mobile App")],
            PricingPlan: [plan(1, 0, "Free"), plan(1, 99, "Pro"), plan(2, 149, "Standard")],
            SupportOption: [support(1, ["Email"])],
            Review: [review(1, 5), review(1, 5), review(1, 4)],
        },
        **kwargs,
    )


class TestLowestPrice(unittest.TestCase):

    def test_ignores_free_and_contact_vendor_plans(self):
        plans = [plan(1, 0), plan(1, 0), plan(1, None), plan(1, 15), plan(1, 9.99)]
        self.assertEqual(lowest_price(plans), 9.99)

    def test_no_positive_cost(self):
        self.assertIsNone(lowest_price([plan(1, 0), plan(1, None)]))

    def test_empty(self):
        self.assertIsNone(lowest_price([]))


class TestAverageRating(unittest.TestCase):

    def test_mean_rounded_to_one_decimal(self):
        self.assertEqual(average_rating([5, 4, 3]), 4.0)
        self.assertEqual(average_rating([5, 5, 4]), 4.7)

    def test_rounds_half_up(self):
        self.assertEqual(average_rating([4, 4.5]), 4.3)

    def test_no_reviews_is_none(self):
        self.assertIsNone(average_rating([]))


class TestFeatureMatrix(unittest.TestCase):

    def setUp(self):
        self.store = scenario_store()

    def test_union_sorted_and_exact_membership(self):
        products = asyncio.run(ProductAggregator(self.store).fetch_comparison_set(["AiRentoSoft", "Rentall"]))
        x, y = products

        matrix = build_feature_matrix(products)

        self.assertEqual(matrix.feature_names, ["API", "Mobile App", "Reporting"])
        self.assertFalse(matrix.has_feature(x, "Mobile App"))
        self.assertTrue(matrix.has_feature(y, "API"))
        self.assertFalse(matrix.has_feature(y, "api"))

    def test_empty_set(self):
        self.assertEqual(build_feature_matrix([]).feature_names, [])


class TestProductAggregator(unittest.IsolatedAsyncioTestCase):

    async def test_preserves_input_order(self):
        aggregator = ProductAggregator(scenario_store())

        result = await aggregator.fetch_comparison_set(["FleetDesk", "AiRentoSoft", "Rentall"])

        self.assertEqual([p.name for p in result], ["FleetDesk", "AiRentoSoft", "Rentall"])

    async def test_missing_product_is_omitted(self):
        aggregator = ProductAggregator(scenario_store())

        result = await aggregator.fetch_comparison_set(["AiRentoSoft", "Ghost", "Rentall"])

        self.assertEqual([p.name for p in result], ["AiRentoSoft", "Rentall"])
        self.assertEqual(result[0].review_count, 3)

    async def test_scenario(self):
        aggregator = ProductAggregator(scenario_store())

        airento, rentall = await aggregator.fetch_comparison_set(["AiRentoSoft", "Rentall"])

        self.assertEqual(airento.cheapest_price, 99)
        self.assertEqual(airento.rating, 4.7)
        self.assertEqual(airento.review_count, 3)
        self.assertEqual(rentall.cheapest_price, 149)
        self.assertIsNone(rentall.rating)
        self.assertEqual(rentall.review_count, 0)
        self.assertIsNone(rentall.support_option)
        self.assertEqual(airento.support_option.channels, ["Email"])

    async def test_idempotent(self):
        aggregator = ProductAggregator(scenario_store())

        first = await aggregator.fetch_comparison_set(["AiRentoSoft", "Rentall"])
        second = await aggregator.fetch_comparison_set(["AiRentoSoft", "Rentall"])

        self.assertEqual([p.model_dump() for p in first], [p.model_dump() for p in second])

    async def test_duplicates_are_not_removed(self):
        result = await ProductAggregator(scenario_store()).fetch_comparison_set(["Rentall", "Rentall"])
        self.assertEqual([p.name for p in result], ["Rentall", "Rentall"])

    async def test_reviews_are_projected_to_rating(self):
        store = scenario_store()

        await ProductAggregator(store).fetch_comparison_set(["AiRentoSoft"])

        review_calls = [columns for model, columns, _ in store.calls if model is Review]
        self.assertEqual([[c.key for c in columns] for columns in review_calls], [["overall_rating"]])

    async def test_fetches_run_concurrently(self):
        store = scenario_store()

        await ProductAggregator(store).fetch_comparison_set(["AiRentoSoft", "Rentall", "FleetDesk"])

        self.assertGreaterEqual(store.max_in_flight, 3)

    async def test_first_support_option_is_used(self):
        store = scenario_store()
        store.rows[SupportOption].append(support(1, ["Phone"]))

        (product,) = await ProductAggregator(store).fetch_comparison_set(["AiRentoSoft"])

        self.assertEqual(product.support_option.channels, ["Email"])

    async def test_child_failure_yields_empty_collection(self):
        aggregator = ProductAggregator(scenario_store(fail={Feature}))

        with self.assertLogs("rental_directory.services.aggregator", level="ERROR"):
            (product,) = await aggregator.fetch_comparison_set(["AiRentoSoft"])

        self.assertEqual(product.features, [])
        self.assertEqual(product.cheapest_price, 99)
        self.assertEqual(product.review_count, 3)

    async def test_lookup_failure_drops_every_slot(self):
        aggregator = ProductAggregator(scenario_store(fail={Software}))

        with self.assertLogs("rental_directory.services.aggregator", level="ERROR"):
            result = await aggregator.fetch_comparison_set(["AiRentoSoft", "Rentall"])

        self.assertEqual(result, [])

    async def test_lookup_timeout_treated_as_not_found(self):
        aggregator = ProductAggregator(scenario_store(delay={Software: 1}), timeout=0.05)

        with self.assertLogs("rental_directory.services.aggregator", level="WARNING"):
            result = await aggregator.fetch_comparison_set(["AiRentoSoft"])

        self.assertEqual(result, [])

    async def test_child_timeout_yields_empty_collection(self):
        aggregator = ProductAggregator(scenario_store(delay={Review: 1}), timeout=0.05)

        with self.assertLogs("rental_directory.services.aggregator", level="WARNING"):
            (product,) = await aggregator.fetch_comparison_set(["AiRentoSoft"])

        self.assertIsNone(product.rating)
        self.assertEqual(product.review_count, 0)
        self.assertEqual([f.feature_name for f in product.features], ["API", "Reporting"])

    async def test_rejects_empty_and_oversized_sets(self):
        aggregator = ProductAggregator(scenario_store())

        with self.assertRaises(ComparisonSetError):
            await aggregator.fetch_comparison_set([])
        with self.assertRaises(ValueError):
            await aggregator.fetch_comparison_set(["a", "b", "c", "d", "e"])

    async def test_max_products_is_configurable(self):
        aggregator = ProductAggregator(scenario_store(), max_products=2)

        with self.assertRaises(ComparisonSetError):
            await aggregator.fetch_comparison_set(["AiRentoSoft", "Rentall", "FleetDesk"])


if __name__ == '__main__':
    unittest.main()
