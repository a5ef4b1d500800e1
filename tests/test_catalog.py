import unittest

from rental_directory.schemas.software import EnrichedProduct, FeatureResponse, PricingPlanResponse
from rental_directory.services.catalog import CatalogFilters, apply_filters, escape_like, paginate


def product(sid, name, description="", features=(), plans=(), rating=None, **kw):
    return EnrichedProduct(
        software_id=sid,
        name=name,
        description=description,
        features=[FeatureResponse(feature_name=f) for f in features],
        pricing_plans=[
            PricingPlanResponse(plan_name=f"Plan {i}", cost=cost, payment_options=options)
            for i, (cost, options) in enumerate(plans)
        ],
        rating=rating,
        **kw,
    )


class TestCatalogFilters(unittest.TestCase):

    def setUp(self):
        self.products = [
            product(
                1,
                "AiRentoSoft",
                "AI fleet management platform",
                features=["Fleet Management", "API"],
                plans=[(99, ["Subscription"])],
                rating=4.7,
                free_trial=True,
            ),
            product(
                2,
                "Rentall",
                "Counter software with a booking system",
                features=["Mobile App"],
                plans=[(149, ["One time"])],
                free_version=True,
            ),
            product(3, "FleetDesk", "Dispatch tool", rating=3.2),
        ]

    def names(self, filters):
        return [p.name for p in apply_filters(self.products, filters)]

    def test_no_filters_keeps_everything(self):
        self.assertEqual(self.names(CatalogFilters()), ["AiRentoSoft", "Rentall", "FleetDesk"])

    def test_search_matches_name_or_description(self):
        self.assertEqual(self.names(CatalogFilters(search="rent")), ["AiRentoSoft", "Rentall"])
        self.assertEqual(self.names(CatalogFilters(search="DISPATCH")), ["FleetDesk"])

    def test_feature_filter_matches_feature_names_and_description(self):
        self.assertEqual(self.names(CatalogFilters(features=["mobile app"])), ["Rentall"])
        self.assertEqual(self.names(CatalogFilters(features=["Booking System"])), ["Rentall"])
        self.assertEqual(self.names(CatalogFilters(features=["API", "Mobile App"])), ["AiRentoSoft", "Rentall"])

    def test_model_filter(self):
        self.assertEqual(self.names(CatalogFilters(models=["Free"])), ["Rentall"])
        self.assertEqual(self.names(CatalogFilters(models=["Free Trial"])), ["AiRentoSoft"])
        self.assertEqual(self.names(CatalogFilters(models=["Subscription"])), ["AiRentoSoft"])
        self.assertEqual(self.names(CatalogFilters(models=["One time purchase"])), ["Rentall"])

    def test_unknown_model_matches_everything(self):
        self.assertEqual(len(self.names(CatalogFilters(models=["Open Source"]))), 3)

    def test_min_rating_treats_unrated_as_zero(self):
        self.assertEqual(self.names(CatalogFilters(min_rating=3)), ["AiRentoSoft", "FleetDesk"])
        self.assertEqual(self.names(CatalogFilters(min_rating=4)), ["AiRentoSoft"])

    def test_filters_combine(self):
        self.assertEqual(self.names(CatalogFilters(search="fleet", min_rating=4)), ["AiRentoSoft"])


class TestPaginate(unittest.TestCase):

    def setUp(self):
        self.items = [product(i, f"Software {i}") for i in range(1, 20)]

    def test_first_page(self):
        page = paginate(self.items, 1, 8)
        self.assertEqual([p.software_id for p in page.items], list(range(1, 9)))
        self.assertEqual(page.total, 19)
        self.assertEqual(page.pages, 3)

    def test_last_page_is_partial(self):
        page = paginate(self.items, 3, 8)
        self.assertEqual([p.software_id for p in page.items], [17, 18, 19])

    def test_page_past_the_end_is_empty(self):
        self.assertEqual(paginate(self.items, 5, 8).items, [])

    def test_empty(self):
        page = paginate([], 1, 8)
        self.assertEqual((page.total, page.pages), (0, 0))


class TestEscapeLike(unittest.TestCase):

    def test_wildcards_are_escaped(self):
        self.assertEqual(escape_like("100%_off"), "100\\%\\_off")

    def test_escape_character_is_doubled(self):
        self.assertEqual(escape_like("a\\b"), "a\\\\b")

    def test_plain_names_unchanged(self):
        self.assertEqual(escape_like("Rentall"), "Rentall")


if __name__ == '__main__':
    unittest.main()
