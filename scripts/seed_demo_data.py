"""One-off: load two demo listings with reviews into the configured database. Run with: python scripts/seed_demo_data.py"""
import asyncio

from rental_directory.config import settings
from rental_directory.database import close_db, create_engine_from_settings, create_sessionmaker, init_db
from rental_directory.schemas.review import ReviewCreate
from rental_directory.schemas.software import SoftwareListingCreate
from rental_directory.services.listing import ListingConflictError, create_listing
from rental_directory.services.reviews import submit_review

LISTINGS = [
    {
        "name": "AiRentoSoft",
        "description": "AI-assisted car rental management with fleet tracking and online booking.",
        "ui_type": ["Web", "Mobile"],
        "platform_supported": ["Web", "iOS", "Android"],
        "typical_customers": ["Small business", "Enterprise"],
        "free_trial": True,
        "features": [{"name": "API"}, {"name": "Reporting"}, {"name": "Fleet Management"}],
        "pricing_plans": [
            {"plan_name": "Starter", "cost": "0", "payment_options": ["Subscription"]},
            {"plan_name": "Pro", "cost": "$99/month", "payment_options": ["Subscription"]},
        ],
        "support": {"channels": ["Email", "Chat"], "hours": "24/7", "self_help_resources": True},
    },
    {
        "name": "Rentall",
        "description": "Rental counter software with reservations and payment processing.",
        "ui_type": ["Web"],
        "platform_supported": ["Web"],
        "typical_customers": ["Small business"],
        "features": [{"name": "API"}, {"name": "Mobile App"}],
        "pricing_plans": [{"plan_name": "Standard", "cost": "149", "payment_options": ["One time"]}],
        "support": {"channels": ["Phone"], "hours": "Business hours"},
    },
]

REVIEWS = {
    "AiRentoSoft": [5, 5, 4],
}


async def main() -> None:
    engine = create_engine_from_settings(settings)
    await init_db(engine)
    sessionmaker = create_sessionmaker(engine)
    async with sessionmaker() as session:
        for data in LISTINGS:
            try:
                software = await create_listing(session, SoftwareListingCreate(**data))
            except ListingConflictError:
                print(f"{data['name']} already listed, skipping")
                await session.rollback()
                continue
            for rating in REVIEWS.get(software.name, []):
                await submit_review(
                    session,
                    ReviewCreate(
                        software_id=software.software_id,
                        title=f"{rating} stars",
                        email="demo@example.com",
                        overall_rating=rating,
                        pros="Easy to set up",
                        cons="Reporting could be deeper",
                    ),
                )
            await session.commit()
            print(f"Added {software.name}")
    await close_db(engine)
    print("Done.")


if __name__ == "__main__":
    asyncio.run(main())
