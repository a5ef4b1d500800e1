"""Car Rental Software Directory API - FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rental_directory.config import Settings, settings as default_settings
from rental_directory.database import close_db, create_engine_from_settings, create_sessionmaker, init_db
from rental_directory.store import SQLAlchemyStore
from rental_directory.api import routes, software, reviews, compare, contact
from rental_directory.api import export as export_api


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_engine_from_settings(app.state.settings)
    app.state.sessionmaker = create_sessionmaker(engine)
    app.state.store = SQLAlchemyStore(app.state.sessionmaker)
    await init_db(engine)
    yield
    await close_db(engine)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title=settings.APP_NAME,
        description="Car rental software directory: catalog, comparison, reviews and vendor listings",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router, prefix="/api", tags=["api"])
    app.include_router(software.router, prefix="/api")
    app.include_router(reviews.router, prefix="/api")
    app.include_router(compare.router, prefix="/api")
    app.include_router(export_api.router, prefix="/api")
    app.include_router(contact.router, prefix="/api")

    @app.get("/")
    def root():
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "api": "/api",
        }

    return app


app = create_app()
