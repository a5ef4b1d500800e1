"""Async database setup with SQLAlchemy and aiosqlite.

The engine and session factory are built by the application lifespan and kept
on ``app.state``; nothing here is created at import time.
"""
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from rental_directory.config import Settings


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def async_database_url(url: str) -> str:
    """Ensure the aiosqlite driver for plain sqlite URLs."""
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    url = async_database_url(settings.DATABASE_URL)
    return create_async_engine(
        url,
        echo=settings.DEBUG,
        connect_args={"check_same_thread": False} if "sqlite" in url else {},
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async database session."""
    async with request.app.state.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables. Call on application startup."""
    # Register every mapped table on Base.metadata before create_all.
    import rental_directory.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Dispose engine on shutdown."""
    await engine.dispose()
