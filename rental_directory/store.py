"""Read-only query contract over the relational store."""
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class DataStore(Protocol):
    async def query_one(self, model: Any, **filters: Any) -> Any | None:
        ...

    async def query_many(self, model: Any, *columns: Any, **filters: Any) -> list[Any]:
        ...


class SQLAlchemyStore:
    """DataStore backed by an async session factory.

    Every query runs in its own short-lived session, so callers may fan out
    queries concurrently with asyncio.gather.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self.sessionmaker = sessionmaker

    async def query_one(self, model: Any, **filters: Any) -> Any | None:
        """First row of ``model`` matching all equality filters, or None."""
        async with self.sessionmaker() as session:
            result = await session.execute(select(model).filter_by(**filters).limit(1))
            return result.scalars().first()

    async def query_many(self, model: Any, *columns: Any, **filters: Any) -> list[Any]:
        """All matching rows. With ``columns`` only those are selected and Row tuples are returned."""
        async with self.sessionmaker() as session:
            if columns:
                result = await session.execute(select(*columns).select_from(model).filter_by(**filters))
                return list(result.all())
            result = await session.execute(select(model).filter_by(**filters))
            return list(result.scalars().all())
