from typing import AsyncGenerator

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from screenlist.config import get_settings

settings = get_settings()

# Upper bound of a PostgreSQL INTEGER column; ids and counters arriving over
# HTTP are validated against it before they reach a query.
INT4_MAX = 2_147_483_647

engine = create_async_engine(
    settings.get_async_url(),
    echo=settings.debug,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


def upsert(db: AsyncSession, model):
    """Dialect-specific INSERT that supports ``on_conflict_do_update``.

    PostgreSQL in production, SQLite for local runs and tests. Both constructs
    expose the same ``on_conflict_do_update(index_elements=..., set_=...)`` API.
    """
    if db.get_bind().dialect.name == "sqlite":
        return sqlite_insert(model)
    return pg_insert(model)
