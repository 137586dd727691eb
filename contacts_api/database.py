from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

Base = declarative_base()


def create_sessionmaker(database_url: str, **engine_kwargs) -> async_sessionmaker[AsyncSession]:
    if database_url.startswith("sqlite"):
        # sqlite connections must not outlive the event loop that opened them,
        # and Mangum may run each invocation on a fresh loop
        engine_kwargs.setdefault("poolclass", NullPool)
    else:
        engine_kwargs.setdefault("pool_pre_ping", True)
    engine = create_async_engine(database_url, **engine_kwargs)
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@lru_cache
def get_sessionmaker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(database_url)


async def create_tables(sessionmaker: async_sessionmaker[AsyncSession]) -> None:
    from contacts_api.models import user  # noqa: F401  (registers the table)

    async with sessionmaker() as session:
        async with session.bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
