"""PostgreSQL engine and sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine.

    Args:
        database: URL and pool sizes
        echo: Log every SQL statement (debug mode)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Sessions neither autoflush nor commit on their own: repositories flush
    explicitly and ``PostgresUnitOfWork`` commits.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
