from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from storefront.core.config import settings
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine, sharing a single connection for SQLite URLs."""
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.log_level == "DEBUG",
        )
    return create_async_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        echo=settings.log_level == "DEBUG",
        future=True
    )


engine: AsyncEngine = build_engine(settings.database_url)

async_session_maker = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_async_session() -> AsyncSession:
    """FastAPI dependency for getting database session"""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {type(e).__name__}: {e}")
            raise
        finally:
            await session.close()


async def create_db_and_tables(bind: AsyncEngine = engine):
    logger.info("Creating database tables")
    # Registers the table models on SQLModel.metadata
    import storefront.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db():
    await engine.dispose()
