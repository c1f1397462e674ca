from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.settings import settings

engine = create_async_engine(settings.postgres_url, echo=settings.SQL_ECHO)
SessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, autoflush=False, expire_on_commit=False
)
Base = declarative_base()


async def get_db():
    async with SessionLocal() as db:
        try:
            yield db
        except Exception:
            await db.rollback()
            raise


async def init_db() -> None:
    """Create all tables. Importing the models registers them on Base."""
    from app.models import author, blog_post, topic_cluster  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
