# nurse_connect/core/database.py
from typing import Any, AsyncIterator, Dict
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from nurse_connect.core.config import settings


def engine_options(database_url: str) -> Dict[str, Any]:
    """Pool options for the given URL; SQLite pools take no sizing arguments."""
    options: Dict[str, Any] = {"echo": False, "future": True}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=60,
            pool_recycle=3600,      # Recycle connections every hour
            pool_pre_ping=True,
        )
    return options


engine = create_async_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

async_session_maker = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def get_async_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        yield session
