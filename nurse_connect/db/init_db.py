import asyncio
import logging
from nurse_connect.core.database import engine, async_session_maker
from nurse_connect.models.base import Base
import nurse_connect.models  # noqa: F401  registers every table on Base.metadata
from nurse_connect.db.seeds.initial_data import create_initial_data

logger = logging.getLogger(__name__)

async def create_tables():
    """Create all database tables"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created successfully")

    except Exception as e:
        logger.error(f"Error creating tables: {str(e)}")
        raise

async def init_db(seed: bool = False):
    """Initialize the database"""
    logger.info("Initializing database...")
    await create_tables()

    if seed:
        async with async_session_maker() as session:
            await create_initial_data(session)

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    import sys
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db(seed="--seed" in sys.argv))
