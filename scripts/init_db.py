import asyncio
import logging

from app.db.postgres.base import close_db, init_db

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    try:
        await init_db()
        logger.info("Tables created successfully.")
    except Exception as e:
        logger.error(f"Table creation failed: {e}", exc_info=True)
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
