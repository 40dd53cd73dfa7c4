import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


async def init_models(bind: AsyncEngine = None, drop: bool = False) -> None:
    """Create every table known to Base.metadata (optionally dropping first)."""
    from backend.app.db.base import Base, engine
    import backend.app.models  # noqa: F401  registers tables on the metadata

    bind = bind or engine
    try:
        async with bind.begin() as conn:
            if drop:
                await conn.run_sync(Base.metadata.drop_all)
            logger.info("Creating database tables...")
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ready.")
    except Exception as e:
        logger.error(f"Table creation failed: {e}")
        raise


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    asyncio.run(init_models())
