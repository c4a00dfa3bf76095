import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.config import Settings

logger = logging.getLogger(__name__)


# 🔹 Build the async engine (called on startup)
def connect_to_sqlite(settings: Settings) -> AsyncEngine:
    engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    logger.info("📌 SQLite engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


# 🔹 Release pooled connections (shutdown)
async def close_sqlite_connection(engine: AsyncEngine) -> None:
    await engine.dispose()
    logger.info("❌ SQLite connection closed")
