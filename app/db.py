from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from app.core.config import get_settings
from app.models.base import Base
import logging

log = logging.getLogger(__name__)

settings = get_settings()

DATABASE_URL = settings.database_url
if not DATABASE_URL:
    raise ValueError("❌ DATABASE_URL is not set!")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False):
    if url.startswith("sqlite"):
        # aiosqlite connections are bound to the loop that opened them
        new_engine = create_async_engine(url, echo=echo, poolclass=NullPool)
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


# Create engine
engine = build_engine(DATABASE_URL, echo=settings.sql_echo)

# Async session maker
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Dependency
async def get_db():
    async with async_session() as session:
        yield session


async def create_db_and_tables():
    import app.models  # triggers __init__.py

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("Database schema ready")


# Reusable engine getter
def get_async_engine():
    return engine
