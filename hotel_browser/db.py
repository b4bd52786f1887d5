"""
Database connection and initialization.

The asyncpg pool is process-wide, created on first use and reused by every
request afterwards.
"""

import asyncio
import asyncpg
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from hotel_browser.config import get_app_settings

logger = logging.getLogger(__name__)

# Global connection pool
pg_pool: Optional[asyncpg.Pool] = None
_pool_lock: Optional[asyncio.Lock] = None


async def get_pg_pool() -> asyncpg.Pool:
    """Get the PostgreSQL connection pool, creating it on first use.

    Concurrent first callers wait on one lock so only a single pool is
    ever created.
    """
    global pg_pool, _pool_lock

    if pg_pool is not None:
        return pg_pool

    if _pool_lock is None:
        _pool_lock = asyncio.Lock()

    async with _pool_lock:
        if pg_pool is None:
            settings = get_app_settings().database
            try:
                pg_pool = await asyncpg.create_pool(
                    settings.url,
                    min_size=settings.min_pool_size,
                    max_size=settings.max_pool_size
                )
            except Exception as e:
                logger.error(f"Failed to connect to PostgreSQL: {e}")
                raise
            logger.info("PostgreSQL connection pool created")

    return pg_pool


@asynccontextmanager
async def acquire() -> AsyncIterator[asyncpg.Connection]:
    """Acquire a pooled connection, releasing it on exit."""
    pool = await get_pg_pool()
    async with pool.acquire() as conn:
        yield conn


async def init_db():
    """Initialize the connection pool and the hotels table"""
    await get_pg_pool()
    await create_tables()


async def close_db():
    """Close database connections"""
    global pg_pool, _pool_lock

    if pg_pool:
        await pg_pool.close()
        logger.info("PostgreSQL connection pool closed")

    pg_pool = None
    _pool_lock = None


async def create_tables(table: Optional[str] = None):
    """Create the hotels table if it doesn't exist"""
    table = table or get_app_settings().database.table
    if not table.isidentifier():
        raise ValueError(f"Invalid table name: {table!r}")

    feature_columns = ",\n".join(f"                feature_{i} TEXT" for i in range(1, 10))

    async with acquire() as conn:
        await conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {table} (
                id TEXT PRIMARY KEY,
                hotel_name TEXT NOT NULL,
                hotel_rating DOUBLE PRECISION NOT NULL,
                city TEXT NOT NULL,
{feature_columns},
                hotel_price DOUBLE PRECISION NOT NULL
            )
        """)

        await conn.execute(f"""
            CREATE INDEX IF NOT EXISTS idx_{table}_city ON {table}(lower(city));
        """)

        await conn.execute(f"""
            CREATE INDEX IF NOT EXISTS idx_{table}_price ON {table}(hotel_price);
        """)

        logger.info("Database tables created/verified")
