import logging

import asyncpg

from .config import settings
from .models.movie import movies_table_ddl

logger = logging.getLogger(__name__)

# Global state for connections
class AppState:
    pg_pool: asyncpg.Pool = None

state = AppState()

async def create_schema(conn) -> None:
    """Create the movies table if it does not exist yet"""
    await conn.execute(movies_table_ddl())

async def init_resources():
    """Initialize all resources"""
    state.pg_pool = await asyncpg.create_pool(
        settings.DATABASE_URL,
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
        command_timeout=settings.DB_COMMAND_TIMEOUT
    )

    if settings.CREATE_SCHEMA_ON_STARTUP:
        async with state.pg_pool.acquire() as conn:
            await create_schema(conn)

    logger.info("Database pool initialized")

async def close_resources():
    """Close all resources"""
    if state.pg_pool:
        await state.pg_pool.close()
        state.pg_pool = None
    logger.info("Database pool closed")

# Dependencies
async def get_db_pool() -> asyncpg.Pool:
    return state.pg_pool
