import logging
from sqlalchemy import inspect, insert
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from app.database import pokemon_table
from app.migrations.seed_data import SEED_POKEMON

logger = logging.getLogger(__name__)


async def prepare(conn: AsyncConnection) -> None:
    """
    Creates the Pokemon table and loads the first 151 entries of the Pokedex.
    Runs inside the caller's transaction, so a failed insert leaves nothing behind.
    """
    await conn.run_sync(pokemon_table.create)

    rows = [
        {"nombre": nombre, "tipo": tipo, "descripcion": descripcion, "imagen": imagen}
        for nombre, tipo, descripcion, imagen in SEED_POKEMON
    ]
    await conn.execute(insert(pokemon_table), rows)
    logger.info(f"Seeded {len(rows)} Pokemon")


async def revert(conn: AsyncConnection) -> None:
    await conn.run_sync(pokemon_table.drop)


async def _table_exists(conn: AsyncConnection) -> bool:
    return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(pokemon_table.name))


async def run_migrations(engine: AsyncEngine) -> bool:
    """Applies the migration unless the table already exists. Returns True if it ran."""
    async with engine.begin() as conn:
        if await _table_exists(conn):
            logger.info("Pokemon table already present, skipping migration")
            return False

        logger.info("Creating Pokemon table")
        await prepare(conn)
    return True


async def revert_migrations(engine: AsyncEngine) -> bool:
    async with engine.begin() as conn:
        if not await _table_exists(conn):
            logger.info("Pokemon table not present, nothing to revert")
            return False

        logger.info("Dropping Pokemon table")
        await revert(conn)
    return True
