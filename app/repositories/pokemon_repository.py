import logging
from dataclasses import asdict
from typing import List, Optional
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncEngine
from app.database import Pokemon, pokemon_table

logger = logging.getLogger(__name__)


def _to_record(row: Row) -> Pokemon:
    return Pokemon(
        id=row.id,
        nombre=row.nombre,
        tipo=row.tipo,
        descripcion=row.descripcion,
        imagen=row.imagen,
    )


class PokemonRepository:
    """
    Reads and writes rows of the Pokemon table.
    Every method runs in its own transaction on the shared engine.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def find(self, pokemon_id: int) -> Optional[Pokemon]:
        statement = select(pokemon_table).where(pokemon_table.c.id == pokemon_id)
        async with self._engine.connect() as conn:
            row = (await conn.execute(statement)).first()
        return _to_record(row) if row is not None else None

    async def find_all(self, nombre: Optional[str] = None, tipo: Optional[str] = None) -> List[Pokemon]:
        """Returns every row matching all of the given exact-match filters."""
        statement = select(pokemon_table)
        if nombre is not None:
            statement = statement.where(pokemon_table.c.nombre == nombre)
        if tipo is not None:
            statement = statement.where(pokemon_table.c.tipo == tipo)

        async with self._engine.connect() as conn:
            result = await conn.execute(statement)
            return [_to_record(row) for row in result]

    async def insert(self, pokemon: Pokemon) -> Pokemon:
        values = asdict(pokemon)
        # Let the database assign the id unless the caller chose one
        if values["id"] is None:
            del values["id"]

        async with self._engine.begin() as conn:
            result = await conn.execute(insert(pokemon_table).values(**values))
            new_id = result.inserted_primary_key[0]

        logger.info(f"Inserted Pokemon {pokemon.nombre!r} with id {new_id}")
        return Pokemon(**{**asdict(pokemon), "id": new_id})

    async def update(self, pokemon: Pokemon) -> Optional[Pokemon]:
        """Overwrites the stored row; returns None when no row has that id."""
        values = asdict(pokemon)
        del values["id"]

        statement = update(pokemon_table).where(pokemon_table.c.id == pokemon.id).values(**values)
        async with self._engine.begin() as conn:
            result = await conn.execute(statement)

        if result.rowcount == 0:
            return None
        logger.info(f"Updated Pokemon {pokemon.id}")
        return pokemon

    async def delete(self, pokemon_id: int) -> bool:
        """Removes the row; returns False when there was nothing to delete."""
        statement = delete(pokemon_table).where(pokemon_table.c.id == pokemon_id)
        async with self._engine.begin() as conn:
            result = await conn.execute(statement)

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted Pokemon {pokemon_id}")
        return deleted
