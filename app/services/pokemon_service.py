import logging
import re
from dataclasses import replace
from typing import List, Optional
from fastapi import HTTPException, status
from app.database import Pokemon
from app.models import PokemonCreate, PokemonDTO, PokemonPatch, PokemonReplace
from app.repositories import PokemonRepository

logger = logging.getLogger(__name__)

# Plain ASCII integer literal, no underscores or surrounding whitespace
POKEMON_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# Ids are stored as signed 64-bit integers
MAX_POKEMON_ID = 2**63 - 1
MIN_POKEMON_ID = -(2**63)


class PokemonNotFoundError(HTTPException):
    def __init__(self, pokemon_id):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pokemon '{pokemon_id}' not found.")


class PokemonService:
    # The repository is injected so tests can hand in a mock
    def __init__(self, repository: PokemonRepository):
        self._repository = repository

    async def find_existing(self, raw_id: str) -> Pokemon:
        """
        Resolves a path identifier to a stored Pokemon.
        Identifiers that are not integers are reported exactly like unknown ids.
        """
        if POKEMON_ID_PATTERN.fullmatch(raw_id) is None:
            logger.info(f"Rejected non-numeric Pokemon id {raw_id!r}")
            raise PokemonNotFoundError(raw_id)

        pokemon_id = int(raw_id)
        if not MIN_POKEMON_ID <= pokemon_id <= MAX_POKEMON_ID:
            logger.info(f"Rejected out of range Pokemon id {raw_id!r}")
            raise PokemonNotFoundError(raw_id)

        pokemon = await self._repository.find(pokemon_id)
        if pokemon is None:
            logger.info(f"Pokemon {pokemon_id} not found")
            raise PokemonNotFoundError(pokemon_id)
        return pokemon

    async def list_pokemon(self, nombre: Optional[str] = None, tipo: Optional[str] = None) -> List[PokemonDTO]:
        records = await self._repository.find_all(nombre=nombre, tipo=tipo)
        return [PokemonDTO.model_validate(record) for record in records]

    async def get_pokemon(self, pokemon: Pokemon) -> PokemonDTO:
        return PokemonDTO.model_validate(pokemon)

    async def create_pokemon(self, payload: PokemonCreate) -> PokemonDTO:
        created = await self._repository.insert(Pokemon(**payload.model_dump()))
        return PokemonDTO.model_validate(created)

    async def replace_pokemon(self, existing: Pokemon, payload: PokemonReplace) -> PokemonDTO:
        """Overwrites all four fields of the stored Pokemon."""
        updated = replace(
            existing,
            nombre=payload.nombre,
            tipo=payload.tipo,
            descripcion=payload.descripcion,
            imagen=payload.imagen,
        )
        return await self._save(updated)

    async def patch_pokemon(self, existing: Pokemon, payload: PokemonPatch) -> PokemonDTO:
        """Overwrites only the fields present in the payload, then saves regardless."""
        updated = replace(existing, **payload.changes())
        return await self._save(updated)

    async def _save(self, pokemon: Pokemon) -> PokemonDTO:
        saved = await self._repository.update(pokemon)
        # The row may have been deleted since it was looked up
        if saved is None:
            raise PokemonNotFoundError(pokemon.id)
        return PokemonDTO.model_validate(saved)

    async def delete_pokemon(self, existing: Pokemon) -> None:
        # A concurrent delete may have removed the row since it was looked up
        if not await self._repository.delete(existing.id):
            raise PokemonNotFoundError(existing.id)
