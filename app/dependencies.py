from app.config import database_url
from app.database import Pokemon, create_engine
from app.repositories import PokemonRepository
from app.services.pokemon_service import PokemonService
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

_engine = None

def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = create_engine(database_url(), pool_pre_ping=True)
    return _engine

async def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None

def get_pokemon_repository(engine: AsyncEngine = Depends(get_engine)) -> PokemonRepository:
    return PokemonRepository(engine)

def get_pokemon_service(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> PokemonService:
    return PokemonService(repository=repository)

async def get_existing_pokemon(
    id: str,
    service: PokemonService = Depends(get_pokemon_service),
) -> Pokemon:
    # Resolved before the request body is validated, so unknown ids win over bad bodies
    return await service.find_existing(id)
