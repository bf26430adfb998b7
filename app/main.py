import logging
import os
import uvicorn
from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import FastAPI, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.config import log_level
from app.database import Pokemon
from app.dependencies import dispose_engine, get_engine, get_existing_pokemon, get_pokemon_service
from app.migrations import run_migrations
from app.models import PokemonCreate, PokemonDTO, PokemonPatch, PokemonReplace
from app.services.pokemon_service import PokemonService

logging.basicConfig(level=log_level())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await run_migrations(get_engine())
        yield
    finally:
        await dispose_engine()


app = FastAPI(
    title="Pokedex API",
    description="CRUD service over the first-generation Pokedex.",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def bad_request_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON and missing required fields are both client errors
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Endpoint 1: List, optionally filtered by exact name and/or type
@app.get(
    "/pokemon",
    response_model=List[PokemonDTO],
    summary="Returns every Pokemon matching the optional filters",
)
async def list_pokemon(
    nombre: Optional[str] = None,
    tipo: Optional[str] = None,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Both filters are exact matches and are combined with AND."""
    return await service.list_pokemon(nombre=nombre, tipo=tipo)


# Endpoint 2: Get by id
@app.get(
    "/pokemon/{id}",
    response_model=PokemonDTO,
    summary="Returns one Pokemon",
)
async def get_pokemon(
    pokemon: Pokemon = Depends(get_existing_pokemon),
    service: PokemonService = Depends(get_pokemon_service),
):
    return await service.get_pokemon(pokemon)


# Endpoint 3: Create
@app.post(
    "/pokemon",
    response_model=PokemonDTO,
    summary="Stores a new Pokemon",
)
async def create_pokemon(
    payload: PokemonCreate,
    service: PokemonService = Depends(get_pokemon_service),
):
    """The id is assigned by the database unless the body carries one."""
    logger.info(f"Creating Pokemon {payload.nombre!r}")
    return await service.create_pokemon(payload)


# Endpoint 4: Replace all fields
@app.put(
    "/pokemon/{id}",
    response_model=PokemonDTO,
    summary="Replaces every field of an existing Pokemon",
)
async def replace_pokemon(
    payload: PokemonReplace,
    pokemon: Pokemon = Depends(get_existing_pokemon),
    service: PokemonService = Depends(get_pokemon_service),
):
    logger.info(f"Replacing Pokemon {pokemon.id}")
    return await service.replace_pokemon(pokemon, payload)


# Endpoint 5: Partial update
@app.patch(
    "/pokemon/{id}",
    response_model=PokemonDTO,
    summary="Updates the given fields of an existing Pokemon",
)
async def patch_pokemon(
    payload: PokemonPatch,
    pokemon: Pokemon = Depends(get_existing_pokemon),
    service: PokemonService = Depends(get_pokemon_service),
):
    logger.info(f"Patching Pokemon {pokemon.id}")
    return await service.patch_pokemon(pokemon, payload)


# Endpoint 6: Delete
@app.delete(
    "/pokemon/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Deletes an existing Pokemon",
)
async def delete_pokemon(
    pokemon: Pokemon = Depends(get_existing_pokemon),
    service: PokemonService = Depends(get_pokemon_service),
):
    logger.info(f"Deleting Pokemon {pokemon.id}")
    await service.delete_pokemon(pokemon)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def run() -> None:
    """Entry point of the `pokedex-api` script."""
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        log_level=log_level().lower(),
    )
