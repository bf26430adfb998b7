"""Data access for stored Pokemon."""
from .pokemon_repository import PokemonRepository

__all__ = [
    'PokemonRepository',
]
