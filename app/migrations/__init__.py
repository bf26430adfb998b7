"""Schema migrations for the Pokedex database."""
from .create_pokemon import prepare, revert, run_migrations, revert_migrations

__all__ = [
    'prepare',
    'revert',
    'run_migrations',
    'revert_migrations',
]
