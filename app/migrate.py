"""Applies or reverts the database migrations outside of the web server."""
import argparse
import asyncio
import logging
from app.config import database_url, log_level
from app.database import create_engine
from app.migrations import revert_migrations, run_migrations


async def _migrate(revert: bool) -> None:
    engine = create_engine(database_url())
    try:
        if revert:
            await revert_migrations(engine)
        else:
            await run_migrations(engine)
    finally:
        await engine.dispose()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Pokedex database migrations")
    parser.add_argument("--revert", action="store_true", help="drop the Pokemon table instead of creating it")
    args = parser.parse_args(argv)

    logging.basicConfig(level=log_level())
    asyncio.run(_migrate(args.revert))


if __name__ == "__main__":
    main()
