import pytest
from unittest.mock import AsyncMock
from app import dependencies
from app import main


@pytest.mark.asyncio
async def test_engine_disposed_when_migration_fails(monkeypatch):
    engine = AsyncMock()
    monkeypatch.setattr(dependencies, "_engine", engine)
    monkeypatch.setattr(main, "run_migrations", AsyncMock(side_effect=RuntimeError("migration failed")))

    with pytest.raises(RuntimeError):
        async with main.lifespan(main.app):
            pass

    engine.dispose.assert_awaited_once()
    assert dependencies._engine is None


@pytest.mark.asyncio
async def test_engine_disposed_on_shutdown(monkeypatch):
    engine = AsyncMock()
    monkeypatch.setattr(dependencies, "_engine", engine)
    monkeypatch.setattr(main, "run_migrations", AsyncMock(return_value=True))

    async with main.lifespan(main.app):
        main.run_migrations.assert_awaited_once_with(engine)

    engine.dispose.assert_awaited_once()
