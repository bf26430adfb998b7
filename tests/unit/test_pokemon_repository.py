import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from app.database import Pokemon, metadata
from app.repositories import PokemonRepository


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Provides an empty SQLite database with the Pokemon table."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pokedex.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()

@pytest.fixture
def repository(engine):
    return PokemonRepository(engine)

def make_pokemon(nombre: str, tipo: str) -> Pokemon:
    return Pokemon(nombre=nombre, tipo=tipo, descripcion=f"{nombre} description", imagen=f"https://example.com/{nombre}.png")


@pytest.mark.asyncio
async def test_insert_assigns_id_and_find_returns_record(repository):
    created = await repository.insert(make_pokemon("Chikorita", "Planta"))

    assert created.id is not None
    found = await repository.find(created.id)
    assert found == created


@pytest.mark.asyncio
async def test_insert_keeps_client_chosen_id(repository):
    created = await repository.insert(Pokemon(id=42, nombre="Mew", tipo="Psíquico", descripcion="d", imagen="i"))

    assert created.id == 42
    assert (await repository.find(42)).nombre == "Mew"


@pytest.mark.asyncio
async def test_find_unknown_id_returns_none(repository):
    assert await repository.find(12345) is None


@pytest.mark.asyncio
async def test_find_all_filters_are_exact_and_combined(repository):
    await repository.insert(make_pokemon("Pikachu", "Eléctrico"))
    await repository.insert(make_pokemon("Raichu", "Eléctrico"))
    await repository.insert(make_pokemon("Pikachu", "Normal"))

    assert len(await repository.find_all()) == 3

    by_name = await repository.find_all(nombre="Pikachu")
    assert {p.tipo for p in by_name} == {"Eléctrico", "Normal"}
    assert all(p.nombre == "Pikachu" for p in by_name)

    both = await repository.find_all(nombre="Pikachu", tipo="Eléctrico")
    assert [(p.nombre, p.tipo) for p in both] == [("Pikachu", "Eléctrico")]

    assert await repository.find_all(nombre="pikachu") == []
    assert await repository.find_all(nombre="Pika") == []


@pytest.mark.asyncio
async def test_update_persists_all_fields(repository):
    created = await repository.insert(make_pokemon("Chikorita", "Planta"))
    changed = Pokemon(id=created.id, nombre="Bayleef", tipo="Planta", descripcion="Evoluciona.", imagen="bayleef.png")

    await repository.update(changed)

    assert await repository.find(created.id) == changed


@pytest.mark.asyncio
async def test_delete_removes_row(repository):
    created = await repository.insert(make_pokemon("Chikorita", "Planta"))

    assert await repository.delete(created.id) is True
    assert await repository.find(created.id) is None
    assert await repository.delete(created.id) is False


@pytest.mark.asyncio
async def test_deleted_ids_are_not_reused(repository):
    first = await repository.insert(make_pokemon("Chikorita", "Planta"))
    await repository.delete(first.id)

    second = await repository.insert(make_pokemon("Cyndaquil", "Fuego"))

    assert second.id > first.id


@pytest.mark.asyncio
async def test_update_unknown_id_returns_none(repository):
    missing = Pokemon(id=999, nombre="Ghost", tipo="Fantasma", descripcion="d", imagen="i")

    assert await repository.update(missing) is None
    assert await repository.find(999) is None
