import pytest
from unittest.mock import AsyncMock
from app.database import Pokemon
from app.models import PokemonCreate, PokemonDTO, PokemonPatch, PokemonReplace
from app.services.pokemon_service import PokemonNotFoundError, PokemonService

# Record returned by the MOCKED repository
STORED_PIKACHU = Pokemon(
    id=25,
    nombre="Pikachu",
    tipo="Eléctrico",
    descripcion="Un ratón eléctrico.",
    imagen="https://example.com/Pikachu.png",
)

@pytest.fixture
def mock_repository():
    # Use AsyncMock for methods that are awaited
    repository = AsyncMock()
    repository.find.return_value = STORED_PIKACHU
    repository.find_all.return_value = [STORED_PIKACHU]
    # update/insert echo back what they were given
    repository.update.side_effect = lambda pokemon: pokemon
    repository.delete.return_value = True
    return repository

@pytest.fixture
def pokemon_service(mock_repository):
    return PokemonService(repository=mock_repository)


@pytest.mark.asyncio
async def test_list_pokemon_forwards_filters(pokemon_service, mock_repository):
    result = await pokemon_service.list_pokemon(nombre="Pikachu", tipo="Eléctrico")

    mock_repository.find_all.assert_called_once_with(nombre="Pikachu", tipo="Eléctrico")
    assert result == [PokemonDTO(id=25, nombre="Pikachu", tipo="Eléctrico",
                                 descripcion="Un ratón eléctrico.", imagen="https://example.com/Pikachu.png")]


@pytest.mark.asyncio
async def test_find_existing_parses_path_id(pokemon_service, mock_repository):
    result = await pokemon_service.find_existing("25")

    mock_repository.find.assert_called_once_with(25)
    assert result is STORED_PIKACHU


@pytest.mark.asyncio
async def test_find_existing_unknown_id_is_not_found(pokemon_service, mock_repository):
    mock_repository.find.return_value = None

    with pytest.raises(PokemonNotFoundError) as excinfo:
        await pokemon_service.find_existing("999")

    assert excinfo.value.status_code == 404


@pytest.mark.asyncio
async def test_find_existing_non_numeric_id_is_not_found(pokemon_service, mock_repository):
    """An id that does not parse is reported the same way as an unknown id."""
    with pytest.raises(PokemonNotFoundError) as excinfo:
        await pokemon_service.find_existing("pikachu")

    assert excinfo.value.status_code == 404
    mock_repository.find.assert_not_called()


@pytest.mark.asyncio
async def test_create_pokemon_inserts_payload(pokemon_service, mock_repository):
    mock_repository.insert.side_effect = lambda pokemon: Pokemon(
        id=152, nombre=pokemon.nombre, tipo=pokemon.tipo,
        descripcion=pokemon.descripcion, imagen=pokemon.imagen,
    )
    payload = PokemonCreate(nombre="Chikorita", tipo="Planta", descripcion="Le encanta tomar el sol.", imagen="chikorita.png")

    result = await pokemon_service.create_pokemon(payload)

    inserted = mock_repository.insert.call_args.args[0]
    assert inserted.id is None
    assert inserted.nombre == "Chikorita"
    assert result.id == 152
    assert result.tipo == "Planta"


@pytest.mark.asyncio
async def test_create_pokemon_forwards_client_id(pokemon_service, mock_repository):
    mock_repository.insert.side_effect = lambda pokemon: pokemon
    payload = PokemonCreate(id=500, nombre="Chikorita", tipo="Planta", descripcion="d", imagen="i")

    result = await pokemon_service.create_pokemon(payload)

    assert mock_repository.insert.call_args.args[0].id == 500
    assert result.id == 500


@pytest.mark.asyncio
async def test_replace_overwrites_all_fields_and_keeps_id(pokemon_service, mock_repository):
    payload = PokemonReplace(id=1, nombre="Raichu", tipo="Eléctrico", descripcion="Evolución.", imagen="raichu.png")

    result = await pokemon_service.replace_pokemon(STORED_PIKACHU, payload)

    # Body id is ignored, the stored identity stays
    assert result == PokemonDTO(id=25, nombre="Raichu", tipo="Eléctrico", descripcion="Evolución.", imagen="raichu.png")
    mock_repository.update.assert_called_once()


@pytest.mark.asyncio
async def test_patch_only_changes_given_fields(pokemon_service, mock_repository):
    result = await pokemon_service.patch_pokemon(STORED_PIKACHU, PokemonPatch(tipo="Eléctrico/Hada"))

    assert result.tipo == "Eléctrico/Hada"
    assert result.nombre == STORED_PIKACHU.nombre
    assert result.descripcion == STORED_PIKACHU.descripcion
    assert result.imagen == STORED_PIKACHU.imagen
    # Stored record itself is not mutated
    assert STORED_PIKACHU.tipo == "Eléctrico"


@pytest.mark.asyncio
async def test_patch_with_empty_payload_still_saves(pokemon_service, mock_repository):
    result = await pokemon_service.patch_pokemon(STORED_PIKACHU, PokemonPatch())

    mock_repository.update.assert_called_once_with(STORED_PIKACHU)
    assert result == PokemonDTO.model_validate(STORED_PIKACHU)


@pytest.mark.asyncio
async def test_patch_ignores_null_fields(pokemon_service, mock_repository):
    result = await pokemon_service.patch_pokemon(STORED_PIKACHU, PokemonPatch(nombre=None, imagen="nueva.png"))

    assert result.nombre == "Pikachu"
    assert result.imagen == "nueva.png"


@pytest.mark.asyncio
async def test_delete_pokemon(pokemon_service, mock_repository):
    await pokemon_service.delete_pokemon(STORED_PIKACHU)

    mock_repository.delete.assert_called_once_with(25)


@pytest.mark.asyncio
async def test_delete_already_removed_row_is_not_found(pokemon_service, mock_repository):
    mock_repository.delete.return_value = False

    with pytest.raises(PokemonNotFoundError):
        await pokemon_service.delete_pokemon(STORED_PIKACHU)


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["2_5", " 25", "25 ", "٢٥", "", "+", "0x19"])
async def test_find_existing_rejects_non_integer_literals(pokemon_service, mock_repository, raw_id):
    with pytest.raises(PokemonNotFoundError):
        await pokemon_service.find_existing(raw_id)

    mock_repository.find.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", [str(2**63), str(-(2**63) - 1), "99999999999999999999"])
async def test_find_existing_rejects_ids_outside_64_bits(pokemon_service, mock_repository, raw_id):
    with pytest.raises(PokemonNotFoundError):
        await pokemon_service.find_existing(raw_id)

    mock_repository.find.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id, expected", [("+25", 25), (str(2**63 - 1), 2**63 - 1), ("-3", -3)])
async def test_find_existing_accepts_signed_64_bit_literals(pokemon_service, mock_repository, raw_id, expected):
    await pokemon_service.find_existing(raw_id)

    mock_repository.find.assert_called_once_with(expected)


@pytest.mark.asyncio
async def test_replace_of_row_deleted_meanwhile_is_not_found(pokemon_service, mock_repository):
    mock_repository.update.side_effect = None
    mock_repository.update.return_value = None
    payload = PokemonReplace(nombre="Raichu", tipo="Eléctrico", descripcion="Evolución.", imagen="raichu.png")

    with pytest.raises(PokemonNotFoundError):
        await pokemon_service.replace_pokemon(STORED_PIKACHU, payload)


@pytest.mark.asyncio
async def test_patch_of_row_deleted_meanwhile_is_not_found(pokemon_service, mock_repository):
    mock_repository.update.side_effect = None
    mock_repository.update.return_value = None

    with pytest.raises(PokemonNotFoundError):
        await pokemon_service.patch_pokemon(STORED_PIKACHU, PokemonPatch(tipo="Agua"))
