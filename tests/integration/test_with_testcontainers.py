import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import URL
from sqlalchemy.pool import NullPool
from testcontainers.mysql import MySqlContainer
from app import dependencies
from app.database import create_engine
from app.main import app

pytestmark = [
    pytest.mark.container,
    pytest.mark.skipif(os.getenv("RUN_CONTAINER_TESTS") != "1", reason="set RUN_CONTAINER_TESTS=1 to run against MySQL"),
]


@pytest.fixture(scope="module")
def mysql_container():
    """Start a real MySQL container for integration tests."""
    with MySqlContainer("mysql:8.0", dbname="pokedex_db", username="pokedex_db_user", password="Pokedex") as container:
        yield container


@pytest.fixture(scope="module")
def mysql_url(mysql_container):
    """Get the aiomysql connection URL for the container."""
    return URL.create(
        drivername="mysql+aiomysql",
        host=mysql_container.get_container_host_ip(),
        port=int(mysql_container.get_exposed_port(3306)),
        username="pokedex_db_user",
        password="Pokedex",
        database="pokedex_db",
    )


@pytest.fixture
def test_client(mysql_url, monkeypatch):
    """TestClient with real MySQL from Testcontainers."""
    monkeypatch.setattr(dependencies, "_engine", create_engine(mysql_url, poolclass=NullPool))

    with TestClient(app) as client:
        yield client


def test_integration_seeded_table_on_mysql(test_client):
    response = test_client.get("/pokemon")

    assert response.status_code == 200
    assert len(response.json()) >= 151
    assert test_client.get("/pokemon/151").json()["nombre"] == "Mew"


def test_integration_accented_filter_on_mysql(test_client):
    response = test_client.get("/pokemon", params={"nombre": "Pikachu", "tipo": "Eléctrico"})

    assert [p["nombre"] for p in response.json()] == ["Pikachu"]


def test_integration_crud_round_on_mysql(test_client):
    created = test_client.post("/pokemon", json={
        "nombre": "Totodile",
        "tipo": "Agua",
        "descripcion": "Muerde todo lo que se mueve.",
        "imagen": "https://example.com/Totodile.png",
    })
    assert created.status_code == 200
    pokemon_id = created.json()["id"]

    patched = test_client.patch(f"/pokemon/{pokemon_id}", json={"descripcion": "Pequeño pero feroz."})
    assert patched.json()["descripcion"] == "Pequeño pero feroz."
    assert patched.json()["nombre"] == "Totodile"

    assert test_client.delete(f"/pokemon/{pokemon_id}").status_code == 204
    assert test_client.get(f"/pokemon/{pokemon_id}").status_code == 404
