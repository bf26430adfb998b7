from dataclasses import dataclass
from typing import Optional
from sqlalchemy import Column, Integer, MetaData, String, Table
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from app.config import connect_args

metadata = MetaData()

# MySQL's default collation ignores case and accents, name and type filters are exact matches
ExactString = String(255).with_variant(String(255, collation="utf8mb4_bin"), "mysql")

# Storage layout of the "Pokemon" table (name kept as created by the first deployment)
pokemon_table = Table(
    "Pokemon",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("nombre", ExactString, nullable=False),
    Column("tipo", ExactString, nullable=False),
    Column("descripcion", ExactString, nullable=False),
    Column("imagen", ExactString, nullable=False),
    sqlite_autoincrement=True,  # never reuse ids of deleted rows
)


@dataclass
class Pokemon:
    """One stored Pokemon. `id` is None until the row has been inserted."""
    nombre: str
    tipo: str
    descripcion: str
    imagen: str
    id: Optional[int] = None


def create_engine(url: URL, **kwargs) -> AsyncEngine:
    return create_async_engine(url, connect_args=connect_args(url), **kwargs)
