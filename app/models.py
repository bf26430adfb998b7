from pydantic import BaseModel, ConfigDict

# Model sent back to clients (Public Contract). Every field may be null.
class PokemonDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    nombre: str | None = None
    tipo: str | None = None
    descripcion: str | None = None
    imagen: str | None = None

# Body of POST /pokemon. A client-chosen id is forwarded to the insert.
class PokemonCreate(BaseModel):
    id: int | None = None
    nombre: str
    tipo: str
    descripcion: str
    imagen: str

# Body of PUT /pokemon/{id}. The path id is the only identity, a body id is ignored.
class PokemonReplace(BaseModel):
    id: int | None = None
    nombre: str
    tipo: str
    descripcion: str
    imagen: str

# Body of PATCH /pokemon/{id}. Only non-null fields are applied.
class PokemonPatch(BaseModel):
    id: int | None = None
    nombre: str | None = None
    tipo: str | None = None
    descripcion: str | None = None
    imagen: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude={"id"}, exclude_none=True)
