# pokeproxy/models/lookup.py

from typing import Optional

from pydantic import BaseModel, StrictInt, StrictStr


class LookupOut(BaseModel):
    # strict: upstream values are passed through, never coerced
    name: StrictStr
    id: StrictInt
    # official artwork URL, owned by the upstream; PokeAPI reports null for some forms
    image: Optional[StrictStr] = None

    class Config:
        frozen = True


class ErrorOut(BaseModel):
    error: str
