from pydantic import BaseModel, Field
from typing import Optional


class TecnicoDTO(BaseModel):
    id: Optional[int] = None
    nombre: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=120)
    telefono: Optional[str] = Field(None, max_length=20)
