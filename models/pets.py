from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from datetime import date

# rango de INTEGER de 32 bits en la base de datos
MIN_ID = -(2 ** 31)
MAX_ID = 2 ** 31 - 1


class PetTypeDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: Optional[int] = Field(None, ge=MIN_ID, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=80)


class VisitDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, ge=MIN_ID, le=MAX_ID)
    visit_date: date = Field(..., alias="date")
    description: str = Field(..., min_length=1, max_length=255)
    pet_id: Optional[int] = Field(None, alias="petId", ge=MIN_ID, le=MAX_ID)


class PetDto(BaseModel):
    """Representación de transporte de una mascota.

    `ownerId` es opcional a nivel estructural: su ausencia se reporta como
    "Missing owner id" en el controlador. `type` y `visits` son de solo lectura
    en las respuestas; en la entrada se acepta `type.id` si falta `typeId`.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, ge=MIN_ID, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=30)
    birth_date: date = Field(..., alias="birthDate")
    owner_id: Optional[int] = Field(None, alias="ownerId", ge=MIN_ID, le=MAX_ID)
    type_id: Optional[int] = Field(None, alias="typeId", ge=MIN_ID, le=MAX_ID)
    type: Optional[PetTypeDto] = None
    visits: List[VisitDto] = Field(default_factory=list)

    @model_validator(mode="after")
    def type_id_from_nested_type(self) -> "PetDto":
        if self.type_id is None and self.type is not None:
            self.type_id = self.type.id
        return self
