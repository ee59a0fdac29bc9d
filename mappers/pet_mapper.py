"""
Mapper sin estado entre PetORM/PetTypeORM/VisitORM y sus DTOs.

Las funciones aceptan ``None`` y lo propagan, de modo que el controlador puede
mapear el resultado de una búsqueda y luego decidir el 404.
"""

from typing import Iterable, List, Optional

from database.models import PetORM, PetTypeORM, VisitORM
from models.pets import PetDto, PetTypeDto, VisitDto


def to_pet_type_dto(pet_type: Optional[PetTypeORM]) -> Optional[PetTypeDto]:
    if pet_type is None:
        return None
    return PetTypeDto(id=pet_type.id, name=pet_type.name)


def to_pet_type_dtos(pet_types: Iterable[PetTypeORM]) -> List[PetTypeDto]:
    return [to_pet_type_dto(t) for t in pet_types]


def to_visit_dto(visit: VisitORM) -> VisitDto:
    return VisitDto(
        id=visit.id,
        visit_date=visit.visit_date,
        description=visit.description,
        pet_id=visit.pet_id,
    )


def to_pet_dto(pet: Optional[PetORM]) -> Optional[PetDto]:
    """
    Convert a PetORM into its transport shape.

    Args:
        pet: ORM instance (or None)

    Returns:
        PetDto with ``ownerId``/``typeId`` flattened and nested type and visits,
        or None when ``pet`` is None
    """
    if pet is None:
        return None
    owner_id = pet.owner.id if pet.owner is not None else pet.owner_id
    type_id = pet.type.id if pet.type is not None else pet.type_id
    return PetDto(
        id=pet.id,
        name=pet.name,
        birth_date=pet.birth_date,
        owner_id=owner_id,
        type_id=type_id,
        type=to_pet_type_dto(pet.type),
        visits=[to_visit_dto(v) for v in pet.visits],
    )


def to_pets_dto(pets: Iterable[PetORM]) -> List[PetDto]:
    return [to_pet_dto(p) for p in pets]


def to_pet(dto: PetDto) -> PetORM:
    """Build a new, transient PetORM from the scalar fields of a DTO.

    Identity is assigned on persist; owner and type are left for the caller
    to resolve.
    """
    return PetORM(
        name=dto.name,
        birth_date=dto.birth_date,
    )
