"""
Traducción entre entidades ORM y DTOs de transporte.
"""

from .pet_mapper import (
    to_pet,
    to_pet_dto,
    to_pets_dto,
    to_pet_type_dto,
    to_pet_type_dtos,
    to_visit_dto,
)

__all__ = [
    "to_pet",
    "to_pet_dto",
    "to_pets_dto",
    "to_pet_type_dto",
    "to_pet_type_dtos",
    "to_visit_dto",
]
