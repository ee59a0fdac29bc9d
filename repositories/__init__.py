"""
Capa de repositorio para el acceso a datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .pet_repository import PetRepository
from .owner_repository import OwnerRepository
from .pet_type_repository import PetTypeRepository

__all__ = [
    "BaseRepository",
    "PetRepository",
    "OwnerRepository",
    "PetTypeRepository",
]
