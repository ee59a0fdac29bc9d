"""
Repositorio para el conjunto cerrado de tipos de mascota.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import PetTypeORM


class PetTypeRepository(BaseRepository[PetTypeORM]):
    """Repositorio de tipos de mascota."""

    def __init__(self, db: Session):
        super().__init__(db, PetTypeORM)

    def get_all(self, order_by: Optional[str] = "name", order_desc: bool = False) -> List[PetTypeORM]:
        """Tipos de mascota ordenados alfabéticamente por defecto."""
        return super().get_all(order_by=order_by, order_desc=order_desc)
