"""
Repositorio para la entidad Owner (solo lectura desde la API de mascotas).
"""

from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import OwnerORM


class OwnerRepository(BaseRepository[OwnerORM]):
    """Repositorio para la gestión de propietarios."""

    def __init__(self, db: Session):
        super().__init__(db, OwnerORM)
